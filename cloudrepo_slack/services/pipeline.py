"""Envelope → Slack pipeline."""

from __future__ import annotations

import logging

from cloudrepo_slack.schemas import ChangeEnvelope, SlackMessage
from cloudrepo_slack.services.formatter import format_message
from cloudrepo_slack.services.mapper import build_fact
from cloudrepo_slack.services.slack import SlackClient

logger = logging.getLogger(__name__)


def build_messages(envelope: ChangeEnvelope) -> list[SlackMessage]:
    """
    Render every notifiable ref update of ``envelope``.

    Updates are visited in ascending key order so a batch always runs the
    same way.
    """
    messages: list[SlackMessage] = []
    updates = envelope.ref_update_event.ref_updates
    for key in sorted(updates):
        fact = build_fact(envelope, updates[key])
        if fact is not None:
            messages.append(format_message(fact))
    return messages


async def process_envelope(envelope: ChangeEnvelope, slack: SlackClient) -> int:
    """
    Deliver the notifications of one envelope and return how many were sent.

    Fail-fast: the first ``DeliveryFailed`` stops the batch and propagates.
    Messages sent before the failure stay sent.
    """
    sent = 0
    for message in build_messages(envelope):
        await slack.send(message)
        sent += 1
    if sent:
        logger.info("delivered %d notification(s) for %s", sent, envelope.name)
    return sent
