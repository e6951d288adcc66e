"""Transport-independent message handler shared by push and pull ingress."""

from __future__ import annotations

import enum
import logging

from cloudrepo_slack.errors import DeliveryFailed, MalformedPayload
from cloudrepo_slack.services.envelope import decode_envelope
from cloudrepo_slack.services.pipeline import process_envelope
from cloudrepo_slack.services.slack import SlackClient

logger = logging.getLogger(__name__)


class Decision(enum.Enum):
    ACK = "ack"
    NACK = "nack"


class NotificationHandler:
    """
    Decode a queue payload and deliver its notifications.

    Outcome → decision
    ------------------
    - malformed payload   → ACK (redelivery cannot fix it)
    - delivery failure    → NACK (ask the queue to redeliver)
    - everything else     → ACK
    """

    def __init__(self, slack: SlackClient) -> None:
        self.slack = slack

    async def handle(self, payload: bytes | str) -> Decision:
        try:
            envelope = decode_envelope(payload)
        except MalformedPayload as exc:
            logger.warning("discarding malformed payload: %s", exc)
            return Decision.ACK

        try:
            await process_envelope(envelope, self.slack)
        except DeliveryFailed as exc:
            logger.error("delivery failed for %s: %s", envelope.name or "-", exc)
            return Decision.NACK
        return Decision.ACK
