"""Render notification facts as Slack attachments."""

from __future__ import annotations

from cloudrepo_slack.schemas import SlackAttachment, SlackField, SlackMessage
from cloudrepo_slack.services.mapper import NotificationFact
from cloudrepo_slack.utils import gravatar_url

TITLE = "Cloud Repo"


def format_message(fact: NotificationFact) -> SlackMessage:
    ts = int(fact.event_time.timestamp()) if fact.event_time else None
    return SlackMessage(
        attachments=[
            SlackAttachment(
                fallback=f"{fact.resource_name}:{fact.ref_name}",
                color=fact.color,
                title=TITLE,
                title_link=fact.commit_url,
                author_name=fact.author_email,
                author_icon=gravatar_url(fact.author_email),
                fields=[
                    SlackField(title="Repository", value=fact.resource_name),
                    SlackField(title="Branch", value=fact.ref_name),
                    SlackField(title="Email", value=fact.author_email),
                    SlackField(title="Update Type", value=fact.update_type),
                    SlackField(title="Commit SHA", value=fact.new_id),
                ],
                ts=ts,
            )
        ]
    )
