"""Tests for the Slack message formatter."""

from datetime import datetime, timezone

from cloudrepo_slack.services.formatter import format_message
from cloudrepo_slack.services.mapper import NotificationFact
from cloudrepo_slack.utils import gravatar_url


def _fact(**overrides) -> NotificationFact:
    values = dict(
        resource_name="projects/p1/repos/r1",
        project_id="p1",
        repo_name="r1",
        commit_url="https://source.cloud.google.com/p1/r1/+/abc123",
        ref_name="refs/heads/main",
        author_email="a@b.com",
        update_type="CREATE",
        color="#2e77ff",
        new_id="abc123",
    )
    values.update(overrides)
    return NotificationFact(**values)


def test_format_message_document():
    payload = format_message(_fact()).to_payload()

    assert payload == {
        "attachments": [
            {
                "fallback": "projects/p1/repos/r1:refs/heads/main",
                "color": "#2e77ff",
                "title": "Cloud Repo",
                "title_link": "https://source.cloud.google.com/p1/r1/+/abc123",
                "author_name": "a@b.com",
                "author_icon": gravatar_url("a@b.com"),
                "fields": [
                    {"title": "Repository", "value": "projects/p1/repos/r1", "short": False},
                    {"title": "Branch", "value": "refs/heads/main", "short": False},
                    {"title": "Email", "value": "a@b.com", "short": False},
                    {"title": "Update Type", "value": "CREATE", "short": False},
                    {"title": "Commit SHA", "value": "abc123", "short": False},
                ],
            }
        ]
    }


def test_update_type_field_is_raw_type_not_color():
    message = format_message(_fact(update_type="DELETE", color="#ff6d2e"))
    attachment = message.attachments[0]

    assert attachment.color == "#ff6d2e"
    assert [f.title for f in attachment.fields] == [
        "Repository",
        "Branch",
        "Email",
        "Update Type",
        "Commit SHA",
    ]
    assert attachment.fields[3].value == "DELETE"


def test_empty_email_omits_author():
    message = format_message(_fact(author_email=""))

    assert message.attachments[0].author_icon == ""
    attachment = message.to_payload()["attachments"][0]
    assert "author_icon" not in attachment
    assert "author_name" not in attachment


def test_event_time_sets_ts():
    when = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    attachment = format_message(_fact(event_time=when)).to_payload()["attachments"][0]

    assert attachment["ts"] == int(when.timestamp())


def test_formatting_is_pure():
    fact = _fact()
    assert format_message(fact) == format_message(fact)
