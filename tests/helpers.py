"""Payload builders shared by the tests."""

import json


SLACK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


def make_event(
    updates: dict | None = None,
    name: str = "projects/p1/repos/r1",
    email: str = "a@b.com",
    **extra,
) -> dict:
    """Build a Cloud Source Repositories Pub/Sub payload (camelCase keys)."""
    if updates is None:
        updates = {
            "x": {
                "refName": "refs/heads/main",
                "updateType": "CREATE",
                "newId": "abc123",
            }
        }
    event = {
        "name": name,
        "url": f"https://source.developers.google.com/{name}",
        "refUpdateEvent": {"email": email, "refUpdates": updates},
    }
    event.update(extra)
    return event


def encode_event(event: dict) -> bytes:
    return json.dumps(event).encode()


