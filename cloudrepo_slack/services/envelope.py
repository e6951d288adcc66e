"""Decode Pub/Sub payloads into change envelopes."""

from __future__ import annotations

from pydantic import ValidationError

from cloudrepo_slack.errors import MalformedPayload
from cloudrepo_slack.schemas import ChangeEnvelope


def decode_envelope(payload: bytes | str) -> ChangeEnvelope:
    """
    Parse a raw queue payload.

    Raises
    ------
    MalformedPayload
        Invalid JSON, a non-object document, or fields of the wrong type.
    """
    try:
        return ChangeEnvelope.model_validate_json(payload)
    except ValidationError as exc:
        raise MalformedPayload(f"invalid change event: {exc.error_count()} error(s)") from exc
