"""Wire schemas: Pub/Sub payloads in, Slack webhook documents out."""

from __future__ import annotations

import base64
import binascii
import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Attachment keys Slack should not receive when empty.
OMIT_EMPTY = ("author_name", "author_icon", "ts")


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null means "absent", so the field default applies.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class RefUpdate(_WireModel):
    """One ref mutation inside a Cloud Source Repositories event."""

    ref_name: str = Field("", alias="refName")
    update_type: str = Field("", alias="updateType")
    old_id: str = Field("", alias="oldId")
    new_id: str = Field("", alias="newId")


class RefUpdateEvent(_WireModel):
    email: str = ""
    ref_updates: dict[str, RefUpdate] = Field(default_factory=dict, alias="refUpdates")


class ChangeEnvelope(_WireModel):
    """
    Decoded Pub/Sub payload.

    ``name`` looks like ``projects/{project}/repos/{repo}``.
    """

    name: str = ""
    url: str = ""
    event_time: Optional[datetime] = Field(None, alias="eventTime")
    ref_update_event: RefUpdateEvent = Field(
        default_factory=RefUpdateEvent, alias="refUpdateEvent"
    )


class PushMessage(_WireModel):
    data: Any = ""
    id: str = ""
    message_id: str = Field("", alias="messageId")
    publish_time: Optional[str] = Field(None, alias="publishTime")

    def raw_payload(self) -> bytes:
        """
        Return the inner payload bytes.

        Pub/Sub sends ``data`` base64-encoded; anything that is not valid
        base64 is passed through as-is.
        """
        if isinstance(self.data, (dict, list)):
            return json.dumps(self.data).encode()
        text = str(self.data or "")
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError):
            return text.encode()


class PushRequest(_WireModel):
    """Pub/Sub push wrapper: ``{message: {...}, subscription}``."""

    message: PushMessage = Field(default_factory=PushMessage)
    subscription: str = ""


class SlackField(BaseModel):
    title: str
    value: str
    short: bool = False


class SlackAttachment(BaseModel):
    fallback: str
    color: str
    title: str
    title_link: str
    author_name: str = ""
    author_icon: str = ""
    fields: list[SlackField] = Field(default_factory=list)
    ts: Optional[int] = None


class SlackMessage(BaseModel):
    """Incoming-webhook document."""

    text: Optional[str] = None
    attachments: list[SlackAttachment] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        data = self.model_dump(exclude_none=True)
        for attachment in data.get("attachments", []):
            for key in OMIT_EMPTY:
                if key in attachment and not attachment[key]:
                    del attachment[key]
        return data
