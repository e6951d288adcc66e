"""Exceptions raised along the event → Slack pipeline."""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(BridgeError):
    """Settings are missing or invalid; fatal at startup."""


class MalformedPayload(BridgeError):
    """A queue payload could not be decoded into a change envelope."""


class DeliveryFailed(BridgeError):
    """The Slack webhook did not accept a message."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        text = super().__str__()
        if self.status_code is not None:
            text += f" (status {self.status_code})"
        if self.cause is not None:
            text += f": {self.cause}"
        return text
