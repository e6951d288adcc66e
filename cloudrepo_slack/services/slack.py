"""Yet another slack services"""

from __future__ import annotations

import logging

import httpx

from cloudrepo_slack.errors import DeliveryFailed
from cloudrepo_slack.schemas import SlackMessage

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_SECONDS = 5


class SlackClient:
    """Posts messages to one Slack incoming webhook."""

    def __init__(self, webhook_url: str, timeout: float = HTTP_TIMEOUT_SECONDS) -> None:
        self.webhook_url = webhook_url
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    async def send(self, message: SlackMessage) -> None:
        """
        Send one message; a single attempt, no retries.

        An empty webhook URL turns delivery into a no-op.

        Raises
        ------
        DeliveryFailed
            Serialization error, network error, or any status other than 200.
        """
        if not self.enabled:
            return

        try:
            payload = message.to_payload()
        except (TypeError, ValueError) as exc:
            raise DeliveryFailed("cannot serialize slack message", cause=exc) from exc

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(self.webhook_url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DeliveryFailed("slack request failed", cause=exc) from exc

        if resp.status_code != 200:
            raise DeliveryFailed(
                f"slack response not ok: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        logger.debug("slack message delivered")
