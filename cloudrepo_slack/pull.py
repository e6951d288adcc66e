"""Pull-mode ingress: Pub/Sub streaming pull subscriber."""

from __future__ import annotations

import asyncio
import logging

from google.cloud import pubsub_v1

from cloudrepo_slack.config import Settings
from cloudrepo_slack.handler import Decision, NotificationHandler

logger = logging.getLogger(__name__)


class PullSubscriber:
    """Feeds messages of one subscription into a ``NotificationHandler``."""

    def __init__(
        self,
        settings: Settings,
        handler: NotificationHandler,
        client: pubsub_v1.SubscriberClient | None = None,
    ) -> None:
        self.settings = settings
        self.handler = handler
        self.client = client

    def callback(self, message) -> None:
        """
        Pub/Sub callback; runs on the client's executor threads.

        Every message is acked or nacked exactly once.
        """
        logger.info("received message %s", getattr(message, "message_id", "-"))
        try:
            decision = asyncio.run(self.handler.handle(message.data))
        except Exception:
            logger.exception("unexpected error while handling message")
            decision = Decision.NACK

        if decision is Decision.ACK:
            message.ack()
        else:
            message.nack()

    def run(self) -> None:
        """Block until the subscription stream ends; errors propagate."""
        client = self.client or pubsub_v1.SubscriberClient()
        path = client.subscription_path(self.settings.project_id, self.settings.subscription)
        logger.info("subscribe to %s", path)
        with client:
            future = client.subscribe(path, callback=self.callback)
            try:
                future.result()
            except BaseException:
                future.cancel()
                raise
