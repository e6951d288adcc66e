"""the beautiful world start from here."""

from __future__ import annotations

from fastapi import FastAPI

from cloudrepo_slack.config import Settings
from cloudrepo_slack.handler import NotificationHandler
from cloudrepo_slack.routers import pubsub
from cloudrepo_slack.services.slack import SlackClient


def create_app(settings: Settings, handler: NotificationHandler | None = None) -> FastAPI:
    """Build the push-mode app around an explicit settings value."""
    app = FastAPI(title="Cloud Repo → Slack (Pub/Sub push)")
    app.state.handler = handler or NotificationHandler(SlackClient(settings.slack_url))
    app.include_router(pubsub.router)
    return app
