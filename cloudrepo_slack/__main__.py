"""Entry point: ``python -m cloudrepo_slack`` (or ``cloudrepo-slack``)."""

from __future__ import annotations

import logging

import uvicorn

from cloudrepo_slack.app import create_app
from cloudrepo_slack.config import Settings
from cloudrepo_slack.errors import ConfigurationError
from cloudrepo_slack.handler import NotificationHandler
from cloudrepo_slack.pull import PullSubscriber
from cloudrepo_slack.services.slack import SlackClient

logger = logging.getLogger("cloudrepo_slack")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def start_push(settings: Settings) -> None:
    logger.info("Listening on %s", settings.port)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port, log_level="info")


def start_pull(settings: Settings) -> None:
    handler = NotificationHandler(SlackClient(settings.slack_url))
    PullSubscriber(settings, handler).run()


def main() -> None:
    try:
        settings = Settings.load().validate()
    except ConfigurationError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.critical("invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if not settings.slack_url:
        logger.warning("slack_url is empty, notifications are disabled")

    try:
        if settings.mode == "push":
            start_push(settings)
        else:
            start_pull(settings)
    except KeyboardInterrupt:
        logger.info("shutting down")
    except Exception as exc:
        logger.critical("fatal: %s", exc, exc_info=True)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
