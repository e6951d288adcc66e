"""Ruter Pub/Sub push?"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response
from pydantic import ValidationError

from cloudrepo_slack.handler import Decision, NotificationHandler
from cloudrepo_slack.schemas import PushRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pubsub"])

JSON_MEDIA_TYPE = "application/json"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _media_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


@router.get("/healthz", include_in_schema=False)
async def healthz() -> Response:
    return Response("ok", media_type="text/plain")


@router.api_route("/", methods=ALL_METHODS)
@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def pubsub_push(request: Request) -> Response:
    """
    Pub/Sub push endpoint, mounted on every path.

    Always answers 204: a push subscription cannot be asked to redeliver from
    here, so failures are only logged.
    """
    no_content = Response(status_code=204)

    if request.method != "POST":
        return no_content
    if _media_type(request.headers.get("content-type")) != JSON_MEDIA_TYPE:
        return no_content

    body = await request.body()
    try:
        push = PushRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("cannot decode push request: %s", exc.error_count())
        return no_content

    if not push.subscription:
        logger.warning("invalid message")
        return no_content

    logger.info(
        "received push message from %s (published %s)",
        push.subscription,
        push.message.publish_time or "-",
    )

    handler: NotificationHandler = request.app.state.handler
    decision = await handler.handle(push.message.raw_payload())
    if decision is Decision.NACK:
        logger.error(
            "push message %s dropped after delivery failure",
            push.message.message_id or push.message.id or "-",
        )
    return no_content
