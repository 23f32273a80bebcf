"""GitHub webhook routes."""

from uuid import uuid4

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from starlette.requests import ClientDisconnect

from pulltabs.config import NotifierConfig
from pulltabs.core.exceptions import PayloadParseError, RequestReadError
from pulltabs.core.logging import get_logger
from pulltabs.core.schemas.responses import WebhookResponse
from pulltabs.core.security import require_github_signature
from pulltabs.dependencies import get_config, get_dispatcher
from pulltabs.services.github.service import check_event_type, parse_event, should_notify
from pulltabs.services.slack.client import Dispatcher
from pulltabs.services.slack.service import format_message

logger = get_logger("github.routes")

router = APIRouter()


@router.post("/payload{suffix:path}", response_model=WebhookResponse)
async def github_payload(
    request: Request,
    background_tasks: BackgroundTasks,
    config: NotifierConfig = Depends(get_config),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WebhookResponse:
    """Handle GitHub webhook deliveries."""
    request_id = request.headers.get("X-GitHub-Delivery") or uuid4().hex
    logger.info(f"Serving request {request_id}")

    try:
        body = await request.body()
    except ClientDisconnect as e:
        logger.warning(f"Could not read body for request {request_id}")
        raise RequestReadError() from e

    require_github_signature(
        config.secret,
        body,
        request.headers.get("X-Hub-Signature"),
        request_id=request_id,
    )

    event_type = check_event_type(request.headers.get("X-GitHub-Event"))

    try:
        event = parse_event(event_type, body)
    except PayloadParseError as e:
        logger.info(f"Failed to parse JSON for request {request_id}: {e.details.get('reason', '')}")
        raise

    if event is None:
        logger.info(f"Ping received for request {request_id}")
        return WebhookResponse(message="pong", request_id=request_id)

    if should_notify(event, config.label):
        dispatcher.dispatch(background_tasks, format_message(event, config), request_id)
        message = "Notification queued"
    else:
        logger.info(
            f"Skipping message Action: {event.action}\t"
            f"Label: {event.label.name}\tState: {event.pull_request.state}"
        )
        message = "Event skipped"

    logger.info(f"Successful handling of update for request {request_id}")
    return WebhookResponse(message=message, request_id=request_id)
