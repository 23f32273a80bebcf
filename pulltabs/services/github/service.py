"""GitHub service - event parsing and filtering."""

from pydantic import ValidationError

from pulltabs.core.exceptions import PayloadParseError, UnsupportedEventError
from pulltabs.core.logging import get_logger
from pulltabs.services.github.schemas import (
    PING_EVENT,
    PULL_REQUEST_EVENT,
    SUPPORTED_EVENTS,
    PullRequestEvent,
)

logger = get_logger("github.service")

NOTIFY_ACTION = "labeled"
NOTIFY_STATE = "open"


def check_event_type(event_type: str | None) -> str:
    """Return the event type if supported, raise otherwise."""
    if event_type not in SUPPORTED_EVENTS:
        raise UnsupportedEventError(event_type or "")
    return event_type


def parse_event(event_type: str, body: bytes) -> PullRequestEvent | None:
    """
    Decode a webhook body.

    Returns None for ping events, whose body is never looked at.

    Raises:
        UnsupportedEventError: For any event type other than ping or pull_request
        PayloadParseError: If a pull_request body is not a valid event object
    """
    check_event_type(event_type)
    if event_type == PING_EVENT:
        return None

    try:
        return PullRequestEvent.model_validate_json(body)
    except ValidationError as e:
        raise PayloadParseError(f"{e.error_count()} validation error(s) for {PULL_REQUEST_EVENT}") from e


def should_notify(event: PullRequestEvent, watched_label: str) -> bool:
    """
    Decide whether an event deserves a Slack alert.

    The label check is a substring match: a watched label of "review" also
    matches "awaiting review" and "no review needed".
    """
    return (
        event.action == NOTIFY_ACTION
        and event.pull_request.state == NOTIFY_STATE
        and watched_label in event.label.name
    )
