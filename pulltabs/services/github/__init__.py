"""GitHub service."""

from pulltabs.services.github.service import check_event_type, parse_event, should_notify

__all__ = [
    "check_event_type",
    "parse_event",
    "should_notify",
]
