"""Slack service."""

from pulltabs.services.slack.client import Dispatcher
from pulltabs.services.slack.service import format_message

__all__ = ["Dispatcher", "format_message"]
