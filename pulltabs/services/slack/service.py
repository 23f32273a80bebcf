"""Slack service - message formatting."""

from pulltabs.config import NotifierConfig
from pulltabs.services.github.schemas import PullRequestEvent
from pulltabs.services.slack.schemas import Attachment, OutboundMessage

ATTACHMENT_COLOR = "good"
CALL_TO_ACTION = "Review me please"


def format_message(event: PullRequestEvent, config: NotifierConfig) -> OutboundMessage:
    """Build the Slack alert for a labeled pull request."""
    return OutboundMessage(
        text=config.message,
        attachments=[
            Attachment(
                fallback=config.message,
                color=ATTACHMENT_COLOR,
                pretext=f"Pull request tagged with {config.label}",
                title=event.pull_request.title,
                title_link=event.pull_request.html_url,
                text=CALL_TO_ACTION,
            )
        ],
    )
