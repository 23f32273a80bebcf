"""Core schemas for API responses."""

from pulltabs.core.schemas.responses import ErrorResponse, WebhookResponse

__all__ = ["ErrorResponse", "WebhookResponse"]
