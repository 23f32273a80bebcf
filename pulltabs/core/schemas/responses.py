"""Shared response schemas for API endpoints."""

from pydantic import BaseModel


class WebhookResponse(BaseModel):
    """Acknowledgement returned to the webhook sender."""

    success: bool = True
    message: str
    request_id: str | None = None


class ErrorResponse(BaseModel):
    """Standard API error response."""

    success: bool = False
    error: str
    details: dict | None = None
