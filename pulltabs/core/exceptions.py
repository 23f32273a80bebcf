"""Custom exceptions for the application."""


class ApiException(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class BadRequestError(ApiException):
    """Client sent something we cannot handle."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(400, message, details)


class UnsupportedEventError(BadRequestError):
    """GitHub event type other than ping or pull_request."""

    def __init__(self, event_type: str) -> None:
        super().__init__(f"Unsupported event type: {event_type}")
        self.event_type = event_type


class PayloadParseError(BadRequestError):
    """Event body could not be decoded."""

    def __init__(self, reason: str = "") -> None:
        super().__init__("Failed to parse JSON", {"reason": reason} if reason else None)


class NotFoundError(ApiException):
    """No handler for the requested method and path."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(404, f"No handler for {method} {path}")


class UnauthorizedError(ApiException):
    """Unauthorized access exception."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(401, message)


class SignatureVerificationError(UnauthorizedError):
    """Webhook signature verification failed."""

    def __init__(self, source: str = "webhook") -> None:
        super().__init__(f"Invalid {source} signature")


class RequestReadError(ApiException):
    """Request body could not be read."""

    def __init__(self) -> None:
        super().__init__(500, "Could not read request")


class DeliveryError(Exception):
    """Outbound Slack delivery failed. Logged, never returned to the sender."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class SerializationError(DeliveryError):
    """Outbound message could not be encoded to its wire form."""
