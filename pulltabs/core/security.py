"""Webhook signature verification."""

import hashlib
import hmac

from pulltabs.core.exceptions import SignatureVerificationError
from pulltabs.core.logging import get_logger

logger = get_logger("security")

SIGNATURE_PREFIX = "sha1="


def sign_payload(secret: str, payload: bytes) -> str:
    """Compute the X-Hub-Signature header value for a payload."""
    digest = hmac.new(secret.encode(), payload, hashlib.sha1).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_github_signature(secret: str, payload: bytes, signature: str | None) -> bool:
    """Verify a GitHub webhook signature using HMAC-SHA1.

    An empty secret disables verification and every payload is accepted.
    Callers are expected to announce that mode loudly.

    Args:
        secret: Shared webhook secret
        payload: Raw request body bytes
        signature: X-Hub-Signature header value, if any

    Returns:
        True if valid, False otherwise
    """
    if not secret:
        return True

    if not signature:
        return False

    expected_signature = sign_payload(secret, payload)
    return hmac.compare_digest(expected_signature.encode(), signature.encode())


def require_github_signature(
    secret: str,
    payload: bytes,
    signature: str | None,
    request_id: str = "-",
) -> None:
    """Verify GitHub signature or raise exception.

    Raises:
        SignatureVerificationError: If signature is invalid
    """
    if not secret:
        logger.warning(f"No GitHub webhook secret configured, skipping verification for request {request_id}")
        return

    if not verify_github_signature(secret, payload, signature):
        logger.info(f"Signature invalid for request {request_id}")
        raise SignatureVerificationError("GitHub webhook")
