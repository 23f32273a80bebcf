"""Shared library utilities."""

from pulltabs.core.logging import get_logger
from pulltabs.core.security import require_github_signature, sign_payload, verify_github_signature

__all__ = [
    "get_logger",
    "require_github_signature",
    "sign_payload",
    "verify_github_signature",
]
