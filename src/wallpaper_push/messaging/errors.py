"""Messaging-related errors."""

from __future__ import annotations


class DeliveryError(Exception):
    """Raised when the messaging backend rejects or cannot accept a message."""

    def __init__(self, detail: str, *, status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        if status_code is None:
            super().__init__(detail)
        else:
            super().__init__(f"status {status_code}: {detail}")


class CredentialsError(ValueError):
    """Raised when service-account credentials are missing or malformed."""
