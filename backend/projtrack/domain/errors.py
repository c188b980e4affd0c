"""Error taxonomy shared by the store and the HTTP layer.

Every error maps to exactly one HTTP status code. The API registers a single
handler for ``TrackerError`` which renders ``to_body()`` as the JSON response.
"""
from __future__ import annotations
from typing import List, Optional


class TrackerError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message}


class ValidationError(TrackerError):
    """Malformed, missing or out-of-enum input. Carries per-field detail."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(TrackerError):
    status_code = 404
    default_message = "Not found"


class ConflictError(TrackerError):
    status_code = 409
    default_message = "Conflict"


class AuthenticationError(TrackerError):
    status_code = 401
    default_message = "Invalid credentials"


class InternalError(TrackerError):
    status_code = 500
    default_message = "Internal server error"
