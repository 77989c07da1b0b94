# src/cms_backend/utils/exceptions.py
from __future__ import annotations


class DomainError(Exception):
    """Base for errors that map onto the {code, message, data} envelope."""

    status_code: int = 500
    default_message: str = "internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(DomainError):
    status_code = 400
    default_message = "invalid input"

    def __init__(self, message: str | None = None):
        super().__init__(f"invalid input: {message}" if message else None)


class Unauthorized(DomainError):
    status_code = 401
    default_message = "unauthorized"


class NotFound(DomainError):
    status_code = 404
    default_message = "not found"


class Conflict(DomainError):
    status_code = 409
    default_message = "conflict"

    def __init__(self, message: str | None = None):
        super().__init__(f"conflict: {message}" if message else None)


class Internal(DomainError):
    status_code = 500
    default_message = "internal error"
