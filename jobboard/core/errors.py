"""
Typed application errors.

Every error carries the HTTP status it maps to and a client-safe message.
They are raised by the service layer and the auth dependencies and rendered
as ``{"message": ...}`` by the exception handlers registered in main.py.
"""

from typing import Dict, Optional

from fastapi import HTTPException, status

from jobboard.core import messages


class AppError(HTTPException):
    """Base class for all errors the API reports on purpose."""

    def __init__(self, status_code: int, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    def __init__(self, message: str):
        super().__init__(status.HTTP_404_NOT_FOUND, message)


class UniqueConstraintError(AppError):
    """A write collided with a unique index (username, email, profile, application pair)."""

    def __init__(self, message: str):
        super().__init__(status.HTTP_409_CONFLICT, message)


class SchemaValidationError(AppError):
    """A write was rejected by the record's own schema validation."""

    def __init__(self, message: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class UnauthorizedError(AppError):
    def __init__(self, message: str = messages.UNAUTHORIZED):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(AppError):
    def __init__(self, message: str = messages.FORBIDDEN):
        super().__init__(status.HTTP_403_FORBIDDEN, message)


class ServerError(AppError):
    """Anything unexpected. The message never leaks the underlying cause."""

    def __init__(self, message: str = messages.UNEXPECTED_ERROR):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class DocumentValidationError(Exception):
    """
    Raised from the store's before-insert/update hooks when a record
    breaks one of its field rules.
    """

    def __init__(self, resource: str, failures: list):
        self.resource = resource
        self.failures = failures
        details = ", ".join(f"{field}: {message}" for field, message in failures)
        super().__init__(f"{resource} validation failed: {details}")
