"""
Domain errors raised by the service layer.

Each error carries an :class:`ErrorKind` set where the condition is
detected. The HTTP layer picks a status code from the kind alone.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class ServiceError(Exception):
    """Base class for expected, user-facing failures."""

    kind: ErrorKind
    title: str = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Input rejected before reaching the database."""

    kind = ErrorKind.VALIDATION
    title = "Validation error"


class ConflictError(ServiceError):
    """A unique key (user email) is already taken."""

    kind = ErrorKind.CONFLICT
    title = "Conflict"


class NotFoundError(ServiceError):
    """The referenced row does not exist."""

    kind = ErrorKind.NOT_FOUND
    title = "Not found"
