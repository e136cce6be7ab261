"""Error types shared across the application.

Every error carries an ``ErrorKind`` so callers can tell hard failures
(validation, missing entities) from soft outcomes reported in results.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of failures and soft outcomes."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ACTION_FAILED = "action_failed"
    IGNORED = "ignored"


class SmartHomeError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind = ErrorKind.ACTION_FAILED

    def __init__(self, message: str, kind: ErrorKind | None = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)


class ValidationError(SmartHomeError):
    """Raised when input fails validation."""

    kind = ErrorKind.VALIDATION


class NotFoundError(SmartHomeError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")
