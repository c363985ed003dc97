"""
Custom exceptions and error handling for the function handlers.

Defines handler-specific exceptions with error codes so every failure can be
turned into a well-formed 400 response at the handler boundary.

Usage:
    from core.errors import MissingFieldError, ErrorCode

    raise MissingFieldError("Missing required field: num1", code=ErrorCode.MISSING_FIELD)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes logged with rejected requests."""

    # Body decoding errors
    INVALID_JSON = "INVALID_JSON"
    INVALID_BODY = "INVALID_BODY"

    # Operand errors
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_NUMBER = "INVALID_NUMBER"

    # Request shape errors
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class HandlerError(Exception):
    """Base exception for all handler errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)


class BodyDecodeError(HandlerError):
    """Request body could not be decoded into a mapping."""

    pass


class MissingFieldError(HandlerError):
    """A required field is absent from the event or its body."""

    pass


class InvalidNumberError(HandlerError):
    """A field has no leading integer (raised only in strict mode)."""

    pass


class InvalidRequestError(HandlerError):
    """The event itself has an unusable shape."""

    pass
