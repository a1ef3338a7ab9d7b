"""
Custom Exception Classes for language negotiation

This module defines the error taxonomy of the negotiation engine. Every
failure is representable and meant to become a client-visible HTTP status:

    BadRequestError     → 400  (header unusable in a way a stricter grammar rejects)
    NotAcceptableError  → 406  (no candidate language met the server's support)
    NotFoundError       → 404  (designated URL segment absent or not a known code)
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes carried in the JSON error envelope."""

    LANGUAGE_BAD_REQUEST = "LANGUAGE_BAD_REQUEST"
    LANGUAGE_NOT_ACCEPTABLE = "LANGUAGE_NOT_ACCEPTABLE"
    LANGUAGE_NOT_FOUND = "LANGUAGE_NOT_FOUND"

    # Generic HTTP errors
    BAD_REQUEST = "BAD_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class LangError(Exception):
    """Base exception class for all fastapi-lang exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Negotiation Exceptions
# ============================================================================


class NegotiationError(LangError):
    """Base class for the three negotiation outcomes that are not a language.

    Instances carry no payload beyond their kind; ``details`` stays empty
    unless a custom resolver chooses to attach something.
    """


class BadRequestError(NegotiationError):
    """Raised when the request cannot yield any candidate language at all"""

    def __init__(self, message: str = "Malformed language request", details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ErrorCode.LANGUAGE_BAD_REQUEST,
            details=details,
        )


class NotAcceptableError(NegotiationError):
    """Raised when none of the requested languages are supported"""

    def __init__(self, message: str = "Unsupported language", details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            error_code=ErrorCode.LANGUAGE_NOT_ACCEPTABLE,
            details=details,
        )


class NotFoundError(NegotiationError):
    """Raised when the designated URL segment is missing or not a language code"""

    def __init__(self, message: str = "Language not found", details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.LANGUAGE_NOT_FOUND,
            details=details,
        )
