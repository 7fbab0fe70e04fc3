"""
Twilio SDK Error Model

This module provides the error taxonomy shared by every operation in the SDK.
Three kinds of failure exist and callers can tell them apart by class or by
``kind``:

- ``ApiConnectionError``: no response was obtained from the server
- ``ApiError``: the server answered with a non-success status
- ``DecodeError``: the server answered successfully but the body did not
  match the expected page or record shape
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    CONNECTION = "connection"
    API = "api"
    DECODE = "decode"


class TwilioError(Exception):
    """
    Base class for all SDK errors.

    All errors are terminal for the operation that raised them; the SDK does
    not retry on its own.
    """

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize an SDK error.

        Args:
            message: Human-readable error message
            cause: Underlying exception, if any
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        parts = [f"[{self.kind.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ApiConnectionError(TwilioError):
    """No response could be obtained from the server."""

    kind = ErrorKind.CONNECTION


class ApiError(TwilioError):
    """
    The server returned a non-success status.

    Attributes:
        code: Twilio error code, when the server supplied one
        more_info: Link to the error documentation, when supplied
        status: HTTP status of the failed response
    """

    kind = ErrorKind.API

    def __init__(self, message: str, code: Optional[int] = None, more_info: Optional[str] = None,
                 status: Optional[int] = None, cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, cause=cause, details=details)
        self.code = code
        self.more_info = more_info
        self.status = status

    def __str__(self) -> str:
        prefix = f"HTTP {self.status}" if self.status is not None else "HTTP ?"
        if self.code is not None:
            prefix = f"{prefix} ({self.code})"
        text = f"{prefix}: {self.message}"
        if self.more_info:
            text = f"{text} | More info: {self.more_info}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["code"] = self.code
        result["more_info"] = self.more_info
        result["status"] = self.status
        return result


class RestExceptionParseError(ApiError):
    """The error body of a failed response could not be parsed."""


class DecodeError(TwilioError):
    """A successful response did not match the expected page or record schema."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, key: Optional[str] = None,
                 cause: Optional[BaseException] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, cause=cause, details=details)
        self.key = key


__all__ = [
    "ErrorKind",
    "TwilioError",
    "ApiConnectionError",
    "ApiError",
    "RestExceptionParseError",
    "DecodeError",
]
