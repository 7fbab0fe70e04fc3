"""
Inbound response envelope.

The body is a stream that can be read exactly once. Headers are
case-insensitive.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol

from requests.structures import CaseInsensitiveDict


class BodyStream(Protocol):
    """Minimal file-like interface the response body must provide."""

    def read(self) -> bytes: ...

    def close(self) -> None: ...


class Response:
    """Raw result of one HTTP call."""

    def __init__(self, status_code: int, body: BodyStream,
                 headers: Optional[Mapping[str, str]] = None):
        self.status_code = status_code
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict(headers or {})
        self._body = body
        self._consumed = False
        self._closed = False

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> bytes:
        """
        Read the whole body.

        Returns:
            Body bytes

        Raises:
            RuntimeError: If the body was already read or the response closed
        """
        if self._consumed:
            raise RuntimeError("Response body has already been read")
        if self._closed:
            raise RuntimeError("Response has been closed")
        self._consumed = True
        return self._body.read() or b""

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._body.close()

    def __enter__(self) -> Response:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code})"
