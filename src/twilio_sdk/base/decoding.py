"""JSON body and record decoding shared by pages and single-resource operations."""

from __future__ import annotations
import json
from typing import Any, Callable, Dict, TypeVar

from pydantic import ValidationError

from ..exceptions import DecodeError

T = TypeVar("T")

# Turns one JSON object into a typed record; raises on schema mismatch.
RecordDecoder = Callable[[Dict[str, Any]], T]

_DECODER_ERRORS = (ValidationError, ValueError, TypeError, KeyError)


def load_json(content: bytes) -> Any:
    """
    Parse a response body.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        return json.loads(content)
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}", cause=e) from e


def decode_record(data: Any, decoder: RecordDecoder[T], context: str) -> T:
    """
    Decode one JSON object into a record.

    Args:
        data: Parsed JSON value
        decoder: Record decoder
        context: Where the value came from, used in error messages

    Raises:
        DecodeError: If data is not an object or the decoder rejects it
    """
    if not isinstance(data, dict):
        raise DecodeError(f"{context}: expected a JSON object, got {type(data).__name__}")
    try:
        return decoder(data)
    except _DECODER_ERRORS as e:
        raise DecodeError(f"{context}: {e}", cause=e) from e
