"""
Page decoding.

A list response carries exactly one array of records under a known key plus
pagination metadata. Two metadata layouts are understood:

    {"calls": [...], "meta": {"next_page_url": "...", "page_size": 50, "key": "calls"}}

    {"calls": [...], "next_page_uri": "/2010-04-01/...", "page_size": 50, "total": 120}

Decoding is strict and all-or-nothing: a missing key or a single bad record
fails the whole page.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import DecodeError
from .decoding import RecordDecoder, decode_record, load_json

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata, normalized across both envelope layouts."""

    next_page_uri: Optional[str] = None
    previous_page_uri: Optional[str] = None
    first_page_uri: Optional[str] = None
    page: Optional[int] = Field(default=None, ge=0)
    page_size: Optional[int] = Field(default=None, ge=0)
    total: Optional[int] = Field(default=None, ge=0)
    key: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("next_page_uri", "previous_page_uri", "first_page_uri", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Servers send "" or null on the last page; both mean no link."""
        if v == "":
            return None
        return v

    @classmethod
    def from_envelope(cls, payload: Dict[str, Any]) -> PageMeta:
        """
        Extract metadata from a list envelope.

        Raises:
            pydantic.ValidationError: If metadata fields have the wrong types
        """
        meta = payload.get("meta")
        if isinstance(meta, dict):
            return cls.model_validate({
                "next_page_uri": meta.get("next_page_url"),
                "previous_page_uri": meta.get("previous_page_url"),
                "first_page_uri": meta.get("first_page_url"),
                "page": meta.get("page"),
                "page_size": meta.get("page_size"),
                "key": meta.get("key"),
            })
        return cls.model_validate({
            "next_page_uri": payload.get("next_page_uri"),
            "previous_page_uri": payload.get("previous_page_uri"),
            "first_page_uri": payload.get("first_page_uri"),
            "page": payload.get("page"),
            "page_size": payload.get("page_size"),
            "total": payload.get("total"),
        })


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One server-delivered batch of records.

    Attributes:
        records: Decoded records in server order
        next_page_uri: Target of the next page; None marks the last page
        previous_page_uri: Target of the previous page, when supplied
        first_page_uri: Target of the first page, when supplied
        page_number: Zero-based page index, when supplied
        page_size: Page size the server applied, when supplied
        total: Total record count hint, when supplied
    """

    records: Tuple[T, ...]
    next_page_uri: Optional[str] = None
    previous_page_uri: Optional[str] = None
    first_page_uri: Optional[str] = None
    page_number: Optional[int] = None
    page_size: Optional[int] = None
    total: Optional[int] = None

    def has_next_page(self) -> bool:
        return self.next_page_uri is not None

    def next_page_target(self) -> Optional[str]:
        """URI of the following page, or None on the last page."""
        return self.next_page_uri

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    @classmethod
    def from_json(cls, key: str, content: bytes, decoder: RecordDecoder[T]) -> Page[T]:
        """
        Decode a list response body.

        Args:
            key: Name of the field holding the record array, e.g. "recordings"
            content: Raw response body
            decoder: Decoder applied to every array element

        Returns:
            Decoded Page

        Raises:
            DecodeError: If the body is not an object, the key is missing or not
                an array, a record fails to decode, or the metadata is malformed
        """
        payload = load_json(content)
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a JSON object for page '{key}'", key=key)
        if key not in payload:
            raise DecodeError(f"Page is missing the '{key}' collection", key=key)
        items = payload[key]
        if not isinstance(items, list):
            raise DecodeError(
                f"Page field '{key}' must be an array, got {type(items).__name__}", key=key
            )

        records = tuple(
            decode_record(item, decoder, f"Record {index} of '{key}'")
            for index, item in enumerate(items)
        )

        try:
            meta = PageMeta.from_envelope(payload)
        except ValidationError as e:
            raise DecodeError(f"Invalid pagination metadata for '{key}': {e}", key=key, cause=e) from e

        return cls(
            records=records,
            next_page_uri=meta.next_page_uri,
            previous_page_uri=meta.previous_page_uri,
            first_page_uri=meta.first_page_uri,
            page_number=meta.page,
            page_size=meta.page_size,
            total=meta.total,
        )
