"""
Base model for resources identified by a SID.

Records are immutable. Two records are equal when they are of the same type
and carry the same ``sid``, regardless of the other fields.
"""

from __future__ import annotations
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator


def parse_datetime(v: Any) -> Optional[datetime]:
    """
    Parse an API timestamp.

    The 2010 API sends RFC 2822 dates ("Tue, 10 Feb 2015 16:17:34 +0000");
    newer endpoints send ISO 8601. Naive values are taken as UTC.
    """
    if v is None or v == "":
        return None
    if isinstance(v, datetime):
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)
    if isinstance(v, str):
        try:
            parsed = parsedate_to_datetime(v)
        except (TypeError, ValueError):
            try:
                parsed = datetime.fromisoformat(v.replace("Z", "+00:00"))
            except ValueError:
                raise ValueError(f"Cannot parse datetime from: {v}") from None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    raise ValueError(f"Cannot parse datetime from type: {type(v)}")


DateTime = Annotated[Optional[datetime], BeforeValidator(parse_datetime)]


class SidResource(BaseModel):
    """Immutable resource record keyed by its SID."""

    sid: str

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SidResource) or type(other) is not type(self):
            return NotImplemented
        return self.sid == other.sid

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.sid))
