"""Recordings of a call."""

from __future__ import annotations
from typing import Optional

from ..base.deleter import Deleter
from ..base.descriptor import ResourceDescriptor
from ..base.fetcher import Fetcher
from ..base.reader import Reader
from ..base.resource import DateTime, SidResource


class Recording(SidResource):
    """A recording made during a call."""

    account_sid: Optional[str] = None
    api_version: Optional[str] = None
    call_sid: Optional[str] = None
    date_created: DateTime = None
    date_updated: DateTime = None
    start_time: DateTime = None
    duration: Optional[str] = None
    channels: Optional[int] = None
    source: Optional[str] = None
    status: Optional[str] = None
    price: Optional[str] = None
    price_unit: Optional[str] = None
    error_code: Optional[int] = None
    uri: Optional[str] = None

    @classmethod
    def read(cls, account_sid: str, call_sid: str) -> Reader[Recording]:
        """Reader over the recordings of a call."""
        return Reader(RECORDING, account_sid=account_sid, call_sid=call_sid)

    @classmethod
    def fetch(cls, account_sid: str, call_sid: str, sid: str) -> Fetcher[Recording]:
        return Fetcher(RECORDING, account_sid=account_sid, call_sid=call_sid, sid=sid)

    @classmethod
    def delete(cls, account_sid: str, call_sid: str, sid: str) -> Deleter:
        return Deleter(RECORDING, account_sid=account_sid, call_sid=call_sid, sid=sid)


RECORDING: ResourceDescriptor[Recording] = ResourceDescriptor(
    name="Recording",
    key="recordings",
    decoder=Recording.model_validate,
    list_path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Recordings.json",
    instance_path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Recordings/{sid}.json",
    filters={
        "date_created": "DateCreated",
        "date_created_before": "DateCreated<",
        "date_created_after": "DateCreated>",
    },
)
