"""Calls placed to or from an account."""

from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import Field

from ..base.deleter import Deleter
from ..base.descriptor import ResourceDescriptor
from ..base.fetcher import Fetcher
from ..base.reader import Reader
from ..base.resource import DateTime, SidResource
from ..base.writer import Creator, Updater


class CallStatus(str, Enum):
    QUEUED = "queued"
    RINGING = "ringing"
    IN_PROGRESS = "in-progress"
    CANCELED = "canceled"
    COMPLETED = "completed"
    FAILED = "failed"
    BUSY = "busy"
    NO_ANSWER = "no-answer"


class Call(SidResource):
    """A phone call."""

    account_sid: Optional[str] = None
    api_version: Optional[str] = None
    parent_call_sid: Optional[str] = None
    to: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    phone_number_sid: Optional[str] = None
    status: Optional[CallStatus] = None
    direction: Optional[str] = None
    answered_by: Optional[str] = None
    caller_name: Optional[str] = None
    forwarded_from: Optional[str] = None
    start_time: DateTime = None
    end_time: DateTime = None
    duration: Optional[str] = None
    price: Optional[str] = None
    price_unit: Optional[str] = None
    date_created: DateTime = None
    date_updated: DateTime = None
    uri: Optional[str] = None

    @classmethod
    def read(cls, account_sid: str) -> Reader[Call]:
        """Reader over the calls of an account."""
        return Reader(CALL, account_sid=account_sid)

    @classmethod
    def fetch(cls, account_sid: str, sid: str) -> Fetcher[Call]:
        return Fetcher(CALL, account_sid=account_sid, sid=sid)

    @classmethod
    def create(cls, account_sid: str, to: str, from_: str, **params) -> Creator[Call]:
        """
        Creator for an outbound call.

        Args:
            account_sid: Owning account
            to: Number or client identifier to call
            from_: Caller ID
            **params: Further create parameters (url, application_sid, method, ...)
        """
        creator: Creator[Call] = Creator(CALL, account_sid=account_sid)
        creator.set(to=to, from_=from_, **params)
        return creator

    @classmethod
    def update(cls, account_sid: str, sid: str) -> Updater[Call]:
        return Updater(CALL, account_sid=account_sid, sid=sid)

    @classmethod
    def delete(cls, account_sid: str, sid: str) -> Deleter:
        return Deleter(CALL, account_sid=account_sid, sid=sid)


CALL: ResourceDescriptor[Call] = ResourceDescriptor(
    name="Call",
    key="calls",
    decoder=Call.model_validate,
    list_path="/2010-04-01/Accounts/{account_sid}/Calls.json",
    instance_path="/2010-04-01/Accounts/{account_sid}/Calls/{sid}.json",
    filters={
        "to": "To",
        "from_": "From",
        "parent_call_sid": "ParentCallSid",
        "status": "Status",
        "start_time": "StartTime",
        "start_time_before": "StartTime<",
        "start_time_after": "StartTime>",
        "end_time": "EndTime",
        "end_time_before": "EndTime<",
        "end_time_after": "EndTime>",
    },
    create_params={
        "to": "To",
        "from_": "From",
        "url": "Url",
        "application_sid": "ApplicationSid",
        "method": "Method",
        "fallback_url": "FallbackUrl",
        "status_callback": "StatusCallback",
        "status_callback_method": "StatusCallbackMethod",
        "status_callback_event": "StatusCallbackEvent",
        "timeout": "Timeout",
        "record": "Record",
    },
    update_params={
        "url": "Url",
        "method": "Method",
        "status": "Status",
        "fallback_url": "FallbackUrl",
        "status_callback": "StatusCallback",
        "status_callback_method": "StatusCallbackMethod",
    },
    required_create=("to", "from_"),
)
