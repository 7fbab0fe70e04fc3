"""Notifications (debugger log entries) raised during a call."""

from __future__ import annotations
from typing import Any, Optional

from pydantic import field_validator

from ..base.deleter import Deleter
from ..base.descriptor import ResourceDescriptor
from ..base.fetcher import Fetcher
from ..base.reader import Reader
from ..base.resource import DateTime, SidResource
from ..http.request import HttpMethod


class Notification(SidResource):
    """
    An error or warning logged while handling a call.

    ``log`` is "0" for errors and "1" for warnings.
    """

    account_sid: Optional[str] = None
    api_version: Optional[str] = None
    call_sid: Optional[str] = None
    date_created: DateTime = None
    date_updated: DateTime = None
    error_code: Optional[str] = None
    log: Optional[str] = None
    message_date: DateTime = None
    message_text: Optional[str] = None
    more_info: Optional[str] = None
    request_method: Optional[HttpMethod] = None
    request_url: Optional[str] = None
    request_variables: Optional[str] = None
    response_body: Optional[str] = None
    response_headers: Optional[str] = None
    uri: Optional[str] = None

    @field_validator("request_method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper() or None
        return v

    @classmethod
    def read(cls, account_sid: str, call_sid: str) -> Reader[Notification]:
        """Reader over the notifications of a call."""
        return Reader(NOTIFICATION, account_sid=account_sid, call_sid=call_sid)

    @classmethod
    def fetch(cls, account_sid: str, call_sid: str, sid: str) -> Fetcher[Notification]:
        return Fetcher(NOTIFICATION, account_sid=account_sid, call_sid=call_sid, sid=sid)

    @classmethod
    def delete(cls, account_sid: str, call_sid: str, sid: str) -> Deleter:
        return Deleter(NOTIFICATION, account_sid=account_sid, call_sid=call_sid, sid=sid)


NOTIFICATION: ResourceDescriptor[Notification] = ResourceDescriptor(
    name="Notification",
    key="notifications",
    decoder=Notification.model_validate,
    list_path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Notifications.json",
    instance_path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Notifications/{sid}.json",
    filters={
        "log": "Log",
        "message_date": "MessageDate",
        "message_date_before": "MessageDate<",
        "message_date_after": "MessageDate>",
    },
)
