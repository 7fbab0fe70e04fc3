"""
Outbound request envelope.

A Request is immutable once built. Query and form parameters are appended
through a RequestBuilder, which refuses further changes after build().
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
from urllib.parse import urljoin


class HttpMethod(str, Enum):
    """HTTP verbs used by the REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


Param = Tuple[str, str]


@dataclass(frozen=True)
class Request:
    """Immutable description of one outbound call."""

    method: HttpMethod
    uri: str
    account_sid: Optional[str] = None
    query_params: Tuple[Param, ...] = ()
    post_params: Tuple[Param, ...] = ()

    def url(self, base_url: str) -> str:
        """
        Resolve the request target against a base URL.

        Absolute http(s) URIs, such as server-issued continuation links, are
        returned unchanged.

        Args:
            base_url: Base URL of the API (e.g. https://api.twilio.com)

        Returns:
            Fully-qualified URL without the query string
        """
        if self.uri.startswith(("http://", "https://")):
            return self.uri
        return urljoin(base_url.rstrip("/") + "/", self.uri.lstrip("/"))

    def query_values(self, name: str) -> List[str]:
        """Return every value sent for a query parameter, in order."""
        return [value for key, value in self.query_params if key == name]


class RequestBuilder:
    """
    Accumulates parameters for a Request.

    Example:
        ```python
        request = (
            RequestBuilder(HttpMethod.GET, "/2010-04-01/Accounts/AC123/Calls.json", "AC123")
            .add_query_param("Status", "completed")
            .add_query_param("PageSize", "50")
            .build()
        )
        ```
    """

    def __init__(self, method: HttpMethod, uri: str, account_sid: Optional[str] = None):
        self._method = HttpMethod(method)
        self._uri = uri
        self._account_sid = account_sid
        self._query_params: List[Param] = []
        self._post_params: List[Param] = []
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Request has already been built")

    def add_query_param(self, name: str, value: str) -> RequestBuilder:
        """Append a query parameter; repeating a name sends it multiple times."""
        self._check_open()
        self._query_params.append((name, value))
        return self

    def add_post_param(self, name: str, value: str) -> RequestBuilder:
        """Append a form-encoded body parameter."""
        self._check_open()
        self._post_params.append((name, value))
        return self

    def build(self) -> Request:
        """Freeze the accumulated state into a Request."""
        self._check_open()
        self._built = True
        return Request(
            method=self._method,
            uri=self._uri,
            account_sid=self._account_sid,
            query_params=tuple(self._query_params),
            post_params=tuple(self._post_params),
        )
