"""
HTTP transport.

The SDK core talks to the network only through ``HttpClient.make_request``,
which returns a Response or None when no response could be obtained. Pooling,
TLS and timeouts live in the concrete client; no retries are performed.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

import requests

from ..exceptions import ApiConnectionError
from .request import HttpMethod, Request
from .response import Response


logger = logging.getLogger(__name__)


class HttpClient(ABC):
    """
    Abstract transport.

    Implementations must return None rather than raise when the network layer
    produced no response, and record the underlying exception in last_error.
    """

    def __init__(self) -> None:
        self.last_error: Optional[BaseException] = None

    @abstractmethod
    def make_request(self, request: Request) -> Optional[Response]:
        """
        Send a request.

        Args:
            request: Request to send

        Returns:
            Response, or None if the transport failed
        """

    def close(self) -> None:
        """Release transport resources."""


class _RequestsBody:
    """Adapts a streamed requests.Response to the read-once body interface."""

    def __init__(self, response: requests.Response):
        self._response = response

    def read(self) -> bytes:
        try:
            return self._response.content
        except requests.RequestException as e:
            logger.warning("Reading response body failed: %s", e)
            raise ApiConnectionError(f"Failed to read response body: {e}", cause=e) from e

    def close(self) -> None:
        self._response.close()


class RequestsHttpClient(HttpClient):
    """
    Transport backed by a requests.Session.

    Example:
        ```python
        http = RequestsHttpClient("https://api.twilio.com", auth=("AC123", "token"))
        response = http.make_request(request)
        ```
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[Tuple[str, str]] = None,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the transport.

        Args:
            base_url: Base URL that relative request paths are joined to
            auth: (username, password) for HTTP basic auth
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            session: Optional requests.Session for connection pooling
        """
        super().__init__()
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._user_agent = user_agent
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        return headers

    def make_request(self, request: Request) -> Optional[Response]:
        self.last_error = None
        url = request.url(self._base_url)
        kwargs: Dict[str, Any] = {
            "params": list(request.query_params) or None,
            "headers": self._headers(),
            "auth": self._auth,
            "timeout": self._timeout,
            "stream": True,
        }
        if request.method in (HttpMethod.POST, HttpMethod.PUT):
            kwargs["data"] = list(request.post_params)

        logger.debug("%s %s (account=%s)", request.method.value, url, request.account_sid)
        try:
            raw = self._session.request(request.method.value, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", request.method.value, url, e)
            self.last_error = e
            return None

        return Response(raw.status_code, _RequestsBody(raw), raw.headers)

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()
