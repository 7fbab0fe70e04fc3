"""
Account-scoped REST client.

Couples an account identity with a transport. Operation objects (readers,
fetchers, ...) stamp outgoing requests with ``account_sid`` and send them
through ``request``.
"""

from __future__ import annotations
from typing import Any, Optional

from ..config import ClientConfig
from ..http.client import HttpClient, RequestsHttpClient
from ..http.request import Request
from ..http.response import Response


class RestClient:
    """
    Entry point for talking to the REST API.

    Example:
        ```python
        with RestClient(ClientConfig("AC123", "token")) as client:
            for recording in Recording.read("AC123", "CA456").execute(client):
                print(recording.sid)
        ```
    """

    def __init__(self, config: ClientConfig, http_client: Optional[HttpClient] = None):
        """
        Initialize the client.

        Args:
            config: Credentials and transport settings
            http_client: Transport to use; a RequestsHttpClient is built when omitted
        """
        self.config = config
        self._owns_http_client = http_client is None
        self.http_client = http_client or RequestsHttpClient(
            config.base_url,
            auth=(config.account_sid, config.auth_token),
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    @classmethod
    def from_env(cls, http_client: Optional[HttpClient] = None) -> RestClient:
        """Build a client from TWILIO_* environment variables."""
        return cls(ClientConfig.from_env(), http_client=http_client)

    @property
    def account_sid(self) -> str:
        """Account identity used to stamp outgoing requests."""
        return self.config.account_sid

    @property
    def last_error(self) -> Optional[BaseException]:
        """Transport exception behind the most recent absent response."""
        return self.http_client.last_error

    def request(self, request: Request) -> Optional[Response]:
        """
        Send a request through the transport.

        Returns:
            Response, or None when the transport produced no response
        """
        return self.http_client.make_request(request)

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
