"""HTTP envelope and transport."""

from .client import HttpClient, RequestsHttpClient
from .request import HttpMethod, Request, RequestBuilder
from .response import Response

__all__ = [
    "HttpClient",
    "RequestsHttpClient",
    "HttpMethod",
    "Request",
    "RequestBuilder",
    "Response",
]
