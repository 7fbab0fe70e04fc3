"""
Twilio REST SDK

Client library for the account-scoped Twilio REST API. List operations
return lazily-paginated ResourceSets; failures surface as ApiConnectionError,
ApiError or DecodeError.
"""

from .base import (
    Creator,
    Deleter,
    Fetcher,
    Page,
    Reader,
    ResourceDescriptor,
    ResourceSet,
    SequenceState,
    SidResource,
    Updater,
)
from .config import ClientConfig
from .exceptions import (
    ApiConnectionError,
    ApiError,
    DecodeError,
    ErrorKind,
    RestExceptionParseError,
    TwilioError,
)
from .http import HttpClient, HttpMethod, Request, RequestBuilder, RequestsHttpClient, Response
from .resources import Call, CallStatus, Notification, Recording
from .rest import RestClient

__version__ = "1.0.0"
__all__ = [
    # Client
    "ClientConfig",
    "RestClient",

    # Transport
    "HttpClient",
    "RequestsHttpClient",
    "HttpMethod",
    "Request",
    "RequestBuilder",
    "Response",

    # Operations
    "Reader",
    "ResourceSet",
    "SequenceState",
    "Page",
    "Fetcher",
    "Deleter",
    "Creator",
    "Updater",
    "ResourceDescriptor",
    "SidResource",

    # Resources
    "Call",
    "CallStatus",
    "Notification",
    "Recording",

    # Errors
    "ErrorKind",
    "TwilioError",
    "ApiConnectionError",
    "ApiError",
    "RestExceptionParseError",
    "DecodeError",
]
