"""Single-resource fetch."""

from __future__ import annotations
from typing import Any, Generic, TypeVar

from ..http.request import HttpMethod, Request, RequestBuilder
from ..http.response import Response
from ..rest.client import RestClient
from .decoding import decode_record, load_json
from .descriptor import ResourceDescriptor
from .errors import check_response

T = TypeVar("T")


def decode_instance(response: Response, descriptor: ResourceDescriptor[T], operation: str) -> T:
    """Read, close and decode a single-record response."""
    try:
        data = load_json(response.read())
    finally:
        response.close()
    return decode_record(data, descriptor.decoder, operation)


class Fetcher(Generic[T]):
    """Fetches one resource instance."""

    def __init__(self, descriptor: ResourceDescriptor[T], **path_params: Any):
        self._descriptor = descriptor
        self._uri = descriptor.instance_uri(**path_params)

    @property
    def uri(self) -> str:
        return self._uri

    def build_request(self, client: RestClient) -> Request:
        return RequestBuilder(HttpMethod.GET, self._uri, client.account_sid).build()

    def execute(self, client: RestClient) -> T:
        """
        Fetch the instance.

        Raises:
            ApiConnectionError: If no response was obtained
            ApiError: If the server returned a non-success status
            DecodeError: If the body did not match the record schema
        """
        operation = f"{self._descriptor.name} fetch"
        response = check_response(client.request(self.build_request(client)), operation, client.last_error)
        return decode_instance(response, self._descriptor, operation)
