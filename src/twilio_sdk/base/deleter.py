"""Single-resource delete."""

from __future__ import annotations
from typing import Any

from ..http.request import HttpMethod, Request, RequestBuilder
from ..rest.client import RestClient
from .descriptor import ResourceDescriptor
from .errors import check_response


class Deleter:
    """Deletes one resource instance."""

    def __init__(self, descriptor: ResourceDescriptor[Any], **path_params: Any):
        self._descriptor = descriptor
        self._uri = descriptor.instance_uri(**path_params)

    @property
    def uri(self) -> str:
        return self._uri

    def build_request(self, client: RestClient) -> Request:
        return RequestBuilder(HttpMethod.DELETE, self._uri, client.account_sid).build()

    def execute(self, client: RestClient) -> bool:
        """
        Delete the instance.

        Returns:
            True once the server confirmed the delete

        Raises:
            ApiConnectionError: If no response was obtained
            ApiError: If the server returned a non-success status
        """
        response = check_response(
            client.request(self.build_request(client)),
            f"{self._descriptor.name} delete",
            client.last_error,
        )
        response.close()
        return True
