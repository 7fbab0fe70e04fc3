"""
Create and update operations.

Both send form-encoded parameters with POST and decode the returned instance.
"""

from __future__ import annotations
from typing import Any, Dict, Generic, Mapping, Tuple, TypeVar

from ..http.request import HttpMethod, Request, RequestBuilder
from ..rest.client import RestClient
from .descriptor import ResourceDescriptor
from .errors import check_response
from .fetcher import decode_instance
from .params import serialize_values

T = TypeVar("T")


class _Writer(Generic[T]):
    """Shared parameter handling for Creator and Updater."""

    _operation = "write"

    def __init__(self, descriptor: ResourceDescriptor[T], uri: str,
                 allowed: Mapping[str, str], required: Tuple[str, ...] = ()):
        self._descriptor = descriptor
        self._uri = uri
        self._allowed = allowed
        self._required = required
        self._params: Dict[str, Any] = {}

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    def set(self, **params: Any) -> _Writer[T]:
        """
        Set or clear parameters; None clears.

        Raises:
            ValueError: If a parameter is not supported
        """
        unknown = sorted(set(params) - set(self._allowed))
        if unknown:
            raise ValueError(
                f"{self._descriptor.name} {self._operation} does not accept: {', '.join(unknown)}"
            )
        for name, value in params.items():
            if value is None:
                self._params.pop(name, None)
            else:
                self._params[name] = value
        return self

    def build_request(self, client: RestClient) -> Request:
        """
        Build the POST request.

        Raises:
            ValueError: If a required parameter is missing
        """
        missing = [name for name in self._required if name not in self._params]
        if missing:
            raise ValueError(
                f"{self._descriptor.name} {self._operation} requires: {', '.join(missing)}"
            )
        builder = RequestBuilder(HttpMethod.POST, self._uri, client.account_sid)
        for name, wire_name in self._allowed.items():
            if name not in self._params:
                continue
            for value in serialize_values(self._params[name]):
                builder.add_post_param(wire_name, value)
        return builder.build()

    def execute(self, client: RestClient) -> T:
        """
        Send the request and decode the resulting instance.

        Raises:
            ValueError: If a required parameter is missing
            ApiConnectionError: If no response was obtained
            ApiError: If the server returned a non-success status
            DecodeError: If the body did not match the record schema
        """
        operation = f"{self._descriptor.name} {self._operation}"
        request = self.build_request(client)
        response = check_response(client.request(request), operation, client.last_error)
        return decode_instance(response, self._descriptor, operation)


class Creator(_Writer[T]):
    """Creates a resource instance in a collection."""

    _operation = "create"

    def __init__(self, descriptor: ResourceDescriptor[T], **path_params: Any):
        super().__init__(
            descriptor,
            descriptor.list_uri(**path_params),
            descriptor.create_params,
            descriptor.required_create,
        )


class Updater(_Writer[T]):
    """Updates an existing resource instance."""

    _operation = "update"

    def __init__(self, descriptor: ResourceDescriptor[T], **path_params: Any):
        super().__init__(descriptor, descriptor.instance_uri(**path_params), descriptor.update_params)
