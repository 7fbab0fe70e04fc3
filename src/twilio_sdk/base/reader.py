"""
Generic list reader.

A Reader holds the filter state and page size for one list operation on one
resource. ``execute`` issues the first request and returns a ResourceSet that
walks every page; ``fetch_page`` loads any page from a server-issued target.
"""

from __future__ import annotations
import logging
import math
from typing import Any, Dict, Generic, Optional, TypeVar

from ..http.request import HttpMethod, Request, RequestBuilder
from ..rest.client import RestClient
from .descriptor import ResourceDescriptor
from .errors import check_response
from .page import Page
from .params import serialize_values
from .resource_set import ResourceSet

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000
PAGE_SIZE_PARAM = "PageSize"


logger = logging.getLogger(__name__)


class Reader(Generic[T]):
    """
    Builds and issues list requests for a resource.

    Configuration methods return the reader itself so calls can be chained.
    Changing a reader after ``execute`` does not affect ResourceSets it
    already returned.

    Example:
        ```python
        reader = Recording.read("AC123", "CA456").filter(date_created=date(2015, 6, 1)).page_size(20)
        for recording in reader.execute(client):
            print(recording.sid)
        ```
    """

    def __init__(self, descriptor: ResourceDescriptor[T], **path_params: Any):
        """
        Initialize the reader.

        Args:
            descriptor: Resource configuration
            **path_params: Values for the descriptor's list path template

        Raises:
            ValueError: If a path parameter is missing
        """
        self._descriptor = descriptor
        self._uri = descriptor.list_uri(**path_params)
        self._filters: Dict[str, Any] = {}
        self._page_size: Optional[int] = None
        self._limit: Optional[int] = None

    @property
    def descriptor(self) -> ResourceDescriptor[T]:
        return self._descriptor

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def filters(self) -> Dict[str, Any]:
        """Copy of the filters currently set."""
        return dict(self._filters)

    def filter(self, **filters: Any) -> Reader[T]:
        """
        Set or clear filters.

        Passing None or an empty list for a filter clears it.

        Raises:
            ValueError: If a filter name is not supported by the resource
        """
        unknown = sorted(set(filters) - set(self._descriptor.filters))
        if unknown:
            raise ValueError(f"{self._descriptor.name} does not support filter(s): {', '.join(unknown)}")
        for name, value in filters.items():
            if value is None or (isinstance(value, (list, tuple)) and not value):
                self._filters.pop(name, None)
            else:
                self._filters[name] = value
        return self

    def page_size(self, page_size: int) -> Reader[T]:
        """
        Request a page size.

        Values above the API maximum are clamped to it.

        Raises:
            ValueError: If page_size is not positive
        """
        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise TypeError(f"page_size must be an int, got {type(page_size).__name__}")
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._page_size = min(page_size, MAX_PAGE_SIZE)
        return self

    def limit(self, limit: Optional[int]) -> Reader[T]:
        """
        Cap the number of records a ResourceSet yields.

        Raises:
            TypeError: If limit is not an integer
            ValueError: If limit is not positive
        """
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise TypeError(f"limit must be an int, got {type(limit).__name__}")
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self._limit = limit
        return self

    def get_page_size(self) -> int:
        """Page size that will be requested."""
        if self._page_size is not None:
            return self._page_size
        if self._limit is not None:
            return min(self._limit, MAX_PAGE_SIZE)
        return DEFAULT_PAGE_SIZE

    def get_limit(self) -> Optional[int]:
        return self._limit

    def get_page_limit(self) -> Optional[int]:
        """Number of pages needed to satisfy the limit, or None without a limit."""
        if self._limit is None:
            return None
        return math.ceil(self._limit / self.get_page_size())

    # =========================================================================
    # Request construction
    # =========================================================================

    def build_request(self, client: RestClient) -> Request:
        """
        Build the first-page request from the current filter state.

        Each set filter becomes query parameters (repeated for list values);
        unset filters are omitted. The page size is always sent.
        """
        builder = RequestBuilder(HttpMethod.GET, self._uri, client.account_sid)
        for name, wire_name in self._descriptor.filters.items():
            if name not in self._filters:
                continue
            for value in serialize_values(self._filters[name]):
                builder.add_query_param(wire_name, value)
        builder.add_query_param(PAGE_SIZE_PARAM, str(self.get_page_size()))
        return builder.build()

    # =========================================================================
    # Execution
    # =========================================================================

    def execute(self, client: RestClient) -> ResourceSet[T]:
        """
        Fetch the first page and wrap it in a ResourceSet.

        Raises:
            ApiConnectionError: If no response was obtained
            ApiError: If the server returned a non-success status
            DecodeError: If the page did not match the expected shape
        """
        page = self.first_page(client)
        return ResourceSet(
            self,
            client,
            page,
            limit=self.get_limit(),
            page_limit=self.get_page_limit(),
        )

    def first_page(self, client: RestClient) -> Page[T]:
        """Fetch only the first page."""
        return self.page_for_request(client, self.build_request(client))

    def fetch_page(self, target: str, client: RestClient) -> Page[T]:
        """
        Fetch a page from a server-issued target.

        The target is used as a complete request; filters and page size are
        not re-applied.
        """
        logger.debug("Fetching %s page %s", self._descriptor.name, target)
        request = RequestBuilder(HttpMethod.GET, target, client.account_sid).build()
        return self.page_for_request(client, request)

    def next_page(self, page: Page[T], client: RestClient) -> Optional[Page[T]]:
        """Fetch the page after ``page``, or return None if it is the last one."""
        target = page.next_page_target()
        if target is None:
            return None
        return self.fetch_page(target, client)

    def page_for_request(self, client: RestClient, request: Request) -> Page[T]:
        """
        Send a request and decode the response as a Page.

        The response is closed on every path.
        """
        response = check_response(
            client.request(request),
            f"{self._descriptor.name} read",
            client.last_error,
        )
        try:
            page = Page.from_json(self._descriptor.key, response.read(), self._descriptor.decoder)
        finally:
            response.close()

        logger.debug(
            "Decoded %d %s record(s), next page: %s",
            len(page), self._descriptor.name, page.next_page_uri or "none",
        )
        return page
