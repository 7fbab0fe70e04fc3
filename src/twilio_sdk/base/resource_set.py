"""
Lazy iteration over every record of a list operation.

A ResourceSet starts from the first page and fetches following pages on
demand, strictly one at a time. States:

    HOLDING  --current page exhausted, has next-->  FETCHING
    FETCHING --page loaded-->                        HOLDING
    FETCHING --error-->                              FAILED
    HOLDING  --current page exhausted, no next-->    DONE

FAILED and DONE are terminal.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional, TypeVar

from .page import Page

if TYPE_CHECKING:
    from ..rest.client import RestClient
    from .reader import Reader

T = TypeVar("T")

_EXHAUSTED = object()


logger = logging.getLogger(__name__)


class SequenceState(Enum):
    """Lifecycle of a ResourceSet."""

    HOLDING = "holding"
    FETCHING = "fetching"
    DONE = "done"
    FAILED = "failed"


class ResourceSet(Generic[T]):
    """
    Forward-only iterator over the records of every page.

    Errors raised while fetching a page reach the caller at the ``next()``
    call that needed the page and end the iteration. Records already yielded
    stay valid. A ResourceSet cannot be restarted; call ``Reader.execute``
    again to iterate a second time.
    """

    def __init__(
        self,
        reader: Reader[T],
        client: RestClient,
        page: Page[T],
        limit: Optional[int] = None,
        page_limit: Optional[int] = None,
        auto_paging: bool = True
    ):
        """
        Initialize the set.

        Args:
            reader: Reader used to fetch following pages
            client: Client the pages are fetched through
            page: First page
            limit: Maximum number of records to yield
            page_limit: Maximum number of pages to load
            auto_paging: Whether to fetch pages beyond the first
        """
        self._reader = reader
        self._client = client
        self._page = page
        self._records: Iterator[T] = iter(page.records)
        self._next_target = page.next_page_target()
        self._limit = limit
        self._page_limit = page_limit
        self.auto_paging = auto_paging

        self._state = SequenceState.HOLDING
        self._processed = 0
        self._pages = 1

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def current_page(self) -> Page[T]:
        return self._page

    @property
    def processed(self) -> int:
        """Number of records yielded so far."""
        return self._processed

    @property
    def pages_fetched(self) -> int:
        return self._pages

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    @property
    def page_limit(self) -> Optional[int]:
        return self._page_limit

    def __iter__(self) -> ResourceSet[T]:
        return self

    def __next__(self) -> T:
        if self._state in (SequenceState.DONE, SequenceState.FAILED):
            raise StopIteration
        if self._limit is not None and self._processed >= self._limit:
            self._finish()
            raise StopIteration

        while True:
            record = next(self._records, _EXHAUSTED)
            if record is not _EXHAUSTED:
                self._processed += 1
                return record
            if not self._can_fetch():
                self._finish()
                raise StopIteration
            self._fetch_next_page()

    def _can_fetch(self) -> bool:
        if self._next_target is None or not self.auto_paging:
            return False
        if self._page_limit is not None and self._pages >= self._page_limit:
            return False
        return True

    def _fetch_next_page(self) -> None:
        target = self._next_target
        self._next_target = None
        self._state = SequenceState.FETCHING
        try:
            page = self._reader.fetch_page(target, self._client)
        except Exception:
            self._state = SequenceState.FAILED
            raise

        self._page = page
        self._records = iter(page.records)
        self._next_target = page.next_page_target()
        self._pages += 1
        self._state = SequenceState.HOLDING

    def _finish(self) -> None:
        self._state = SequenceState.DONE
        logger.debug("ResourceSet done after %d record(s) in %d page(s)", self._processed, self._pages)

    def close(self) -> None:
        """Stop iterating. Pages not yet fetched are never requested."""
        if self._state is not SequenceState.FAILED:
            self._state = SequenceState.DONE
        self._next_target = None

    def __enter__(self) -> ResourceSet[T]:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
