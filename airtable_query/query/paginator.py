"""Lazy, cursor-following iterator over the records of a listing."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Generic, Iterator, Optional

from airtable_query.errors import AirtableError, PaginationError
from airtable_query.records.models import R

if TYPE_CHECKING:
    from airtable_query.query.builder import QuerySpec
    from airtable_query.query.fetcher import PageFetcher

logger = logging.getLogger(__name__)


class Paginator(Generic[R]):
    """
    Iterator that serves records page by page.

    Records of the current page are buffered and handed out first; the next
    page is fetched only when the buffer runs dry and the server issued a
    cursor. Order is exactly the server's, across pages.

    Cursor states:
        ""      not started, the next fetch requests the first page
        "tok"   resume from this server-issued cursor
        None    exhausted; every further pull stops, permanently

    A failed fetch ends the iteration. By default the failure is swallowed
    (logged, and kept on ``error``) so a broken listing looks like a short
    one; check ``truncated`` to tell the two apart. With ``strict=True`` the
    failure is raised as ``PaginationError`` instead.

    Not thread-safe.
    """

    def __init__(self, fetcher: "PageFetcher[R]", spec: "QuerySpec", strict: bool = False) -> None:
        self._fetcher = fetcher
        self._spec = spec
        self._strict = strict
        self._cursor: Optional[str] = ""
        self._buffer: Deque[R] = deque()
        self.pages_fetched = 0
        self.error: Optional[AirtableError] = None

    @property
    def spec(self) -> "QuerySpec":
        return self._spec

    @property
    def cursor(self) -> Optional[str]:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._cursor is None and not self._buffer

    @property
    def truncated(self) -> bool:
        """True when iteration ended because a page fetch failed."""
        return self.error is not None

    def __iter__(self) -> Iterator[R]:
        return self

    def __next__(self) -> R:
        while not self._buffer:
            if self._cursor is None:
                raise StopIteration
            self._load_next_page()
        return self._buffer.popleft()

    def _load_next_page(self) -> None:
        try:
            records, next_cursor = self._fetcher.fetch_records(self._spec, self._cursor)
        except AirtableError as exc:
            self._cursor = None
            self._buffer.clear()
            self.error = exc
            if self._strict:
                raise PaginationError(
                    f"Listing failed after {self.pages_fetched} page(s): {exc}",
                    pages_fetched=self.pages_fetched,
                ) from exc
            logger.warning(
                "Listing stopped after %d page(s) because a fetch failed: %s",
                self.pages_fetched,
                exc,
            )
            return
        except BaseException:
            self._cursor = None
            self._buffer.clear()
            raise

        self.pages_fetched += 1
        self._cursor = next_cursor
        self._buffer = deque(records)
