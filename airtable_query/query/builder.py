"""Immutable query specification and the fluent builder that produces it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Tuple

from airtable_query.query.fetcher import PageFetcher
from airtable_query.query.paginator import Paginator
from airtable_query.records.models import R, SortDirection

if TYPE_CHECKING:
    from airtable_query.client import Table

SortKey = Tuple[str, SortDirection]


@dataclass(frozen=True)
class QuerySpec:
    """What to list: an optional view, an optional formula, ordered sort keys."""

    view: Optional[str] = None
    formula: Optional[str] = None
    # Primary key first
    sort: Tuple[SortKey, ...] = ()


class QueryBuilder(Generic[R]):
    """
    Fluent, immutable accumulator of query options.

    Every option call returns a new builder, so a partially configured
    builder can be shared and extended without surprises:

        base = table.query().view("Grid")
        recent = base.sort("Created", "desc")
        for record in recent:
            ...

    Nothing touches the network until the paginator is first pulled.
    Field names and formulas are passed through unchecked.
    """

    def __init__(self, table: "Table[R]", spec: Optional[QuerySpec] = None) -> None:
        self._table = table
        self._spec = spec or QuerySpec()

    def view(self, name: str) -> "QueryBuilder[R]":
        """Restrict the listing to a saved view. Replaces any previous view."""
        return QueryBuilder(self._table, replace(self._spec, view=name))

    def formula(self, expression: str) -> "QueryBuilder[R]":
        """Filter with a formula. Replaces any previous formula."""
        return QueryBuilder(self._table, replace(self._spec, formula=expression))

    def sort(
        self,
        field: str,
        direction: SortDirection | str = SortDirection.ASCENDING,
    ) -> "QueryBuilder[R]":
        """Append a sort key after the ones already added."""
        key = (field, SortDirection.parse(direction))
        return QueryBuilder(self._table, replace(self._spec, sort=self._spec.sort + (key,)))

    def build(self) -> QuerySpec:
        return self._spec

    def paginate(self, strict: Optional[bool] = None) -> Paginator[R]:
        """Finalize into a lazy paginator.

        ``strict`` defaults to the table's pagination settings.
        """
        if strict is None:
            strict = self._table.settings.pagination.strict
        return Paginator(PageFetcher(self._table), self._spec, strict=strict)

    def __iter__(self) -> Iterator[R]:
        return self.paginate()

    def all(self) -> list[R]:
        """Fetch every matching record."""
        return list(self.paginate())

    def first(self) -> Optional[R]:
        """Return the first matching record, fetching at most one page."""
        return next(self.paginate(), None)

    def __repr__(self) -> str:
        return f"QueryBuilder(table={self._table.name!r}, spec={self._spec!r})"
