"""Single-page fetch against the listing endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Optional, Tuple

from pydantic import ValidationError

from airtable_query.errors import DecodeError
from airtable_query.records.envelope import PageEnvelope
from airtable_query.records.models import R

if TYPE_CHECKING:
    from airtable_query.client import Table
    from airtable_query.query.builder import QuerySpec
    from airtable_query.transport.base import QueryParams

logger = logging.getLogger(__name__)


def build_params(spec: "QuerySpec", cursor: Optional[str] = None) -> "QueryParams":
    """Query parameters for one listing request, in wire order.

    An empty cursor means "first page" and sends no ``offset``.
    """
    params: list[tuple[str, str]] = []
    if cursor:
        params.append(("offset", cursor))
    if spec.view is not None:
        params.append(("view", spec.view))
    if spec.formula is not None:
        params.append(("filterByFormula", spec.formula))
    for i, (field, direction) in enumerate(spec.sort):
        params.append((f"sort[{i}][field]", field))
        params.append((f"sort[{i}][direction]", direction.value))
    return params


class PageFetcher(Generic[R]):
    """Fetches and decodes one page of a table listing."""

    def __init__(self, table: "Table[R]") -> None:
        self._table = table

    def fetch(self, spec: "QuerySpec", cursor: Optional[str] = None) -> PageEnvelope:
        """GET one page and decode its envelope.

        Raises TransportError, HttpStatusError or DecodeError.
        """
        params = build_params(spec, cursor)
        logger.debug(
            "Fetching page of %s (cursor=%r, %d params)",
            self._table.name,
            cursor or None,
            len(params),
        )
        response = self._table.send("GET", self._table.table_url, params=params)

        try:
            return PageEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"Malformed listing page from {self._table.name}: {exc}") from exc

    def fetch_records(
        self, spec: "QuerySpec", cursor: Optional[str] = None
    ) -> Tuple[list[R], Optional[str]]:
        """Fetch one page and return its typed records plus the next cursor."""
        envelope = self.fetch(spec, cursor)
        codec = self._table.codec

        records: list[R] = []
        for item in envelope.records:
            try:
                records.append(codec.decode(item.id, item.fields))
            except ValidationError as exc:
                raise DecodeError(
                    f"Record {item.id!r} of {self._table.name} does not match "
                    f"{codec.record_type.__name__}: {exc}"
                ) from exc

        return records, envelope.next_cursor
