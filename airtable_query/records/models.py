"""
Record types for the airtable-query client.

A caller's record type only has to satisfy the ``Record`` protocol: carry the
identifier the service assigns and expose it again. Its *fields* are read and
written through pydantic, so any type pydantic can validate from a mapping
(a ``BaseModel``, a dataclass, ...) works.

``AirtableRecord`` is the ready-made base: a pydantic model that keeps the
identifier in a private attribute, so it is never serialized as a field.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, Type, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, PrivateAttr, TypeAdapter


@runtime_checkable
class Record(Protocol):
    """Capability every record type must provide."""

    def set_identifier(self, record_id: str) -> None:
        ...

    def get_identifier(self) -> str:
        ...


R = TypeVar("R", bound=Record)


class AirtableRecord(BaseModel):
    """
    Base class for typed records.

    Subclass it and declare the table's fields; use ``Field(alias=...)``
    for column names that are not Python identifiers. The identifier is
    empty until the record has been read from (or created on) the service.
    """

    model_config = ConfigDict(populate_by_name=True)

    _record_id: str = PrivateAttr(default="")

    def set_identifier(self, record_id: str) -> None:
        self._record_id = record_id

    def get_identifier(self) -> str:
        return self._record_id


class DynamicRecord(AirtableRecord):
    """Schemaless record: every column lands in ``model_extra``."""

    model_config = ConfigDict(extra="allow")


class SortDirection(str, Enum):
    """Sort direction, valued with its wire token."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: "SortDirection | str") -> "SortDirection":
        """Accept an enum member or the strings ``asc``/``desc`` (any case)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sort direction: {value!r} (expected 'asc' or 'desc')") from None


class RecordCodec:
    """Converts between a record type and the ``fields`` mapping of the API."""

    def __init__(self, record_type: Type[R]) -> None:
        missing = [name for name in ("set_identifier", "get_identifier") if not hasattr(record_type, name)]
        if missing:
            raise TypeError(
                f"{record_type.__name__} cannot be used as a record type: missing {', '.join(missing)}"
            )
        self.record_type = record_type
        self._adapter: TypeAdapter = TypeAdapter(record_type)

    def decode(self, record_id: str, fields: dict[str, Any]) -> R:
        """Validate *fields* into a record and assign it *record_id*.

        The identifier always comes from the envelope, even when the fields
        payload carries a column of the same name.
        """
        record = self._adapter.validate_python(fields)
        record.set_identifier(record_id)
        return record

    def encode(self, record: R) -> dict[str, Any]:
        """Serialize the record's fields to JSON-ready values (no identifier)."""
        return self._adapter.dump_python(record, mode="json", by_alias=True)
