"""Pydantic models for request and response bodies of the records endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class EnvelopeRecord(BaseModel):
    """One record as it appears on the wire."""

    id: str = ""
    fields: dict[str, Any] = Field(default_factory=dict)


class PageEnvelope(BaseModel):
    """One page of a listing response."""

    records: list[EnvelopeRecord]
    offset: Optional[str] = None

    @property
    def next_cursor(self) -> Optional[str]:
        """Cursor for the following page, or None when this page is the last."""
        return self.offset or None


class CreateRecordRequest(BaseModel):
    """Body of a create call."""

    fields: dict[str, Any]


class UpdateRecordRequest(BaseModel):
    """Body of an update call."""

    id: str
    fields: dict[str, Any]
