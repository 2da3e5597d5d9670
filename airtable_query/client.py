"""Table client: credentials, endpoint identity and the record operations."""

from __future__ import annotations

import json
import logging
from typing import Any, Generic, Optional, Type
from urllib.parse import quote

from pydantic import BaseModel

from airtable_query.config.settings import Settings, get_settings
from airtable_query.errors import (
    AirtableError,
    DecodeError,
    HttpStatusError,
    MissingIdentifierError,
    TransportError,
)
from airtable_query.query.builder import QueryBuilder
from airtable_query.records.envelope import CreateRecordRequest, UpdateRecordRequest
from airtable_query.records.models import R, RecordCodec
from airtable_query.transport.base import QueryParams, Transport, TransportResponse
from airtable_query.transport.http_client import RequestsTransport

logger = logging.getLogger(__name__)


class Table(Generic[R]):
    """
    Handle on one table of one base.

    Usage:
        class Task(AirtableRecord):
            name: str = Field(alias="Name")

        with Table(api_key, "appXXXX", "Tasks", Task) as tasks:
            for task in tasks.query().view("Grid").sort("Name"):
                print(task.get_identifier(), task.name)

    The transport defaults to a ``requests`` session built from the
    settings; pass another ``Transport`` to swap the HTTP backend.
    """

    def __init__(
        self,
        api_key: str,
        app_key: str,
        table: str,
        record_type: Type[R],
        *,
        transport: Optional[Transport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._api_key = api_key
        self._app_key = app_key
        self._table = table
        self.settings = settings or get_settings()
        self.codec: RecordCodec = RecordCodec(record_type)
        self._transport: Transport = transport or RequestsTransport(self.settings.api)

    @property
    def name(self) -> str:
        return self._table

    @property
    def table_url(self) -> str:
        return f"{self.settings.api.base_url}/{quote(self._app_key, safe='')}/{quote(self._table, safe='')}"

    def record_url(self, record_id: str) -> str:
        return f"{self.table_url}/{quote(record_id, safe='')}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[QueryParams] = None,
        payload: Optional[BaseModel] = None,
    ) -> TransportResponse:
        """Send one request; raise HttpStatusError unless the status is 2xx.

        Whatever the transport raises surfaces as TransportError.
        """
        body = payload.model_dump_json().encode("utf-8") if payload is not None else None
        try:
            response = self._transport.request(
                method, url, headers=self._headers(), params=params, body=body
            )
        except AirtableError:
            raise
        except Exception as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        if not response.ok:
            raise HttpStatusError(method, url, response.status_code, response.text)
        return response

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def query(self) -> QueryBuilder[R]:
        """Start a listing query with no view, formula or sort."""
        return QueryBuilder(self)

    def create(self, record: R) -> dict[str, Any]:
        """Create *record* remotely and return the decoded response body.

        The identifier the service assigns is not written back onto
        *record*; read it from the returned ``id`` if needed.
        """
        payload = CreateRecordRequest(fields=self.codec.encode(record))
        response = self.send("POST", self.table_url, payload=payload)
        logger.info("Created record in %s", self._table)
        return _decode_body(response)

    def update(self, record: R) -> dict[str, Any]:
        """Patch the fields of an existing record and return the response body."""
        record_id = record.get_identifier()
        if not record_id:
            raise MissingIdentifierError(
                f"Cannot update a record of {self._table} that has no identifier"
            )

        payload = UpdateRecordRequest(id=record_id, fields=self.codec.encode(record))
        response = self.send("PATCH", self.record_url(record_id), payload=payload)
        logger.info("Updated record %s in %s", record_id, self._table)
        return _decode_body(response)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Table[R]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Table(app_key={self._app_key!r}, table={self._table!r}, "
            f"record_type={self.codec.record_type.__name__})"
        )


def _decode_body(response: TransportResponse) -> dict[str, Any]:
    if not response.content.strip():
        return {}
    try:
        data = json.loads(response.content)
    except ValueError as exc:
        raise DecodeError(f"Response body is not JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data
