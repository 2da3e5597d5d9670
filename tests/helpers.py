"""
Test doubles and data factories shared by the airtable-query tests.

No test touches the network: tables are wired to ``FakeTransport``, which
replays canned responses and records every request it receives.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import Field

from airtable_query.errors import TransportError
from airtable_query.records.models import AirtableRecord
from airtable_query.transport.base import TransportResponse


class Task(AirtableRecord):
    """Record type used across the tests."""

    name: str = Field(alias="Name")
    done: bool = Field(default=False, alias="Done")


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    params: list[tuple[str, str]]
    body: Optional[bytes]

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


@dataclass
class FakeTransport:
    """Replays queued responses in order; a queued exception is raised instead."""

    responses: list[Any] = field(default_factory=list)
    requests: list[SentRequest] = field(default_factory=list)
    closed: bool = False

    def queue(self, status_code: int = 200, body: Any = None) -> "FakeTransport":
        if isinstance(body, (dict, list)):
            content = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            content = body or b""
        self.responses.append(TransportResponse(status_code=status_code, content=content))
        return self

    def queue_error(self, message: str = "connection refused") -> "FakeTransport":
        self.responses.append(TransportError(message))
        return self

    def request(self, method, url, *, headers, params=None, body=None) -> TransportResponse:
        self.requests.append(SentRequest(method, url, dict(headers), list(params or []), body))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


def make_page(*records: tuple[str, dict], offset: Optional[str] = None) -> dict:
    """Build a listing envelope from (id, fields) pairs."""
    page: dict[str, Any] = {"records": [{"id": rid, "fields": fields} for rid, fields in records]}
    if offset is not None:
        page["offset"] = offset
    return page
