"""Transport abstraction: one HTTP exchange in, status and body bytes out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Sequence, Tuple

QueryParams = Sequence[Tuple[str, str]]


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of an HTTP response."""

    status_code: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Anything that can perform a single HTTP request.

    Implementations raise ``airtable_query.errors.TransportError`` when no
    response was received. Non-success statuses are returned, not raised.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Optional[QueryParams] = None,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        ...

    def close(self) -> None:
        ...
