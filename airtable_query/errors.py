"""Exception hierarchy for the airtable-query client."""

from __future__ import annotations


class AirtableError(RuntimeError):
    """Base class for every failure reported by this library."""


class TransportError(AirtableError):
    """The request never produced an HTTP response (connection, DNS, TLS, timeout)."""


class HttpStatusError(AirtableError):
    """The service answered with a non-success status code."""

    def __init__(self, method: str, url: str, status_code: int, body: str = "") -> None:
        super().__init__(f"HTTP {method} {url} failed with status {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class DecodeError(AirtableError):
    """A response body did not have the expected shape."""


class MissingIdentifierError(AirtableError):
    """An operation needed a remote record identifier but the record has none."""


class PaginationError(AirtableError):
    """A page fetch failed while iterating in strict mode.

    The underlying error is available as ``__cause__``.
    """

    def __init__(self, message: str, pages_fetched: int) -> None:
        super().__init__(message)
        self.pages_fetched = pages_fetched
