from airtable_query.transport.base import QueryParams, Transport, TransportResponse
from airtable_query.transport.http_client import RequestsTransport

__all__ = [
    "QueryParams",
    "Transport",
    "TransportResponse",
    "RequestsTransport",
]
