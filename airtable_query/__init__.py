"""Typed client for listing, creating and updating Airtable-style records."""

from airtable_query.client import Table
from airtable_query.config.settings import Settings, get_settings
from airtable_query.errors import (
    AirtableError,
    DecodeError,
    HttpStatusError,
    MissingIdentifierError,
    PaginationError,
    TransportError,
)
from airtable_query.query import Paginator, QueryBuilder, QuerySpec
from airtable_query.records import AirtableRecord, DynamicRecord, Record, SortDirection

__all__ = [
    "Table",
    "Settings",
    "get_settings",
    "AirtableError",
    "DecodeError",
    "HttpStatusError",
    "MissingIdentifierError",
    "PaginationError",
    "TransportError",
    "Paginator",
    "QueryBuilder",
    "QuerySpec",
    "AirtableRecord",
    "DynamicRecord",
    "Record",
    "SortDirection",
]
