"""CLI entrypoint for listing the records of a table as JSON lines."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import os
import sys
from typing import Optional, Sequence

from airtable_query.client import Table
from airtable_query.config.logging_config import setup_logging
from airtable_query.config.settings import get_settings
from airtable_query.errors import AirtableError
from airtable_query.query.builder import QueryBuilder
from airtable_query.records.models import DynamicRecord, SortDirection
from airtable_query.transport.http_client import RequestsTransport


def parse_sort(value: str) -> tuple[str, SortDirection]:
    """Parse ``FIELD`` or ``FIELD:asc|desc``; colons inside field names are kept."""
    field, sep, suffix = value.rpartition(":")
    if sep and suffix.strip().lower() in ("asc", "desc"):
        return field, SortDirection.parse(suffix)
    return value, SortDirection.ASCENDING


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="airtable-query",
        description="List, filter and sort the records of a table.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests.")
    sub = parser.add_subparsers(dest="command", required=True)

    listing = sub.add_parser("list", help="Print matching records, one JSON object per line.")
    listing.add_argument("--api-key", default=None, help="API key (default: $AIRTABLE_API_KEY).")
    listing.add_argument("--app", required=True, help="Base (app) id.")
    listing.add_argument("--table", required=True, help="Table name or id.")
    listing.add_argument("--view", default=None, help="Saved view to list.")
    listing.add_argument("--formula", default=None, help="filterByFormula expression.")
    listing.add_argument(
        "--sort",
        action="append",
        default=[],
        type=parse_sort,
        metavar="FIELD[:asc|desc]",
        help="Sort key; repeat for secondary keys.",
    )
    listing.add_argument("--limit", type=non_negative_int, default=None, help="Stop after N records.")
    listing.add_argument(
        "--strict",
        action="store_true",
        help="Fail loudly if a page fetch fails instead of stopping early.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    logger = logging.getLogger(__name__)

    api_key = args.api_key or os.environ.get("AIRTABLE_API_KEY")
    if not api_key:
        parser.error("an API key is required (--api-key or AIRTABLE_API_KEY)")

    settings = get_settings()
    table = Table(
        api_key,
        args.app,
        args.table,
        DynamicRecord,
        transport=RequestsTransport(settings.api),
        settings=settings,
    )

    query: QueryBuilder[DynamicRecord] = table.query()
    if args.view:
        query = query.view(args.view)
    if args.formula:
        query = query.formula(args.formula)
    for field, direction in args.sort:
        query = query.sort(field, direction)

    try:
        with table:
            paginator = query.paginate(strict=args.strict)
            records = paginator if args.limit is None else itertools.islice(paginator, args.limit)
            for record in records:
                line = {"id": record.get_identifier(), "fields": table.codec.encode(record)}
                sys.stdout.write(json.dumps(line, ensure_ascii=False) + "\n")
    except AirtableError as exc:
        logger.error("Listing %s failed: %s", args.table, exc)
        return 1

    if paginator.truncated:
        logger.error("Listing %s is incomplete: %s", args.table, paginator.error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
