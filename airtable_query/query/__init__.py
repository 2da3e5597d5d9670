from airtable_query.query.builder import QueryBuilder, QuerySpec, SortKey
from airtable_query.query.fetcher import PageFetcher, build_params
from airtable_query.query.paginator import Paginator

__all__ = [
    "QueryBuilder",
    "QuerySpec",
    "SortKey",
    "PageFetcher",
    "build_params",
    "Paginator",
]
