from airtable_query.config.settings import (
    ApiSettings,
    PaginationSettings,
    Settings,
    get_settings,
)
from airtable_query.config.logging_config import setup_logging

__all__ = [
    "ApiSettings",
    "PaginationSettings",
    "Settings",
    "get_settings",
    "setup_logging",
]
