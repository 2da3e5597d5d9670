"""
Central configuration for the airtable-query client.

All tunables live here. Credentials do not: they are passed to ``Table``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ApiSettings:
    """Settings for talking to the REST API."""

    # Versioned API root; app key and table name are appended to it
    base_url: str = "https://api.airtable.com/v0"

    # Request timeout (seconds), handed to the transport
    request_timeout: float = 30.0

    # User-Agent string sent with every request
    user_agent: str = "airtable-query/0.1"


@dataclass(frozen=True)
class PaginationSettings:
    """Settings for the lazy paginator."""

    # When False, a failed page fetch ends the record stream silently
    # (the error is kept on ``Paginator.error``). When True it raises.
    strict: bool = False


@dataclass(frozen=True)
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.api.base_url)
        print(settings.pagination.strict)
    """

    api: ApiSettings = field(default_factory=ApiSettings)
    pagination: PaginationSettings = field(default_factory=PaginationSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings, overriding defaults with ``AIRTABLE_*`` variables."""
        env = os.environ if environ is None else environ
        defaults = ApiSettings()

        api = ApiSettings(
            base_url=env.get("AIRTABLE_BASE_URL", defaults.base_url).rstrip("/"),
            request_timeout=float(env.get("AIRTABLE_TIMEOUT", defaults.request_timeout)),
            user_agent=env.get("AIRTABLE_USER_AGENT", defaults.user_agent),
        )
        strict_raw = env.get("AIRTABLE_STRICT_PAGINATION", "")
        pagination = PaginationSettings(strict=strict_raw.strip().lower() in _TRUTHY)
        return cls(api=api, pagination=pagination)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance, read once from the environment.

    Call this instead of constructing Settings() directly so every client
    created without explicit settings shares one config object.
    """
    return Settings.from_env()
