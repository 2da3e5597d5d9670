"""
Shared test fixtures for the airtable-query test suite.

Every test gets settings that ignore the environment and a Task table
backed by a fresh ``FakeTransport``.
"""

from __future__ import annotations

import pytest

from airtable_query.client import Table
from airtable_query.config.settings import ApiSettings, PaginationSettings, Settings
from tests.helpers import FakeTransport, Task


@pytest.fixture
def settings() -> Settings:
    """Deterministic settings, independent of the environment."""
    return Settings(
        api=ApiSettings(base_url="https://api.example.test/v0"),
        pagination=PaginationSettings(strict=False),
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def table(transport: FakeTransport, settings: Settings) -> Table[Task]:
    """A Task table wired to the fake transport."""
    return Table("key-secret", "appTEST", "Tasks", Task, transport=transport, settings=settings)
