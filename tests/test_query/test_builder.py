"""Tests for the fluent query builder."""

from __future__ import annotations

import pytest

from airtable_query.query.builder import QuerySpec
from airtable_query.query.paginator import Paginator
from airtable_query.records.models import SortDirection
from tests.helpers import make_page


class TestOptions:
    def test_empty_query(self, table):
        assert table.query().build() == QuerySpec()

    def test_view_overwrites(self, table):
        spec = table.query().view("Grid").view("Kanban").build()
        assert spec.view == "Kanban"

    def test_formula_overwrites(self, table):
        spec = table.query().formula("{Done}").formula("NOT({Done})").build()
        assert spec.formula == "NOT({Done})"

    def test_sort_accumulates_in_call_order(self, table):
        spec = (
            table.query()
            .sort("Priority", SortDirection.DESCENDING)
            .sort("Name")
            .sort("Created", "DESC")
            .build()
        )
        assert spec.sort == (
            ("Priority", SortDirection.DESCENDING),
            ("Name", SortDirection.ASCENDING),
            ("Created", SortDirection.DESCENDING),
        )

    def test_unknown_direction_rejected(self, table):
        with pytest.raises(ValueError):
            table.query().sort("Name", "sideways")


class TestImmutability:
    def test_option_calls_return_new_builders(self, table):
        base = table.query().view("Grid")
        sorted_query = base.sort("Name")
        filtered = base.formula("{Done}")

        assert base.build() == QuerySpec(view="Grid")
        assert sorted_query.build().sort == (("Name", SortDirection.ASCENDING),)
        assert sorted_query.build().formula is None
        assert filtered.build().sort == ()

    def test_spec_is_frozen(self, table):
        spec = table.query().view("Grid").build()
        with pytest.raises(AttributeError):
            spec.view = "Other"  # type: ignore[misc]


class TestFinalize:
    def test_paginate_does_not_hit_the_network(self, table, transport):
        paginator = table.query().view("Grid").paginate()
        assert isinstance(paginator, Paginator)
        assert transport.requests == []
        assert paginator.spec == QuerySpec(view="Grid")

    def test_builder_is_iterable(self, table, transport):
        transport.queue(body=make_page(("r1", {"Name": "A"})))
        assert [t.name for t in table.query()] == ["A"]

    def test_strict_defaults_to_settings(self, table, transport):
        transport.queue(status_code=500, body="boom")
        assert list(table.query().paginate()) == []

    def test_all_drains_every_page(self, table, transport):
        transport.queue(body=make_page(("r1", {"Name": "A"}), offset="tok"))
        transport.queue(body=make_page(("r2", {"Name": "B"})))
        assert [t.get_identifier() for t in table.query().all()] == ["r1", "r2"]

    def test_first_fetches_one_page(self, table, transport):
        transport.queue(body=make_page(("r1", {"Name": "A"}), ("r2", {"Name": "B"}), offset="tok"))
        first = table.query().first()
        assert first is not None and first.get_identifier() == "r1"
        assert len(transport.requests) == 1

    def test_first_on_empty_table(self, table, transport):
        transport.queue(body=make_page())
        assert table.query().first() is None
