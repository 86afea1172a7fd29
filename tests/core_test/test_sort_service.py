# tests/core_test/test_sort_service.py

import pytest

from list_items_api.models.schema import Image
from list_items_api.models.table import LabelContent, Row, SortableCell
from list_items_api.types import SortOrder

from list_items_core.services.sort_service import SortService


@pytest.fixture
def service():
    return SortService()


def _label(text):
    return SortableCell(LabelContent(Image(""), text), text)


@pytest.fixture
def rows():
    return [
        Row("r1", {"label": _label("Carol"), "city": "Paris"}),
        Row("r2", {"label": _label("Alice"), "city": "Berlin"}),
        Row("r3", {"label": _label("Bob"), "city": "Paris"}),
        Row("r4", {"label": _label("Dave"), "city": "Berlin"}),
    ]


def _ids(rows):
    return [row.id for row in rows]


class TestOrdering:

    def test_ascending_by_sortable_cell(self, service, rows):
        assert _ids(service.sort(rows, "label")) == ["r2", "r3", "r1", "r4"]

    def test_descending_by_sortable_cell(self, service, rows):
        assert _ids(service.sort(rows, "label", SortOrder.DESCENDING)) == ["r4", "r1", "r3", "r2"]

    def test_order_as_string(self, service, rows):
        assert _ids(service.sort(rows, "label", "desc")) == ["r4", "r1", "r3", "r2"]

    def test_unknown_order(self, service, rows):
        with pytest.raises(ValueError):
            service.sort(rows, "label", "sideways")

    def test_missing_key_sorts_as_empty(self, service):
        rows = [Row("a", {"age": "30"}), Row("b", {})]
        assert _ids(service.sort(rows, "age")) == ["b", "a"]

    def test_empty_rows(self, service):
        assert service.sort([], "label") == []


class TestStability:

    def test_ties_keep_original_order_ascending(self, service, rows):
        assert _ids(service.sort(rows, "city")) == ["r2", "r4", "r1", "r3"]

    def test_ties_keep_original_order_descending(self, service, rows):
        assert _ids(service.sort(rows, "city", "desc")) == ["r1", "r3", "r2", "r4"]

    def test_idempotent(self, service, rows):
        once = service.sort(rows, "city", "desc")
        twice = service.sort(once, "city", "desc")
        assert _ids(once) == _ids(twice)

    def test_descending_reverses_non_tied_rows(self, service, rows):
        ascending = service.sort(rows, "label")
        descending = service.sort(ascending, "label", "desc")
        assert _ids(descending) == list(reversed(_ids(ascending)))


class TestCollation:

    @pytest.fixture
    def mixed_case(self):
        return [
            Row("b", {"label": _label("banana")}),
            Row("c", {"label": _label("Cherry")}),
            Row("a", {"label": _label("apple")}),
        ]

    def test_case_does_not_split_alphabet(self, service, mixed_case):
        assert _ids(service.sort(mixed_case, "label")) == ["a", "b", "c"]

    def test_case_descending(self, service, mixed_case):
        assert _ids(service.sort(mixed_case, "label", "desc")) == ["c", "b", "a"]

    def test_accents_sort_with_base_letter(self, service):
        rows = [
            Row("zoo", {"label": _label("zoo")}),
            Row("emile", {"label": _label("Émile")}),
            Row("eve", {"label": _label("eve")}),
        ]
        assert _ids(service.sort(rows, "label")) == ["emile", "eve", "zoo"]
        assert _ids(service.sort(rows, "label", "desc")) == ["zoo", "eve", "emile"]

    def test_embedded_nul(self, service):
        rows = [
            Row("c", {"label": _label("Carol")}),
            Row("b", {"label": _label("b\x00ob")}),
            Row("a", {"label": _label("Alice")}),
        ]
        assert _ids(service.sort(rows, "label")) == ["a", "b", "c"]

    def test_ties_stable_descending(self, service):
        rows = [
            Row("x1", {"label": _label("apple")}),
            Row("y", {"label": _label("Banana")}),
            Row("x2", {"label": _label("apple")}),
        ]
        assert _ids(service.sort(rows, "label", "desc")) == ["y", "x1", "x2"]

    def test_injected_collation_key(self, rows):
        by_length = SortService(collation_key=len)
        assert _ids(by_length.sort(rows, "label")) == ["r3", "r4", "r1", "r2"]


class TestPurity:

    def test_input_not_mutated(self, service, rows):
        before = _ids(rows)
        result = service.sort(rows, "label")
        assert _ids(rows) == before
        assert result is not rows

    def test_same_row_objects(self, service, rows):
        result = service.sort(rows, "label")
        assert {id(r) for r in result} == {id(r) for r in rows}
