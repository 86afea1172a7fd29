# tests/core_test/test_state.py

import pytest

from list_items_api.types import ListItemsMode, SortOrder

from list_items_core.tool_view.state import (
    FilterItemTypeAction,
    FilterState,
    ListItemsState,
    ModeAction,
    SortAction,
    SortBy,
    list_items_reducer,
)


@pytest.fixture
def initial():
    return ListItemsState()


class TestReducer:

    def test_initial_state(self, initial):
        assert initial.mode == ListItemsMode.ENTITY
        assert initial.item_type_filter == "all"
        assert initial.sort_by is None

    def test_filter_item_type(self, initial):
        state = list_items_reducer(initial, FilterItemTypeAction("Person"))
        assert state.item_type_filter == "Person"
        assert state.mode == ListItemsMode.ENTITY

    def test_mode_resets_filter(self, initial):
        state = list_items_reducer(initial, FilterItemTypeAction("Person"))
        state = list_items_reducer(state, ModeAction(ListItemsMode.LINK))
        assert state.filter == FilterState(mode=ListItemsMode.LINK, item_type_filter="all")

    def test_mode_keeps_sort(self, initial):
        state = list_items_reducer(initial, SortAction(SortBy("label")))
        state = list_items_reducer(state, ModeAction(ListItemsMode.LINK))
        assert state.sort_by == SortBy("label", SortOrder.ASCENDING)

    def test_mode_accepts_value(self, initial):
        state = list_items_reducer(initial, ModeAction("link"))
        assert state.mode == ListItemsMode.LINK

    def test_sort_and_clear(self, initial):
        state = list_items_reducer(initial, SortAction(SortBy("age", SortOrder.DESCENDING)))
        assert state.sort_by.order == SortOrder.DESCENDING
        state = list_items_reducer(state, SortAction(None))
        assert state.sort_by is None

    def test_states_are_new_objects(self, initial):
        state = list_items_reducer(initial, FilterItemTypeAction("Person"))
        assert state is not initial
        assert initial.item_type_filter == "all"

    def test_unknown_action_leaves_state(self, initial):
        assert list_items_reducer(initial, object()) is initial
