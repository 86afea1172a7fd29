"""
    View state and its reducer — mode, item type filter and sort column.

    Every action produces a new immutable ``ListItemsState``; switching the
    mode always resets the item type filter to ``"all"``.
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from list_items_api.types import ALL_ITEM_TYPES, ListItemsMode, SortOrder


@dataclass(frozen=True)
class FilterState:
    mode: ListItemsMode = ListItemsMode.ENTITY
    item_type_filter: str = ALL_ITEM_TYPES


@dataclass(frozen=True)
class SortBy:
    key: str
    order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class ListItemsState:
    filter: FilterState = field(default_factory=FilterState)
    sort_by: Optional[SortBy] = None

    @property
    def mode(self) -> ListItemsMode:
        return self.filter.mode

    @property
    def item_type_filter(self) -> str:
        return self.filter.item_type_filter


# ── Actions ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class ModeAction:
    mode: ListItemsMode


@dataclass(frozen=True)
class FilterItemTypeAction:
    item_type_filter: str


@dataclass(frozen=True)
class SortAction:
    sort_by: Optional[SortBy]


Action = Union[ModeAction, FilterItemTypeAction, SortAction]


def list_items_reducer(state: ListItemsState, action: Action) -> ListItemsState:
    """Return the state that results from applying ``action``."""
    if isinstance(action, ModeAction):
        return replace(state, filter=FilterState(mode=ListItemsMode(action.mode)))
    if isinstance(action, FilterItemTypeAction):
        return replace(state, filter=replace(state.filter,
                                             item_type_filter=action.item_type_filter))
    if isinstance(action, SortAction):
        return replace(state, sort_by=action.sort_by)
    return state
