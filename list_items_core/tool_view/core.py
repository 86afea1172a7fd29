"""
    ListItemsView — the table container behind the "List items" tool view.

    Design Patterns applied
    ───────────────────────
    • Facade             – single entry-point for a renderer or the CLI;
                           hides projection, sorting, row selection and
                           export.
    • Observer           – subscribes to the host's selection-change
                           notifier, and exposes its own ``_listeners``
                           hooks so a renderer can redraw on change.
    • Reducer            – mode / type filter / sort transitions go through
                           ``list_items_reducer``.

    State held by the caller side (the row selection tracker and the sort
    order) survives every recomputation of the projection; a new
    notification replaces rows, headings and item types wholesale.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from list_items_api.models.schema import ChartApplication
from list_items_api.models.selection import ChartSelection
from list_items_api.models.table import Heading, ListItemType, Row
from list_items_api.plugins.base import ValueFormatter
from list_items_api.types import ALL_ITEM_TYPES, ListItemsMode, SortOrder

from list_items_core.services.csv_service import CsvService
from list_items_core.services.exceptions import ExportDisabledError, ListItemsError
from list_items_core.services.formatter import DefaultValueFormatter
from list_items_core.services.projection_service import SelectionProjector
from list_items_core.services.selection_tracker import RowSelectionTracker
from list_items_core.services.sort_service import SortService

from .config import (
    FILTER_MATCHES_NOTHING_MESSAGE,
    NOTHING_SELECTED_MESSAGE,
    ListItemsConfig,
)
from .events import SelectionChangeNotifier, SubscribeOptions, Subscription
from .state import (
    Action,
    FilterItemTypeAction,
    FilterState,
    ListItemsState,
    ModeAction,
    SortAction,
    SortBy,
    list_items_reducer,
)

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_ROWS_UPDATED = "rows_updated"
EVENT_FILTER_CHANGED = "filter_changed"
EVENT_SELECTION_STATE_CHANGED = "selection_state_changed"


class EmptyState(Enum):
    """What the table shows when it has no rows."""
    NONE = ""
    NOTHING_SELECTED = NOTHING_SELECTED_MESSAGE
    FILTER_MATCHES_NOTHING = FILTER_MATCHES_NOTHING_MESSAGE


class ListItemsView:
    """
    Central orchestrator — Facade for one activation of the tool view.

    Manages:
        • Subscription to selection changes (activate / deactivate).
        • Mode, item type filter and sort order.
        • Export selection (row selection tracker).
        • CSV export of the chosen rows.
        • Observer hooks for the renderer.
    """

    def __init__(self, notifier: SelectionChangeNotifier,
                 formatter: Optional[ValueFormatter] = None,
                 config: Optional[ListItemsConfig] = None,
                 tracker: Optional[RowSelectionTracker] = None):
        """
        Args:
            notifier:  Host selection-change notifier.
            formatter: Host value formatter (defaults to ``DefaultValueFormatter``).
            config:    Tool view configuration.
            tracker:   Row selection tracker; injected so renderers and
                       export share one instance.
        """
        self._config: ListItemsConfig = config or ListItemsConfig()
        self._notifier = notifier
        self._formatter: ValueFormatter = formatter or DefaultValueFormatter(
            date_format=self._config.date_format
        )
        self._tracker = tracker or RowSelectionTracker()

        self._projector = SelectionProjector(self._config.unfetched_placeholder)
        self._sorter = SortService()
        self._csv = CsvService()

        self._state = ListItemsState(filter=FilterState(mode=self._config.initial_mode))
        self._subscription: Optional[Subscription] = None

        # Last notification, reprojected on every mode / filter change
        self._selection: Optional[ChartSelection] = None
        self._application: Optional[ChartApplication] = None

        self._rows: List[Row] = []
        self._headings: List[Heading] = []
        self._item_types: List[ListItemType] = []
        self._record_count = 0

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    # ── Lifecycle ────────────────────────────────────────────────

    def activate(self) -> None:
        """Start listening; the current selection is projected immediately."""
        if self._subscription is not None:
            return
        self._subscription = self._notifier.subscribe(
            self._on_selection_change, SubscribeOptions(dispatch_now=True)
        )
        logger.info("List items view activated (%s mode).", self.mode.value)

    def deactivate(self) -> None:
        """Stop listening. Safe to call more than once."""
        if self._subscription is None:
            return
        self._subscription.cancel()
        self._subscription = None
        logger.info("List items view deactivated.")

    @property
    def is_active(self) -> bool:
        return self._subscription is not None

    # ── Read-only view of the current table ──────────────────────

    @property
    def config(self) -> ListItemsConfig:
        return self._config

    @property
    def state(self) -> ListItemsState:
        return self._state

    @property
    def mode(self) -> ListItemsMode:
        return self._state.mode

    @property
    def item_type_filter(self) -> str:
        return self._state.item_type_filter

    @property
    def sort_by(self) -> Optional[SortBy]:
        return self._state.sort_by

    @property
    def rows(self) -> List[Row]:
        return list(self._rows)

    @property
    def headings(self) -> List[Heading]:
        """Full heading list, as used by the CSV export."""
        return list(self._headings)

    @property
    def visible_headings(self) -> List[Heading]:
        """Headings rendered as table columns, capped at ``max_visible_columns``."""
        return self._headings[:self._config.max_visible_columns]

    @property
    def item_types(self) -> List[ListItemType]:
        return list(self._item_types)

    @property
    def record_count(self) -> int:
        """Number of records selected on the chart, across both modes."""
        return self._record_count

    @property
    def empty_state(self) -> EmptyState:
        if self._rows:
            return EmptyState.NONE
        if self._record_count:
            return EmptyState.FILTER_MATCHES_NOTHING
        return EmptyState.NOTHING_SELECTED

    # ── Mode / filter / sort ─────────────────────────────────────

    def dispatch(self, action: Action) -> ListItemsState:
        """Apply an action to the view state and refresh the table."""
        previous = self._state
        self._state = list_items_reducer(previous, action)

        if isinstance(action, SortAction):
            self._apply_sort()
            self._notify(EVENT_ROWS_UPDATED, rows=self.rows, headings=self.headings)
            return self._state

        if previous.filter == self._state.filter:
            return self._state

        try:
            self._recompute()
        except ListItemsError:
            self._state = previous
            raise
        self._notify(EVENT_FILTER_CHANGED, filter=self._state.filter)

        if previous.mode != self._state.mode and self._config.reset_selection_on_mode_change:
            self._tracker.reset()
            self._notify(EVENT_SELECTION_STATE_CHANGED, state=self._tracker.state)
        return self._state

    def set_mode(self, mode: Union[ListItemsMode, str]) -> None:
        self.dispatch(ModeAction(ListItemsMode(mode)))

    def set_item_type_filter(self, item_type_filter: str) -> None:
        self.dispatch(FilterItemTypeAction(item_type_filter))

    def sort(self, key: str, order: Union[SortOrder, str] = SortOrder.ASCENDING) -> None:
        self.dispatch(SortAction(SortBy(key, SortOrder(order))))

    def clear_sort(self) -> None:
        """Forget the sort column; rows keep their current order until the next change."""
        self.dispatch(SortAction(None))

    def reset_filters(self) -> None:
        """Back to entity mode with every item type (the empty-table reset)."""
        self.set_mode(ListItemsMode.ENTITY)

    # ── Export selection ─────────────────────────────────────────

    @property
    def tracker(self) -> RowSelectionTracker:
        return self._tracker

    def select_all(self) -> None:
        self._tracker.select_all()
        self._notify(EVENT_SELECTION_STATE_CHANGED, state=self._tracker.state)

    def deselect_all(self) -> None:
        self._tracker.deselect_all()
        self._notify(EVENT_SELECTION_STATE_CHANGED, state=self._tracker.state)

    def toggle_row(self, row_id: str, included: bool) -> bool:
        """Choose or drop one row; ignored while every row is selected."""
        changed = self._tracker.toggle(row_id, included)
        if changed:
            self._notify(EVENT_SELECTION_STATE_CHANGED, state=self._tracker.state)
        return changed

    def is_row_selected(self, row_id: str) -> bool:
        return self._tracker.is_selected(row_id)

    @property
    def export_enabled(self) -> bool:
        return self._tracker.export_enabled

    def export_csv(self) -> str:
        """
        Serialize the chosen rows, in their current order, with all headings.

        Raises:
            ExportDisabledError: If no row is chosen.
        """
        if not self.export_enabled:
            raise ExportDisabledError("No rows are selected for export.")

        text = self._csv.serialize(self._tracker.state, self._headings, self._rows)
        logger.info("Exported %d row(s) with %d heading(s).",
                    len(self._tracker.selected_ids(self._rows)), len(self._headings))
        return text

    # ── Recomputation ────────────────────────────────────────────

    def _on_selection_change(self, selection: ChartSelection,
                             application: ChartApplication) -> None:
        previous = self._selection, self._application
        self._selection = selection
        self._application = application
        try:
            self._recompute()
        except ListItemsError:
            self._selection, self._application = previous
            raise

    def _recompute(self) -> None:
        if self._selection is None or self._application is None:
            return

        result = self._projector.project(
            self._state.mode,
            self._state.item_type_filter,
            self._selection,
            self._formatter,
            self._application.schema,
        )

        self._rows = result.rows
        self._headings = result.headings
        self._record_count = len(self._selection)
        if self._state.item_type_filter == ALL_ITEM_TYPES:
            self._item_types = result.item_types

        self._apply_sort()
        logger.debug("Recomputed %d row(s), %d heading(s).",
                     len(self._rows), len(self._headings))
        self._notify(EVENT_ROWS_UPDATED, rows=self.rows, headings=self.headings)

    def _apply_sort(self) -> None:
        sort_by = self._state.sort_by
        if sort_by is None:
            return
        if self._headings and not any(h.key == sort_by.key for h in self._headings):
            logger.warning("Sort column '%s' is no longer displayed; sort dropped.", sort_by.key)
            self._state = list_items_reducer(self._state, SortAction(None))
            return
        self._rows = self._sorter.sort(self._rows, sort_by.key, sort_by.order)

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a view event.

        Events:
            - rows_updated
            - filter_changed
            - selection_state_changed
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in list(self._listeners.get(event, [])):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    # ── Dunder ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"ListItemsView(mode={self.mode.value}, "
            f"filter='{self.item_type_filter}', "
            f"rows={len(self._rows)}, active={self.is_active})"
        )
