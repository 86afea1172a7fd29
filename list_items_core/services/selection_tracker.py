# list_items_core/services/selection_tracker.py
"""
    RowSelectionTracker — which rows are chosen for export.

    The state is a tagged variant: ``AllSelected`` (every row in view) or
    ``ExplicitSelection`` (a set of row ids). Per-row toggling is only
    defined on the explicit arm; while all rows are selected the row
    checkboxes render checked and disabled, and the caller has to
    ``deselect_all`` before choosing individual rows.
"""
import logging
from typing import List, Sequence

from list_items_api.models.table import (
    ALL_SELECTED,
    AllSelected,
    ExplicitSelection,
    Row,
    SelectionState,
)

logger = logging.getLogger(__name__)


class RowSelectionTracker:
    """
    Holds the export selection independently of filtering and sorting.

    Identifiers of rows that are no longer displayed may stay in the
    explicit set; they are ignored when resolved against the current rows.
    """

    def __init__(self, state: SelectionState = ExplicitSelection()):
        self._state: SelectionState = state

    @property
    def state(self) -> SelectionState:
        return self._state

    def select_all(self) -> None:
        self._state = ALL_SELECTED

    def deselect_all(self) -> None:
        self._state = ExplicitSelection()

    def reset(self) -> None:
        """Back to the initial, empty explicit selection."""
        self.deselect_all()

    def set_all(self, checked: bool) -> None:
        """Header checkbox handler."""
        if checked:
            self.select_all()
        else:
            self.deselect_all()

    def toggle(self, row_id: str, included: bool) -> bool:
        """
        Add or remove one row from the explicit selection.

        Returns:
            False when the state is ``all`` and nothing changed.
        """
        if isinstance(self._state, AllSelected):
            logger.warning("Toggle of row '%s' ignored while all rows are selected.", row_id)
            return False

        if included:
            self._state = self._state.with_id(row_id)
        else:
            self._state = self._state.without_id(row_id)
        return True

    def is_selected(self, row_id: str) -> bool:
        return self._state.includes(row_id)

    @property
    def all_selected(self) -> bool:
        return isinstance(self._state, AllSelected)

    @property
    def header_checked(self) -> bool:
        return self.all_selected

    @property
    def is_row_toggle_enabled(self) -> bool:
        return not self.all_selected

    @property
    def export_enabled(self) -> bool:
        return self.all_selected or len(self._state) > 0

    def selected_ids(self, rows: Sequence[Row]) -> List[str]:
        """Ids of the given rows that are chosen, in row order."""
        return [row.id for row in rows if self._state.includes(row.id)]

    def __repr__(self) -> str:
        if self.all_selected:
            return "RowSelectionTracker(all)"
        return f"RowSelectionTracker({sorted(self._state.ids)})"
