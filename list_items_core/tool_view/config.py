"""
    Tool view configuration — column cap, placeholders, default mode.
"""
from dataclasses import dataclass

from list_items_api.types import ListItemsMode
from list_items_core.services.base_service import UNFETCHED_PLACEHOLDER

NOTHING_SELECTED_MESSAGE = "Select items on the chart to see them listed here"
FILTER_MATCHES_NOTHING_MESSAGE = "Your current filters match nothing selected on the chart"


@dataclass
class ListItemsConfig:
    """
    Top-level configuration for the list items tool view.

    Attributes:
        max_visible_columns:            How many headings are rendered as
                                        table columns; CSV export ignores it.
        unfetched_placeholder:          Cell text for values not fetched yet.
        initial_mode:                   Mode the view starts in.
        reset_selection_on_mode_change: Clear the export selection when the
                                        mode switches.
        date_format:                    "iso" or a strftime pattern used by
                                        the default value formatter.
    """
    max_visible_columns: int = 7
    unfetched_placeholder: str = UNFETCHED_PLACEHOLDER
    initial_mode: ListItemsMode = ListItemsMode.ENTITY
    reset_selection_on_mode_change: bool = False
    date_format: str = "iso"
