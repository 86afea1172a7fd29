"""
List items tool view — orchestration package.

Public API:
    ListItemsView           – table container (Facade)
    ListItemsConfig         – tool view configuration
    SelectionChangeNotifier – host selection-change events
    PluginLoader            – selection-source discovery
"""
from .config import (
    FILTER_MATCHES_NOTHING_MESSAGE,
    NOTHING_SELECTED_MESSAGE,
    ListItemsConfig,
)
from .events import SelectionChangeNotifier, SubscribeOptions, Subscription
from .state import (
    FilterItemTypeAction,
    FilterState,
    ListItemsState,
    ModeAction,
    SortAction,
    SortBy,
    list_items_reducer,
)
from .core import (
    EVENT_FILTER_CHANGED,
    EVENT_ROWS_UPDATED,
    EVENT_SELECTION_STATE_CHANGED,
    EmptyState,
    ListItemsView,
)
from .plugin_loader import (
    SELECTION_SOURCE_EP_GROUP,
    PluginLoader,
    create_selection_source_loader,
)

__all__ = [
    'FILTER_MATCHES_NOTHING_MESSAGE',
    'NOTHING_SELECTED_MESSAGE',
    'ListItemsConfig',
    'SelectionChangeNotifier',
    'SubscribeOptions',
    'Subscription',
    'FilterItemTypeAction',
    'FilterState',
    'ListItemsState',
    'ModeAction',
    'SortAction',
    'SortBy',
    'list_items_reducer',
    'EVENT_FILTER_CHANGED',
    'EVENT_ROWS_UPDATED',
    'EVENT_SELECTION_STATE_CHANGED',
    'EmptyState',
    'ListItemsView',
    'SELECTION_SOURCE_EP_GROUP',
    'PluginLoader',
    'create_selection_source_loader',
]
