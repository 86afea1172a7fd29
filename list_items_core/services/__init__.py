"""
Core services — projection, sorting, row selection, CSV export.
"""
from .base_service import RecordProjector, UNFETCHED_PLACEHOLDER
from .projection_service import (
    ENTITY_HEADINGS,
    LINK_HEADINGS,
    EntityProjector,
    LinkProjector,
    SelectionProjector,
)
from .sort_service import SortService
from .selection_tracker import RowSelectionTracker
from .csv_service import CsvService
from .formatter import DefaultValueFormatter
from .link_icons import LINK_GLYPHS, glyph_for
from .exceptions import (
    ExportDisabledError,
    ListItemsError,
    SchemaInconsistencyError,
    SelectionSourceError,
)

__all__ = [
    'RecordProjector',
    'UNFETCHED_PLACEHOLDER',
    'ENTITY_HEADINGS',
    'LINK_HEADINGS',
    'EntityProjector',
    'LinkProjector',
    'SelectionProjector',
    'SortService',
    'RowSelectionTracker',
    'CsvService',
    'DefaultValueFormatter',
    'LINK_GLYPHS',
    'glyph_for',
    'ExportDisabledError',
    'ListItemsError',
    'SchemaInconsistencyError',
    'SelectionSourceError',
]
