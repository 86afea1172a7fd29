"""
Chart List Items API — models and host/plugin contracts.
"""
from .types import (
    ALL_ITEM_TYPES,
    FALLBACK_LABEL,
    UNFETCHED,
    ItemKind,
    LinkDirection,
    ListItemsMode,
    SortOrder,
    TypeValidator,
    ValueType,
)
from .models.schema import ChartApplication, ChartSchema, Image, ItemType, PropertyType
from .models.record import EntityRecord, LinkRecord, Record
from .models.selection import ChartSelection
from .models.table import (
    ALL_SELECTED,
    AllSelected,
    ExplicitSelection,
    Heading,
    LabelContent,
    LinkGlyph,
    ListItemType,
    ProjectionResult,
    Row,
    SelectionState,
    SortableCell,
    sort_value_of,
)
from .plugins.base import ChartSnapshot, SelectionSourcePlugin, ValueFormatter

__all__ = [
    'ALL_ITEM_TYPES',
    'FALLBACK_LABEL',
    'UNFETCHED',
    'ItemKind',
    'LinkDirection',
    'ListItemsMode',
    'SortOrder',
    'TypeValidator',
    'ValueType',
    'ChartApplication',
    'ChartSchema',
    'Image',
    'ItemType',
    'PropertyType',
    'EntityRecord',
    'LinkRecord',
    'Record',
    'ChartSelection',
    'ALL_SELECTED',
    'AllSelected',
    'ExplicitSelection',
    'Heading',
    'LabelContent',
    'LinkGlyph',
    'ListItemType',
    'ProjectionResult',
    'Row',
    'SelectionState',
    'SortableCell',
    'sort_value_of',
    'ChartSnapshot',
    'SelectionSourcePlugin',
    'ValueFormatter',
]
