"""
Data model — schema, records, selection and table types.
"""
from .schema import ChartApplication, ChartSchema, Image, ItemType, PropertyType
from .record import EntityRecord, LinkRecord, Record
from .selection import ChartSelection
from .table import Heading, ListItemType, ProjectionResult, Row, SortableCell

__all__ = [
    'ChartApplication',
    'ChartSchema',
    'Image',
    'ItemType',
    'PropertyType',
    'EntityRecord',
    'LinkRecord',
    'Record',
    'ChartSelection',
    'Heading',
    'ListItemType',
    'ProjectionResult',
    'Row',
    'SortableCell',
]
