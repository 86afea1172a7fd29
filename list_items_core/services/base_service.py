"""
    Generic base for projecting selected records into table rows.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a projection (collect records → resolve the
    type filter → build headings → build rows), letting concrete subclasses
    (EntityProjector, LinkProjector) supply the record collection, the base
    headings and the base row of their record kind.

    Genericity:
    ─────────────────────────
    Uses Generic[TRecord] so each projector declares the record kind it
    handles.
"""
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Sequence, TypeVar

from list_items_api.models.record import Record
from list_items_api.models.schema import ChartSchema, ItemType, PropertyType
from list_items_api.models.selection import ChartSelection
from list_items_api.models.table import (
    Heading,
    LabelContent,
    ListItemType,
    ProjectionResult,
    Row,
    SortableCell,
)
from list_items_api.plugins.base import ValueFormatter
from list_items_api.types import ALL_ITEM_TYPES, ItemKind

from .exceptions import SchemaInconsistencyError

UNFETCHED_PLACEHOLDER = "Value not fetched"

# Generic type variable for the record kind
TRecord = TypeVar('TRecord', bound=Record)


class RecordProjector(ABC, Generic[TRecord]):
    """
    Abstract generic base for projecting one record kind of a selection
    into rows, headings and encountered item types.

    Concrete subclasses must implement:
        - kind                        → entity or link
        - base_headings               → fixed leading headings
        - _collect_records(selection) → records of this kind, in order
        - _base_row(record)           → row holding the base cells
    """

    def __init__(self, unfetched_placeholder: str = UNFETCHED_PLACEHOLDER):
        self._unfetched_placeholder = unfetched_placeholder

    def project(self, item_type_filter: str, selection: ChartSelection,
                formatter: ValueFormatter, schema: ChartSchema) -> ProjectionResult:
        """
        Template Method: collect → filter by item type → build rows.

        Args:
            item_type_filter: ``"all"`` or an item type id of this kind.
            selection:        The current chart selection.
            formatter:        Formats property values and wraps bidi text.
            schema:           Authoritative chart schema.

        Raises:
            SchemaInconsistencyError: If the schema lacks a referenced type.
        """
        records = self._collect_records(selection)

        if item_type_filter == ALL_ITEM_TYPES:
            return self._project_all(records, schema)
        return self._project_item_type(records, item_type_filter, formatter, schema)

    # ── Template Method hooks ────────────────────────────────────

    @property
    @abstractmethod
    def kind(self) -> ItemKind:
        ...

    @property
    @abstractmethod
    def base_headings(self) -> Sequence[Heading]:
        ...

    @abstractmethod
    def _collect_records(self, selection: ChartSelection) -> List[TRecord]:
        ...

    @abstractmethod
    def _base_row(self, record: TRecord) -> Row:
        ...

    # ── Shared steps ─────────────────────────────────────────────

    def _project_all(self, records: List[TRecord],
                     schema: ChartSchema) -> ProjectionResult:
        seen: Dict[str, None] = {}
        rows = []
        for record in records:
            seen.setdefault(record.item_type.id, None)
            rows.append(self._base_row(record))

        return ProjectionResult(
            rows=rows,
            headings=list(self.base_headings),
            item_types=self._item_types(seen, schema),
        )

    def _project_item_type(self, records: List[TRecord], item_type_id: str,
                           formatter: ValueFormatter,
                           schema: ChartSchema) -> ProjectionResult:
        item_type = self._require_item_type(schema, item_type_id)

        headings = list(self.base_headings)
        headings.extend(
            Heading(key=pt.id, header=formatter.wrap_for_bidi(pt.display_name, "raw"))
            for pt in item_type.property_types
        )

        rows = []
        for record in records:
            if record.item_type.id != item_type_id:
                continue
            self._check_properties(record, item_type)

            row = self._base_row(record)
            for property_type in item_type.property_types:
                row[property_type.id] = self._format_record_value(
                    property_type, record, formatter
                ) or ""
            rows.append(row)

        item_types = [ListItemType(item_type.id, item_type.display_name)] if rows else []
        return ProjectionResult(rows=rows, headings=headings, item_types=item_types)

    def _format_record_value(self, property_type: PropertyType, record: TRecord,
                             formatter: ValueFormatter) -> Optional[str]:
        value = record.get_property(property_type)
        if record.is_value_unfetched(value):
            return formatter.wrap_for_bidi(self._unfetched_placeholder, "raw")

        formatted = formatter.format_value(value)
        return formatted and formatter.wrap_for_bidi(formatted, "raw")

    def _label_cell(self, record: TRecord, image) -> SortableCell:
        text = record.label_or_fallback
        return SortableCell(content=LabelContent(image=image, text=text), sort_value=text)

    def _item_types(self, item_type_ids: Dict[str, None],
                    schema: ChartSchema) -> List[ListItemType]:
        return [
            ListItemType(id=item_type_id,
                         label=self._require_item_type(schema, item_type_id).display_name)
            for item_type_id in item_type_ids
        ]

    def _require_item_type(self, schema: ChartSchema, item_type_id: str) -> ItemType:
        item_type = schema.get_item_type(self.kind, item_type_id)
        if item_type is None:
            raise SchemaInconsistencyError(
                f"No {self.kind.value} type '{item_type_id}' in the chart schema."
            )
        return item_type

    @staticmethod
    def _check_properties(record: Record, item_type: ItemType) -> None:
        for property_type_id in record.properties:
            if not item_type.has_property_type(property_type_id):
                raise SchemaInconsistencyError(
                    f"Record '{record.record_id}' has property '{property_type_id}' "
                    f"not declared by item type '{item_type.id}'."
                )
