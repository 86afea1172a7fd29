# list_items_core/services/projection_service.py
"""
    SelectionProjector — turns a chart selection into table rows and headings.

    Extends ``RecordProjector`` (Template Method + Genericity) once per
    record kind and dispatches on the list mode.
"""
import logging
from typing import List, Sequence, Union

from list_items_api.models.record import EntityRecord, LinkRecord
from list_items_api.models.schema import ChartSchema, Image
from list_items_api.models.selection import ChartSelection
from list_items_api.models.table import Heading, LinkGlyph, ProjectionResult, Row
from list_items_api.plugins.base import ValueFormatter
from list_items_api.types import ItemKind, ListItemsMode

from .base_service import RecordProjector, UNFETCHED_PLACEHOLDER
from .link_icons import glyph_for

logger = logging.getLogger(__name__)

ENTITY_HEADINGS = (
    Heading(key="label", header="Label"),
    Heading(key="itemType", header="Type"),
    Heading(key="analyzeRecordId", header="Id"),
)

LINK_HEADINGS = ENTITY_HEADINGS + (
    Heading(key="direction", header="Direction"),
    Heading(key="fromEndLabel", header="From End Label"),
    Heading(key="toEndLabel", header="To End Label"),
)


class EntityProjector(RecordProjector[EntityRecord]):
    """Rows for the entity records of a selection."""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.ENTITY

    @property
    def base_headings(self) -> Sequence[Heading]:
        return ENTITY_HEADINGS

    def _collect_records(self, selection: ChartSelection) -> List[EntityRecord]:
        return selection.entity_records

    def _base_row(self, record: EntityRecord) -> Row:
        return Row(record.record_id, {
            'label': self._label_cell(record, self._record_image(record)),
            'itemType': record.item_type.display_name,
            'analyzeRecordId': record.record_id,
        })

    @staticmethod
    def _record_image(record: EntityRecord) -> Image:
        """The record's own image, otherwise its item type's default image."""
        image = record.image or record.item_type.image
        return image if image is not None else Image(href="")


class LinkProjector(RecordProjector[LinkRecord]):
    """Rows for the link records of a selection."""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.LINK

    @property
    def base_headings(self) -> Sequence[Heading]:
        return LINK_HEADINGS

    def _collect_records(self, selection: ChartSelection) -> List[LinkRecord]:
        return selection.link_records

    def _base_row(self, record: LinkRecord) -> Row:
        return Row(record.record_id, {
            'label': self._label_cell(record, self._record_image(record)),
            'itemType': record.item_type.display_name,
            'analyzeRecordId': record.record_id,
            'direction': record.link_direction.value,
            'fromEndLabel': record.from_end.label_or_fallback,
            'toEndLabel': record.to_end.label_or_fallback,
        })

    @staticmethod
    def _record_image(record: LinkRecord) -> Union[Image, LinkGlyph]:
        """The record's own image, otherwise the glyph for its direction."""
        if record.image is not None:
            return record.image
        return glyph_for(record.link_direction)


class SelectionProjector:
    """
    Projects (mode, type filter, selection, formatter, schema) into
    ``ProjectionResult(rows, headings, item_types)``.

    The result is recomputed in full on every call; row order follows the
    insertion order of the selection.
    """

    def __init__(self, unfetched_placeholder: str = UNFETCHED_PLACEHOLDER):
        self._projectors = {
            ListItemsMode.ENTITY: EntityProjector(unfetched_placeholder),
            ListItemsMode.LINK: LinkProjector(unfetched_placeholder),
        }

    def project(self, mode: ListItemsMode, item_type_filter: str,
                selection: ChartSelection, formatter: ValueFormatter,
                schema: ChartSchema) -> ProjectionResult:
        """
        :param mode: Which record collection to list
        :param item_type_filter: ``"all"`` or a specific item type id
        :param selection: Current chart selection
        :param formatter: Value formatter supplied by the host
        :param schema: Chart schema used for item type lookups
        :return: Rows, headings and encountered item types
        :raises SchemaInconsistencyError: If the schema lacks a referenced type
        """
        result = self._projectors[ListItemsMode(mode)].project(
            item_type_filter, selection, formatter, schema
        )
        logger.debug("Projected %d %s row(s) for filter '%s'",
                     len(result.rows), ListItemsMode(mode).value, item_type_filter)
        return result
