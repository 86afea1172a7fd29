# list_items_core/services/csv_service.py
"""
    CsvService — serializes chosen rows to tab-separated, JSON-quoted text.

    Layout (consumers depend on it byte for byte):
        "Header 1"\\t"Header 2"\\t\\n
        "cell"\\t"cell"\\t\\n

    Every field is quoted like JavaScript ``JSON.stringify`` and followed
    by a tab, so each line ends with a trailing tab before the newline.
    There is no byte-order mark and no closing section.
"""
import json
import logging
from typing import Iterable, Sequence, Union

from list_items_api.models.table import (
    Heading,
    Row,
    SelectionState,
    coerce_selection_state,
    sort_value_of,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"
LINE_SEPARATOR = "\n"


class CsvService:
    """
    Usage:
        text = CsvService().serialize(tracker.state, headings, rows)
    """

    def serialize(self, selection_state: Union[SelectionState, str, Iterable[str]],
                  headings: Sequence[Heading], rows: Sequence[Row]) -> str:
        """
        :param selection_state: Variant, ``"all"`` or a collection of row ids
        :param headings: Full (uncapped) heading list
        :param rows: Rows in their current, possibly sorted, order
        :return: Header line plus one line per chosen row
        """
        state = coerce_selection_state(selection_state)

        lines = [self._header_line(headings)]
        for row in rows:
            if state.includes(row.id):
                lines.append(self._row_line(headings, row))

        logger.debug("Serialized %d of %d row(s)", len(lines) - 1, len(rows))
        return "".join(lines)

    def _header_line(self, headings: Sequence[Heading]) -> str:
        fields = [self._quote(heading.header) for heading in headings]
        return self._join(fields)

    def _row_line(self, headings: Sequence[Heading], row: Row) -> str:
        # Headings the row has no cell for are skipped, not emitted empty
        fields = [
            self._quote(sort_value_of(row[heading.key]))
            for heading in headings
            if heading.key in row
        ]
        return self._join(fields)

    @staticmethod
    def _join(fields: Sequence[str]) -> str:
        return "".join(field + FIELD_SEPARATOR for field in fields) + LINE_SEPARATOR

    @staticmethod
    def _quote(value: str) -> str:
        return json.dumps(value, ensure_ascii=False)
