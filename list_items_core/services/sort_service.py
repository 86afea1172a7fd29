# list_items_core/services/sort_service.py
"""
    SortService — orders table rows by the sort value of one column.
"""
from functools import lru_cache
from typing import Any, Callable, List, Optional, Sequence, Union

from pyuca import Collator

from list_items_api.models.table import Row
from list_items_api.types import SortOrder

CollationKey = Callable[[str], Any]


@lru_cache(maxsize=None)
def default_collator() -> Collator:
    """Unicode Collation Algorithm collator over the default table, built once."""
    return Collator()


class SortService:
    """
    Stable, locale-aware ordering of rows.

    Values are compared with Unicode collation rather than code points, so
    case and accents do not split the alphabet ("apple" < "Banana",
    "Émile" < "eve"). A different collation key can be injected, e.g. a
    tailored collator's ``sort_key``.

    ``sort`` never mutates its input; it returns a new list so the same
    rows can be re-sorted against any order the caller holds.
    """

    def __init__(self, collation_key: Optional[CollationKey] = None):
        self._collation_key = collation_key

    def sort(self, rows: Sequence[Row], key: str,
             order: Union[SortOrder, str] = SortOrder.ASCENDING) -> List[Row]:
        """
        :param rows: Rows to order (left untouched)
        :param key: Heading key whose cells are compared
        :param order: ``SortOrder`` or its value ("asc" / "desc")
        :return: A new list of the same rows in sorted order
        :raises ValueError: If ``order`` is not a known sort order
        """
        order = SortOrder(order)
        collation_key = self._collation_key or default_collator().sort_key
        # reverse=True keeps ties in their original relative order
        return sorted(
            rows,
            key=lambda row: collation_key(row.sort_value(key)),
            reverse=order == SortOrder.DESCENDING,
        )
