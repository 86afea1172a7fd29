"""
    Table models - headings, cells, rows and export selection state.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Union

from ..types import LinkDirection
from .schema import Image


@dataclass(frozen=True)
class Heading:
    """Column key + display header text."""
    key: str
    header: str


@dataclass(frozen=True)
class LinkGlyph:
    """Inline SVG icon standing in for a link image, keyed by direction."""
    direction: LinkDirection
    svg: str


@dataclass(frozen=True)
class LabelContent:
    """Displayed content of a label cell: a leading image and the text."""
    image: Union[Image, LinkGlyph]
    text: str


@dataclass(frozen=True)
class SortableCell:
    """
    Cell whose displayed content is not itself comparable.
    Ordering and export use ``sort_value``.
    """
    content: LabelContent
    sort_value: str


Cell = Union[str, SortableCell]


def sort_value_of(cell: Cell) -> str:
    """The string used for ordering and export."""
    return cell if isinstance(cell, str) else cell.sort_value


class Row:
    """
    One table row: the record id plus a mapping heading key -> cell.
    Rows may lack a key; consumers skip such columns.
    """

    def __init__(self, row_id: str, cells: Optional[Dict[str, Cell]] = None):
        self.id = row_id
        self._cells: Dict[str, Cell] = dict(cells or {})

    def __getitem__(self, key: str) -> Cell:
        return self._cells[key]

    def __setitem__(self, key: str, cell: Cell) -> None:
        self._cells[key] = cell

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def get(self, key: str, default: Optional[Cell] = None) -> Optional[Cell]:
        return self._cells.get(key, default)

    def keys(self) -> List[str]:
        return list(self._cells.keys())

    def sort_value(self, key: str) -> str:
        """Sort value of the cell at ``key``, empty when the row has none."""
        cell = self._cells.get(key)
        return "" if cell is None else sort_value_of(cell)

    def to_dict(self) -> Dict[str, str]:
        return {k: sort_value_of(v) for k, v in self._cells.items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return False
        return self.id == other.id and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Row({self.id}, {self.to_dict()})"


@dataclass(frozen=True)
class ListItemType:
    """Item type entry offered by the type filter."""
    id: str
    label: str


@dataclass
class ProjectionResult:
    rows: List[Row] = field(default_factory=list)
    headings: List[Heading] = field(default_factory=list)
    item_types: List[ListItemType] = field(default_factory=list)


# ── Export selection state ───────────────────────────────────────

class AllSelected:
    """Every row currently in view is chosen, however many there are."""

    def includes(self, row_id: str) -> bool:
        return True

    def __eq__(self, other) -> bool:
        return isinstance(other, AllSelected)

    def __hash__(self) -> int:
        return hash(AllSelected)

    def __repr__(self) -> str:
        return "AllSelected()"


@dataclass(frozen=True)
class ExplicitSelection:
    """An explicit set of chosen row identifiers."""
    ids: FrozenSet[str] = frozenset()

    def includes(self, row_id: str) -> bool:
        return row_id in self.ids

    def with_id(self, row_id: str) -> 'ExplicitSelection':
        return ExplicitSelection(self.ids | {row_id})

    def without_id(self, row_id: str) -> 'ExplicitSelection':
        return ExplicitSelection(self.ids - {row_id})

    def __len__(self) -> int:
        return len(self.ids)


SelectionState = Union[AllSelected, ExplicitSelection]

ALL_SELECTED = AllSelected()


def coerce_selection_state(value: Union[SelectionState, str, Iterable[str]]) -> SelectionState:
    """Accept the variant, the literal ``"all"`` or a plain collection of ids."""
    if isinstance(value, (AllSelected, ExplicitSelection)):
        return value
    if isinstance(value, str):
        if value == "all":
            return ALL_SELECTED
        raise ValueError(f"Unknown selection state: {value!r}")
    return ExplicitSelection(frozenset(value))
