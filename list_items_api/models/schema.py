"""
    Chart schema - item types and the property types they support.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..types import ItemKind, ValueType


@dataclass(frozen=True)
class Image:
    """Image reference shown in front of a record label."""
    href: str
    description: str = ""


@dataclass(frozen=True)
class PropertyType:
    """
    A typed, named attribute definable on an item type.

    Attributes:
        id:           Identifier, also used as the column key.
        display_name: Human readable name (column header).
        value_type:   Logical type used to convert raw source values.
    """
    id: str
    display_name: str
    value_type: ValueType = ValueType.STR


@dataclass(frozen=True)
class ItemType:
    """
    Schema-defined category of a record (e.g. "Person").

    ``property_types`` keeps the declared order; dynamic table headings
    follow it.
    """
    id: str
    display_name: str
    kind: ItemKind = ItemKind.ENTITY
    property_types: Tuple[PropertyType, ...] = ()
    image: Optional[Image] = None

    def get_property_type(self, property_type_id: str) -> Optional[PropertyType]:
        for property_type in self.property_types:
            if property_type.id == property_type_id:
                return property_type
        return None

    def has_property_type(self, property_type_id: str) -> bool:
        return self.get_property_type(property_type_id) is not None


class ChartSchema:
    """
    Read-only lookup of entity and link types by identifier.

    Every lookup is fallible and returns ``None`` when nothing matches;
    callers decide whether that is an error.
    """

    def __init__(self, entity_types: Iterable[ItemType] = (),
                 link_types: Iterable[ItemType] = ()):
        self._entity_types: Dict[str, ItemType] = {}
        self._link_types: Dict[str, ItemType] = {}

        for item_type in entity_types:
            self._register(self._entity_types, item_type, ItemKind.ENTITY)
        for item_type in link_types:
            self._register(self._link_types, item_type, ItemKind.LINK)

    @staticmethod
    def _register(registry: Dict[str, ItemType], item_type: ItemType,
                  kind: ItemKind) -> None:
        if item_type.kind != kind:
            raise ValueError(
                f"Item type {item_type.id} is a {item_type.kind.value} type, "
                f"expected {kind.value}"
            )
        if item_type.id in registry:
            raise ValueError(f"Item type with id {item_type.id} already exists")
        registry[item_type.id] = item_type

    def get_entity_type(self, item_type_id: str) -> Optional[ItemType]:
        return self._entity_types.get(item_type_id)

    def get_link_type(self, item_type_id: str) -> Optional[ItemType]:
        return self._link_types.get(item_type_id)

    def get_item_type(self, kind: ItemKind, item_type_id: str) -> Optional[ItemType]:
        if kind == ItemKind.ENTITY:
            return self.get_entity_type(item_type_id)
        return self.get_link_type(item_type_id)

    def find_item_type(self, item_type_id: str) -> Optional[ItemType]:
        """Look the id up among entity types first, then link types."""
        return self.get_entity_type(item_type_id) or self.get_link_type(item_type_id)

    @property
    def entity_types(self) -> List[ItemType]:
        return list(self._entity_types.values())

    @property
    def link_types(self) -> List[ItemType]:
        return list(self._link_types.values())

    def __repr__(self) -> str:
        return (f"ChartSchema(entity_types={len(self._entity_types)}, "
                f"link_types={len(self._link_types)})")


@dataclass
class ChartApplication:
    """
    Application/context handle delivered alongside every selection change.

    Attributes:
        schema: The active chart schema.
        name:   Label of the chart the selection belongs to.
    """
    schema: ChartSchema = field(default_factory=ChartSchema)
    name: str = "chart"
