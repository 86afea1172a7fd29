"""
    Record models - entity and link instances of a chart.
"""
from typing import Any, Dict, Optional
from abc import ABC, abstractmethod
from datetime import date, datetime

from ..types import FALLBACK_LABEL, UNFETCHED, ItemKind, LinkDirection
from .schema import Image, ItemType, PropertyType


class Record(ABC):
    """
    Abstract class for a record on the chart.
    Each record has an ID, an item type and property values keyed by
    property type id.
    """

    def __init__(self, record_id: Any, item_type: ItemType,
                 label: Optional[str] = None,
                 image: Optional[Image] = None,
                 properties: Optional[Dict[str, Any]] = None):
        """
        Initialize a record.

        Args:
            record_id:  Unique identifier of the record (will be converted to str)
            item_type:  Schema item type of the record
            label:      Display label, may be missing
            image:      Optional record specific image
            properties: Property values keyed by property type id
        """
        # Ensure ID is always a string for consistency in comparisons
        self.record_id = str(record_id)
        self.item_type = item_type
        self.label = label
        self.image = image
        self.properties: Dict[str, Any] = {}

        for key, value in (properties or {}).items():
            self.set_property(key, value)

    @property
    @abstractmethod
    def kind(self) -> ItemKind:
        ...

    @property
    def label_or_fallback(self) -> str:
        return self.label if self.label else FALLBACK_LABEL

    def set_property(self, property_type_id: str, value: Any) -> None:
        self.properties[property_type_id] = value

    def get_property(self, property_type: PropertyType) -> Any:
        """Get the value stored for a property type, None when absent."""
        return self.properties.get(property_type.id)

    @staticmethod
    def is_value_unfetched(value: Any) -> bool:
        return value is UNFETCHED

    def is_entity(self) -> bool:
        return self.kind == ItemKind.ENTITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.record_id}, {self.item_type.id}, {self.label_or_fallback!r})"

    def __eq__(self, other) -> bool:
        """Two records are equal if they have the same ID and kind"""
        if not isinstance(other, Record):
            return False
        return self.kind == other.kind and self.record_id == other.record_id

    def __hash__(self) -> int:
        return hash((self.kind, self.record_id))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert record to dictionary.
        Dates become ISO strings, unfetched values become None.
        """
        serializable_props = {}
        for k, v in self.properties.items():
            if isinstance(v, (date, datetime)):
                serializable_props[k] = v.isoformat()
            elif self.is_value_unfetched(v):
                serializable_props[k] = None
            else:
                serializable_props[k] = v

        return {
            'id': self.record_id,
            'type': self.item_type.id,
            'label': self.label,
            'properties': serializable_props,
        }


class EntityRecord(Record):
    """An entity on the chart."""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.ENTITY


class LinkRecord(Record):
    """
    A link between two entity records.
    ``direction`` says which way the link points relative to its ends.
    """

    def __init__(self, record_id: Any, item_type: ItemType,
                 from_end: EntityRecord, to_end: EntityRecord,
                 direction: LinkDirection = LinkDirection.NONE,
                 label: Optional[str] = None,
                 image: Optional[Image] = None,
                 properties: Optional[Dict[str, Any]] = None):
        super().__init__(record_id, item_type, label, image, properties)
        self.from_end = from_end
        self.to_end = to_end
        self.link_direction = LinkDirection(direction)

    @property
    def kind(self) -> ItemKind:
        return ItemKind.LINK

    def __repr__(self) -> str:
        return (f"LinkRecord({self.record_id}, {self.from_end.record_id} "
                f"-[{self.link_direction.value}]- {self.to_end.record_id})")

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            'from': self.from_end.record_id,
            'to': self.to_end.record_id,
            'direction': self.link_direction.value,
        })
        return result
