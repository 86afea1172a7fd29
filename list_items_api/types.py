"""
    Shared enumerations, sentinels and value-type conversion.
"""
from enum import Enum
from typing import Any
from datetime import date, datetime


ALL_ITEM_TYPES = "all"
FALLBACK_LABEL = "(No label)"


class ListItemsMode(Enum):
    """Which record collection of the selection is listed"""
    ENTITY = "entity"
    LINK = "link"


class ItemKind(Enum):
    """Entity types and link types live in disjoint identifier spaces"""
    ENTITY = "entity"
    LINK = "link"


class LinkDirection(Enum):
    WITH = "with"
    AGAINST = "against"
    BOTH = "both"
    NONE = "none"


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class _Unfetched:
    """Marker for a property value the host has not fetched yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNFETCHED"

    def __bool__(self) -> bool:
        return False


UNFETCHED = _Unfetched()


class ValueType(Enum):
    INT = "int"
    STR = "str"
    FLOAT = "float"
    DATE = "date"
    BOOL = "bool"


class TypeValidator:
    """Validation and conversion of raw property values"""

    @staticmethod
    def convert_to_type(value: Any, target_type: ValueType) -> Any:
        """Convert value to target type"""
        if target_type == ValueType.INT:
            return int(value)
        elif target_type == ValueType.FLOAT:
            return float(value)
        elif target_type == ValueType.DATE:
            if isinstance(value, str):
                return datetime.fromisoformat(value).date()
            elif isinstance(value, datetime):
                return value.date()
            return value
        elif target_type == ValueType.BOOL:
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes')
            return bool(value)
        else:  # STR
            return str(value)

    @staticmethod
    def validate_and_convert(value: Any, target_type: ValueType) -> Any:
        """Validate and convert value"""
        try:
            return TypeValidator.convert_to_type(value, target_type)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {value} to {target_type.value}: {str(e)}")
