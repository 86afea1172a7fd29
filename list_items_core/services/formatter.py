"""
    DefaultValueFormatter — formats property values for table cells.

    Used when the host does not supply its own ``ValueFormatter``.
"""
from datetime import date, datetime
from typing import Any, Optional

from list_items_api.plugins.base import ValueFormatter

# Unicode directional isolates
FIRST_STRONG_ISOLATE = "\u2068"
LEFT_TO_RIGHT_ISOLATE = "\u2066"
RIGHT_TO_LEFT_ISOLATE = "\u2067"
POP_DIRECTIONAL_ISOLATE = "\u2069"

_ISOLATES = {
    "raw": FIRST_STRONG_ISOLATE,
    "ltr": LEFT_TO_RIGHT_ISOLATE,
    "rtl": RIGHT_TO_LEFT_ISOLATE,
}


class DefaultValueFormatter(ValueFormatter):
    """
    Plain-text formatting of property values.

    Usage:
        formatter = DefaultValueFormatter(date_format="%d/%m/%Y")
        formatter.format_value(date(2020, 1, 2))   # → '02/01/2020'
        formatter.wrap_for_bidi("Name")            # → '\\u2068Name\\u2069'
    """

    def __init__(self, date_format: str = "iso", bidi_isolation: bool = True):
        """
        Args:
            date_format:    "iso" or a strftime pattern for date values.
            bidi_isolation: When False ``wrap_for_bidi`` returns text unchanged.
        """
        self._date_format = date_format
        self._bidi_isolation = bidi_isolation

    def format_value(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (date, datetime)):
            if self._date_format == "iso":
                return value.isoformat()
            return value.strftime(self._date_format)
        return str(value)

    def wrap_for_bidi(self, text: str, mode: str = "raw") -> str:
        if mode not in _ISOLATES:
            raise ValueError(f"Unknown bidi mode: {mode}")
        if not self._bidi_isolation:
            return text
        return f"{_ISOLATES[mode]}{text}{POP_DIRECTIONAL_ISOLATE}"
