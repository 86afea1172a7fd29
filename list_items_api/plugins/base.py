"""
    Abstract base classes for host collaborators and plugins.
    Defines the "Contract" that formatters and selection sources must follow.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..models.schema import ChartApplication
from ..models.selection import ChartSelection


class ValueFormatter(ABC):
    """
        Formats property values for display.
        Pattern: Strategy (supplied by the host application).
    """

    @abstractmethod
    def format_value(self, value: Any) -> Optional[str]:
        """
        Format a property value.

        Returns:
            The display string, or None when the value has no representation.
        """
        pass

    @abstractmethod
    def wrap_for_bidi(self, text: str, mode: str = "raw") -> str:
        """
        Mark text so right-to-left or mixed-direction rendering keeps it intact.

        Args:
            text: Text to wrap.
            mode: "raw" (direction neutral), "ltr" or "rtl".
        """
        pass


@dataclass
class ChartSnapshot:
    """A selection together with the application context it belongs to."""
    selection: ChartSelection
    application: ChartApplication


class SelectionSourcePlugin(ABC):
    """
        Abstract base class for Selection Source plugins.
        Pattern: Strategy (for loading a chart selection).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the plugin.
            Example: "JSON Selection Source"
        """
        pass

    @abstractmethod
    def load(self, file_path: str) -> ChartSnapshot:
        """
        Main method: reads a file and returns the selection it describes.

        Args:
            file_path: Path to the file to be loaded.

        Returns:
            ChartSnapshot: selection plus application context (schema).
        """
        pass
