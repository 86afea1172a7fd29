"""
    Selection-source plugin discovery via entry_points.

    Design Pattern: Service Locator / Registry
    ────────────────────────────────────────────
    Discovers installed selection sources at runtime by scanning the
    ``chart_list_items.selection_source`` entry-point group. Plugins that
    fail to import, or that do not subclass the expected base class, are
    logged and skipped.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, List, Optional, Type, TypeVar

from list_items_api.plugins.base import SelectionSourcePlugin

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

# Must match the entry_points declared in setup.py
SELECTION_SOURCE_EP_GROUP = 'chart_list_items.selection_source'


class PluginLoader(Generic[TPlugin]):
    """
    Loads every plugin of one type from one entry-point group.

    Usage:
        loader = PluginLoader(SelectionSourcePlugin, SELECTION_SOURCE_EP_GROUP)
        json_source = loader.get('json')
    """

    def __init__(self, plugin_base_class: Type[TPlugin], group: str):
        self._base_class = plugin_base_class
        self._group = group
        self._plugins: Dict[str, TPlugin] = {}
        self._loaded = False

    def register(self, name: str, plugin: TPlugin) -> None:
        """Add a plugin instance by hand, bypassing discovery."""
        if not isinstance(plugin, self._base_class):
            raise TypeError(
                f"Plugin '{name}' is not a {self._base_class.__name__}."
            )
        self._plugins[name] = plugin

    def load_all(self) -> Dict[str, TPlugin]:
        """
        Discover and instantiate every plugin registered under the group.

        Returns:
            Dict mapping entry-point name → plugin instance.
        """
        if self._loaded:
            return self._plugins

        for ep in importlib.metadata.entry_points(group=self._group):
            if ep.name in self._plugins:
                continue
            try:
                plugin_cls = ep.load()
            except Exception as exc:
                logger.error("Failed to load plugin '%s': %s", ep.name, exc)
                continue
            if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, self._base_class)):
                logger.warning("Plugin '%s' does not subclass %s, skipped.",
                               ep.name, self._base_class.__name__)
                continue
            self._plugins[ep.name] = plugin_cls()
            logger.info("Loaded plugin: %s (%s)", ep.name, plugin_cls.__name__)

        self._loaded = True
        return self._plugins

    def get(self, name: str) -> Optional[TPlugin]:
        if not self._loaded:
            self.load_all()
        return self._plugins.get(name)

    def get_names(self) -> List[str]:
        """Return sorted list of all known plugin names."""
        if not self._loaded:
            self.load_all()
        return sorted(self._plugins.keys())

    def __len__(self) -> int:
        if not self._loaded:
            self.load_all()
        return len(self._plugins)

    def __contains__(self, name: str) -> bool:
        if not self._loaded:
            self.load_all()
        return name in self._plugins

    def __repr__(self) -> str:
        return (
            f"PluginLoader(base={self._base_class.__name__}, "
            f"group='{self._group}', loaded={len(self._plugins)})"
        )


def create_selection_source_loader() -> PluginLoader[SelectionSourcePlugin]:
    """Create a loader for selection-source plugins."""
    return PluginLoader(SelectionSourcePlugin, SELECTION_SOURCE_EP_GROUP)
