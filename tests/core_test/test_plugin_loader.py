# tests/core_test/test_plugin_loader.py

import pytest

from list_items_api.plugins.base import SelectionSourcePlugin

from list_items_core.tool_view.plugin_loader import (
    SELECTION_SOURCE_EP_GROUP,
    PluginLoader,
    create_selection_source_loader,
)

from selection_source_json.plugin import JsonSelectionSourcePlugin


@pytest.fixture
def loader():
    return PluginLoader(SelectionSourcePlugin, "list_items_tests.none")


class TestPluginLoader:

    def test_empty_group(self, loader):
        assert loader.load_all() == {}
        assert len(loader) == 0
        assert loader.get("json") is None

    def test_register(self, loader):
        plugin = JsonSelectionSourcePlugin()
        loader.register("json", plugin)
        assert loader.get("json") is plugin
        assert "json" in loader
        assert loader.get_names() == ["json"]

    def test_register_rejects_other_types(self, loader):
        with pytest.raises(TypeError):
            loader.register("bad", object())

    def test_factory_uses_selection_source_group(self):
        loader = create_selection_source_loader()
        assert SELECTION_SOURCE_EP_GROUP in repr(loader)
        assert "SelectionSourcePlugin" in repr(loader)
