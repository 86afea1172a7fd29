# tests/cli_test/test_cli.py
"""
CLI tests — commands, command processor, parsing, loading selections.
"""
import pytest
from pathlib import Path

from list_items_api.plugins.base import SelectionSourcePlugin
from list_items_api.types import ListItemsMode

from list_items_core.tool_view.cli.command_processor import CommandProcessor
from list_items_core.tool_view.cli.commands import (
    CommandResult,
    ExportCommand,
    FilterCommand,
    HelpCommand,
    ModeCommand,
    SelectCommand,
    ShowCommand,
    SortCommand,
    ToggleCommand,
    TypesCommand,
)
from list_items_core.tool_view.core import ListItemsView
from list_items_core.tool_view.events import SelectionChangeNotifier
from list_items_core.tool_view.plugin_loader import PluginLoader

from selection_source_json.plugin import JsonSelectionSourcePlugin
from selection_source_xml.plugin import XmlSelectionSourcePlugin

FIXTURES_DIR = Path(__file__).parent.parent / "plugin_test" / "fixtures"


# ── Helpers ──────────────────────────────────────────────────────

@pytest.fixture
def view(notifier, formatter):
    v = ListItemsView(notifier, formatter)
    v.activate()
    return v


@pytest.fixture
def loader():
    # Group with no installed entry points, plugins registered by hand
    loader = PluginLoader(SelectionSourcePlugin, "list_items_tests.none")
    loader.register("json", JsonSelectionSourcePlugin())
    loader.register("xml", XmlSelectionSourcePlugin())
    return loader


@pytest.fixture
def processor(view, notifier, loader):
    return CommandProcessor(view, notifier, loader)


# ═════════════════════════════════════════════════════════════════
#  CommandResult
# ═════════════════════════════════════════════════════════════════

class TestCommandResult:

    def test_default_fields(self):
        r = CommandResult(True, "ok")
        assert r.success is True
        assert r.message == "ok"
        assert r.data == {}


# ═════════════════════════════════════════════════════════════════
#  Commands (direct execution)
# ═════════════════════════════════════════════════════════════════

class TestCommands:

    def test_mode(self, view):
        r = ModeCommand("link").execute(view)
        assert r.success is True
        assert view.mode == ListItemsMode.LINK
        assert r.data == {"mode": "link"}

    def test_filter(self, view):
        r = FilterCommand("Person").execute(view)
        assert r.success is True
        assert "3 row(s)" in r.message

    def test_filter_unknown_type_fails(self, view):
        r = FilterCommand("Ghost").execute(view)
        assert r.success is False
        assert "Ghost" in r.message

    def test_sort(self, view):
        r = SortCommand("label", "desc").execute(view)
        assert r.success is True
        assert r.data == {"key": "label", "order": "desc"}
        assert view.rows[0].id == "e4"

    def test_sort_unknown_column(self, view):
        r = SortCommand("age").execute(view)
        assert r.success is False
        assert "label" in r.message

    def test_select_all_and_none(self, view):
        assert SelectCommand(True).execute(view).success is True
        assert view.tracker.all_selected is True
        SelectCommand(False).execute(view)
        assert view.export_enabled is False

    def test_toggle(self, view):
        r = ToggleCommand("e1", True).execute(view)
        assert r.success is True
        assert view.is_row_selected("e1") is True

    def test_toggle_under_all_fails(self, view):
        view.select_all()
        r = ToggleCommand("e1", False).execute(view)
        assert r.success is False
        assert "select none" in r.message

    def test_export_disabled(self, view):
        r = ExportCommand().execute(view)
        assert r.success is False

    def test_export(self, view):
        view.toggle_row("e2", True)
        r = ExportCommand().execute(view)
        assert r.success is True
        assert r.message == '"Label"\t"Type"\t"Id"\t\n"Bob"\t"Person"\t"e2"\t\n'
        assert r.data["csv"] == r.message

    def test_show(self, view):
        view.toggle_row("e1", True)
        r = ShowCommand().execute(view)
        lines = r.message.splitlines()

        assert "Label | Type | Id" in lines[0]
        assert lines[1] == "[x] Alice | Person | e1"
        assert lines[2] == "[ ] Bob | Person | e2"
        assert len(r.data["rows"]) == 4

    def test_show_nothing_selected(self):
        r = ShowCommand().execute(ListItemsView(SelectionChangeNotifier()))
        assert r.message == "Select items on the chart to see them listed here"
        assert r.data == {"rows": []}

    def test_show_filter_matches_nothing(self, view, notifier, two_people):
        notifier.publish(two_people)
        FilterCommand("Organisation").execute(view)
        r = ShowCommand().execute(view)
        assert r.message == "Your current filters match nothing selected on the chart"

    def test_types(self, view):
        view.set_item_type_filter("Person")
        r = TypesCommand().execute(view)
        assert r.data == {"types": ["Person", "Organisation"]}
        assert "* Person: Person" in r.message

    def test_help(self, view):
        r = HelpCommand().execute(view)
        assert "load <plugin> <path>" in r.message


# ═════════════════════════════════════════════════════════════════
#  Processor parsing
# ═════════════════════════════════════════════════════════════════

class TestProcessorParsing:

    @pytest.mark.parametrize("text", ["", "   ", "# only a comment"])
    def test_empty_command(self, processor, text):
        r = processor.process(text)
        assert r.success is False
        assert "Empty command" in r.message

    @pytest.mark.parametrize("text", [
        "dance",
        "mode",
        "mode nodes",
        "filter",
        "sort",
        "sort label sideways",
        "sort a b c",
        "select some",
        "toggle e1",
        "toggle e1 maybe",
        "load json",
    ])
    def test_parse_errors(self, processor, text):
        r = processor.process(text)
        assert r.success is False
        assert r.message.startswith("Parse error")

    def test_verbs_are_case_insensitive(self, processor, view):
        assert processor.process("MODE LINK").success is True
        assert view.mode == ListItemsMode.LINK

    def test_inline_comment(self, processor, view):
        assert processor.process("sort label desc   # newest first").success is True
        assert view.sort_by.key == "label"

    def test_quoted_arguments(self, processor, view):
        processor.process("toggle 'e1' on")
        assert view.is_row_selected("e1") is True


# ═════════════════════════════════════════════════════════════════
#  Processor end-to-end
# ═════════════════════════════════════════════════════════════════

class TestProcessorSession:

    def test_filter_sort_select_export(self, processor):
        assert processor.process("filter Person").success is True
        assert processor.process("sort age desc").success is True
        assert processor.process("select all").success is True

        r = processor.process("export")
        lines = r.message.splitlines()
        assert lines[1].startswith('"Carol"')
        assert lines[0].count("\t") == 6

    def test_load_json(self, processor, view):
        r = processor.process(f"load json {FIXTURES_DIR / 'chart1.json'}")
        assert r.success is True
        assert r.data == {"records": 7}
        assert view.record_count == 7
        assert [t.id for t in view.item_types] == ["Person", "Organisation"]

    def test_load_xml_then_links(self, processor, view):
        processor.process(f"load xml {FIXTURES_DIR / 'chart1.xml'}")
        processor.process("mode link")
        assert [row.id for row in view.rows] == ["l1", "l2", "l3"]

    def test_load_unknown_plugin(self, processor):
        r = processor.process("load csv data.csv")
        assert r.success is False
        assert "json, xml" in r.message

    def test_load_missing_file(self, processor, tmp_path):
        r = processor.process(f"load json {tmp_path / 'missing.json'}")
        assert r.success is False

    def test_default_loader_is_created(self, view, notifier):
        assert CommandProcessor(view, notifier).process("help").success is True
