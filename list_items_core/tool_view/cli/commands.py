"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one tool view action as an object with
    ``execute(view) → CommandResult``. Failures inside a command are
    reported through the result, never raised to the invoker.

    Supported commands:
    ───────────────────
        mode   entity|link
        filter all|<item type id>
        sort   <heading key> [asc|desc]
        select all|none
        toggle <row id> on|off
        show
        types
        export
        load   <plugin> <path>
        help
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from list_items_api.models.table import sort_value_of
from list_items_api.plugins.base import SelectionSourcePlugin
from list_items_api.types import ListItemsMode, SortOrder

from list_items_core.services.exceptions import ListItemsError

from ..core import EmptyState, ListItemsView
from ..events import SelectionChangeNotifier
from ..plugin_loader import PluginLoader

logger = logging.getLogger(__name__)


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """Abstract base for all CLI commands."""

    def execute(self, view: ListItemsView) -> CommandResult:
        """Run the command; library errors become a failed result."""
        try:
            return self._run(view)
        except (ListItemsError, ValueError) as exc:
            logger.warning("%s failed: %s", type(self).__name__, exc)
            return CommandResult(False, str(exc))

    @abstractmethod
    def _run(self, view: ListItemsView) -> CommandResult:
        ...


# ═════════════════════════════════════════════════════════════════
#  VIEW STATE COMMANDS
# ═════════════════════════════════════════════════════════════════

class ModeCommand(Command):
    """
    Switch between entity and link rows. Resets the type filter.

    Syntax:
        mode entity
        mode link
    """

    def __init__(self, mode: str):
        self._mode = mode

    def _run(self, view: ListItemsView) -> CommandResult:
        view.set_mode(ListItemsMode(self._mode))
        return CommandResult(
            True,
            f"Mode set to '{view.mode.value}': {len(view.rows)} row(s).",
            data={"mode": view.mode.value},
        )


class FilterCommand(Command):
    """
    Restrict rows to one item type, or show every type again.

    Syntax:
        filter all
        filter <item type id>
    """

    def __init__(self, item_type_filter: str):
        self._item_type_filter = item_type_filter

    def _run(self, view: ListItemsView) -> CommandResult:
        view.set_item_type_filter(self._item_type_filter)
        return CommandResult(
            True,
            f"Filter set to '{view.item_type_filter}': {len(view.rows)} row(s).",
            data={"filter": view.item_type_filter},
        )


class SortCommand(Command):
    """
    Order rows by one column.

    Syntax:
        sort label
        sort <heading key> desc
    """

    def __init__(self, key: str, order: str = SortOrder.ASCENDING.value):
        self._key = key
        self._order = order

    def _run(self, view: ListItemsView) -> CommandResult:
        keys = [h.key for h in view.headings]
        if keys and self._key not in keys:
            return CommandResult(False, f"Unknown column '{self._key}'. Columns: {', '.join(keys)}.")

        view.sort(self._key, SortOrder(self._order))
        return CommandResult(
            True,
            f"Sorted by '{self._key}' ({view.sort_by.order.value}).",
            data={"key": self._key, "order": view.sort_by.order.value},
        )


# ═════════════════════════════════════════════════════════════════
#  EXPORT SELECTION COMMANDS
# ═════════════════════════════════════════════════════════════════

class SelectCommand(Command):
    """
    Choose every row, or none, for export.

    Syntax:
        select all
        select none
    """

    def __init__(self, everything: bool):
        self._everything = everything

    def _run(self, view: ListItemsView) -> CommandResult:
        if self._everything:
            view.select_all()
            return CommandResult(True, "All rows selected for export.")
        view.deselect_all()
        return CommandResult(True, "Export selection cleared.")


class ToggleCommand(Command):
    """
    Choose or drop a single row.

    Syntax:
        toggle <row id> on
        toggle <row id> off
    """

    def __init__(self, row_id: str, included: bool):
        self._row_id = row_id
        self._included = included

    def _run(self, view: ListItemsView) -> CommandResult:
        if not view.toggle_row(self._row_id, self._included):
            return CommandResult(
                False,
                "All rows are selected; use 'select none' before choosing single rows.",
            )
        state = "selected" if self._included else "deselected"
        return CommandResult(True, f"Row '{self._row_id}' {state}.")


class ExportCommand(Command):
    """
    Print the chosen rows as tab-separated text.

    Syntax:
        export
    """

    def _run(self, view: ListItemsView) -> CommandResult:
        text = view.export_csv()
        return CommandResult(True, text, data={"csv": text})


# ═════════════════════════════════════════════════════════════════
#  SOURCE COMMANDS
# ═════════════════════════════════════════════════════════════════

class LoadCommand(Command):
    """
    Load a chart selection through a selection-source plugin and publish it.

    Syntax:
        load json ./selection.json
        load xml ./selection.xml
    """

    def __init__(self, plugin_name: str, file_path: str,
                 loader: PluginLoader[SelectionSourcePlugin],
                 notifier: SelectionChangeNotifier):
        self._plugin_name = plugin_name
        self._file_path = file_path
        self._loader = loader
        self._notifier = notifier

    def _run(self, view: ListItemsView) -> CommandResult:
        plugin = self._loader.get(self._plugin_name)
        if plugin is None:
            available = ", ".join(self._loader.get_names()) or "none"
            return CommandResult(
                False, f"Unknown source '{self._plugin_name}'. Available: {available}."
            )

        snapshot = plugin.load(self._file_path)
        self._notifier.publish(snapshot.selection, snapshot.application)
        logger.info("Loaded '%s' with %s.", self._file_path, plugin.get_plugin_name())
        return CommandResult(
            True,
            f"Loaded {len(snapshot.selection)} selected record(s) from '{self._file_path}'.",
            data={"records": len(snapshot.selection)},
        )


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS
# ═════════════════════════════════════════════════════════════════

class ShowCommand(Command):
    """
    Render the visible columns of the table.

    Syntax:
        show
    """

    def _run(self, view: ListItemsView) -> CommandResult:
        if view.empty_state is not EmptyState.NONE:
            return CommandResult(True, view.empty_state.value, data={"rows": []})

        headings = view.visible_headings
        lines: List[str] = [
            "    " + " | ".join(h.header for h in headings)
        ]
        for row in view.rows:
            mark = "[x]" if view.is_row_selected(row.id) else "[ ]"
            cells = [sort_value_of(row[h.key]) if h.key in row else "" for h in headings]
            lines.append(f"{mark} " + " | ".join(cells))

        return CommandResult(
            True,
            "\n".join(lines),
            data={"rows": [row.to_dict() for row in view.rows]},
        )


class TypesCommand(Command):
    """
    List the item types offered by the type filter.

    Syntax:
        types
    """

    def _run(self, view: ListItemsView) -> CommandResult:
        item_types = view.item_types
        if not item_types:
            return CommandResult(True, "No item types.", data={"types": []})
        lines = [f"  {'*' if t.id == view.item_type_filter else ' '} {t.id}: {t.label}"
                 for t in item_types]
        return CommandResult(
            True,
            f"── Item types ({len(item_types)}) ──\n" + "\n".join(lines),
            data={"types": [t.id for t in item_types]},
        )


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def _run(self, view: ListItemsView) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  mode entity|link
      Show entities or links. Resets the type filter.

  filter all|<item type id>
      Show one item type, or every type.

  sort <column key> [asc|desc]
      Order rows by a column. Example: sort label desc

  select all|none
      Choose every row for export, or clear the choice.

  toggle <row id> on|off
      Choose or drop a single row.

  show
      Show the table.

  types
      List the item types of the current mode.

  export
      Print the chosen rows as tab-separated text.

  load <plugin> <path>
      Load a chart selection with a selection source (json, xml).

  help
      Show this help text.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
