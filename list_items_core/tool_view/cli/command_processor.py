"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Facade        – single ``process(text)`` entry-point hides all parsing.

    The processor drives one ``ListItemsView``. ``load`` publishes through
    the view's selection-change notifier, so the table recomputes exactly
    as it would for a selection made on the chart.
"""
from __future__ import annotations

import logging
import shlex
from typing import List, Optional

from list_items_api.plugins.base import SelectionSourcePlugin

from ..core import ListItemsView
from ..events import SelectionChangeNotifier
from ..plugin_loader import PluginLoader, create_selection_source_loader
from .commands import (
    Command,
    CommandResult,
    ExportCommand,
    FilterCommand,
    HelpCommand,
    LoadCommand,
    ModeCommand,
    SelectCommand,
    ShowCommand,
    SortCommand,
    ToggleCommand,
    TypesCommand,
)

logger = logging.getLogger(__name__)

_ON_OFF = {"on": True, "off": False}


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects and executes them
    against the view.

    Usage:
        processor = CommandProcessor(view, notifier)
        result = processor.process("load json ./selection.json")
        result = processor.process("sort label desc")
    """

    def __init__(self, view: ListItemsView, notifier: SelectionChangeNotifier,
                 loader: Optional[PluginLoader[SelectionSourcePlugin]] = None):
        """
        Args:
            view:     The tool view the commands act on.
            notifier: Notifier the view listens to; ``load`` publishes here.
            loader:   Selection-source plugins (entry-point discovery by default).
        """
        self._view = view
        self._notifier = notifier
        self._loader = loader or create_selection_source_loader()

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str) -> CommandResult:
        """
        Parse and execute a single CLI command.

        Returns:
            ``CommandResult``; parse errors come back as failed results.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            command = self._parse(text)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}")

        logger.debug("Executing %s", type(command).__name__)
        return command.execute(self._view)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("sort label desc   # newest first")
            'sort label desc'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            ValueError: If the text cannot be parsed.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            tokens = text.split()

        if not tokens:
            raise ValueError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        # ── Single-word commands ──
        if verb == "help":
            return HelpCommand()
        if verb == "show":
            return ShowCommand()
        if verb == "types":
            return TypesCommand()
        if verb == "export":
            return ExportCommand()

        if verb == "mode":
            mode = self._expect_args(verb, args, 1, "mode entity|link")[0].lower()
            if mode not in ("entity", "link"):
                raise ValueError(f"Unknown mode: '{mode}'. Use 'entity' or 'link'.")
            return ModeCommand(mode)

        if verb == "filter":
            return FilterCommand(self._expect_args(verb, args, 1, "filter all|<item type id>")[0])

        if verb == "sort":
            if not args or len(args) > 2:
                raise ValueError("Usage: sort <column key> [asc|desc]")
            order = args[1].lower() if len(args) > 1 else "asc"
            if order not in ("asc", "desc"):
                raise ValueError(f"Unknown sort order: '{order}'. Use 'asc' or 'desc'.")
            return SortCommand(args[0], order)

        if verb == "select":
            target = self._expect_args(verb, args, 1, "select all|none")[0].lower()
            if target not in ("all", "none"):
                raise ValueError(f"Unknown select target: '{target}'. Use 'all' or 'none'.")
            return SelectCommand(target == "all")

        if verb == "toggle":
            row_id, state = self._expect_args(verb, args, 2, "toggle <row id> on|off")
            if state.lower() not in _ON_OFF:
                raise ValueError(f"Unknown toggle state: '{state}'. Use 'on' or 'off'.")
            return ToggleCommand(row_id, _ON_OFF[state.lower()])

        if verb == "load":
            plugin_name, path = self._expect_args(verb, args, 2, "load <plugin> <path>")
            return LoadCommand(plugin_name, path, self._loader, self._notifier)

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    @staticmethod
    def _expect_args(verb: str, args: List[str], count: int, usage: str) -> List[str]:
        if len(args) != count:
            raise ValueError(f"Usage: {usage}")
        return args
