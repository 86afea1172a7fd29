"""
CLI package — text commands driving the list items tool view.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with
                  ``execute(view)``.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor
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

__all__ = [
    'CommandProcessor',
    'Command',
    'CommandResult',
    'ExportCommand',
    'FilterCommand',
    'HelpCommand',
    'LoadCommand',
    'ModeCommand',
    'SelectCommand',
    'ShowCommand',
    'SortCommand',
    'ToggleCommand',
    'TypesCommand',
]
