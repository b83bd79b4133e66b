#!/usr/bin/env python3
# shellkit/interface/__init__.py
from __future__ import annotations

"""
Package for interactive console input and command dispatch.

Provides:
- Shell-like tokenizer.
- Command dispatcher and help formatting.
- Whole-line completion engine.
- Raw keystroke sources and the interactive line editor.
- CLI frontends (builtin editor / prompt_toolkit).
- Dynamic command loader for the plugins package.
"""


# Parser first (handler depends on it)
from .parser import tokenize

# Command dispatcher / help
from .handler import (
    execute_line,
    suggest_commands,
    format_help,
    format_category_help,
    format_command_help,
    help_topics,
    HELP_TEXT,
)

# Completion
from .completion import complete, split_for_completion

# Keystrokes + editor
from .keys import (
    KeySource,
    PosixKeySource,
    WindowsKeySource,
    RawModeGuard,
    default_key_source,
)
from .editor import LineEditor, CompletionProvider

# Loader
from .loader import load_commands, register_all

# CLI frontends (after the editor is available)
from .cli import BaseCLI, LineEditorCLI, PromptToolkitCLI, make_cli, LINE_EDITORS

__all__ = [
    # parser
    "tokenize",
    # handler
    "execute_line",
    "suggest_commands",
    "format_help",
    "format_category_help",
    "format_command_help",
    "help_topics",
    "HELP_TEXT",
    # completion
    "complete",
    "split_for_completion",
    # keys / editor
    "KeySource",
    "PosixKeySource",
    "WindowsKeySource",
    "RawModeGuard",
    "default_key_source",
    "LineEditor",
    "CompletionProvider",
    # loader
    "load_commands",
    "register_all",
    # cli
    "BaseCLI",
    "LineEditorCLI",
    "PromptToolkitCLI",
    "make_cli",
    "LINE_EDITORS",
]
