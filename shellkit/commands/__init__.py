#!/usr/bin/env python3
# shellkit/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandContext`, `CommandHandler`, `CommandCompleter`).
- Per-session registry and decorator (`CommandRegistry`, `command`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules
from .command_types import Command, CommandContext, CommandHandler, CommandCompleter
from .commands import CommandRegistry, command

__all__ = [
    "Command",
    "CommandContext",
    "CommandHandler",
    "CommandCompleter",
    "CommandRegistry",
    "command",
]
