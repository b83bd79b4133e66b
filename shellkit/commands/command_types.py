#!/usr/bin/env python3
# shellkit/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandHandler: the callable protocol for any command implementation.
- CommandCompleter: the callable protocol for argument completion.
- CommandContext: the mutable state handed to a handler on every call.
- Command: a registered command with metadata and its callables.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from shellkit.config import AppConfig
    from shellkit.ui import Console


@dataclass(slots=True)
class CommandContext:
    """
    State shared between the shell loop and command handlers.

    Attributes:
        console: Output sink for plain and colored text.
        running: Cleared by a handler to ask the shell loop to stop after this line.
        config: Settings of the running shell, when a ShellApplication owns the loop.
    """
    console: Console
    running: bool = True
    config: Optional[AppConfig] = None


class CommandHandler(Protocol):
    """Protocol for any command function: positional args plus the context."""

    def __call__(self, args: list[str], context: CommandContext) -> None:  # pragma: no cover - signature only
        ...


class CommandCompleter(Protocol):
    """Protocol for argument completers: return suffixes for the partial token."""

    def __call__(self, partial: str, stable_args: list[str]) -> Sequence[str]:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class Command:
    """
    A registered command with metadata and a callable to execute.

    Important fields:
        name: Primary unique command name (case-sensitive).
        description: Short, user-facing description.
        handler: Function implementing the command.
        completer: Optional provider of argument completions.
        module: Python module path where the command is defined.
        category: Logical group for help output.
    """

    name: str
    description: str
    handler: CommandHandler
    completer: Optional[CommandCompleter] = None
    module: str = field(default="", repr=False)
    category: str = "general"

    def invoke(self, args: list[str], context: CommandContext) -> None:
        """Execute the underlying handler with the given arguments."""
        self.handler(args, context)
