#!/usr/bin/env python3
# shellkit/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: per-session registry of commands, iterated in name order.
- command: decorator turning a handler function into a Command.
"""

import logging
from typing import Callable, Dict, Optional

from shellkit.commands.command_types import Command, CommandCompleter, CommandHandler

log = logging.getLogger(__name__)


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        # Name -> Command. Names are case-sensitive.
        self._commands_by_name: Dict[str, Command] = {}
        # Category -> description text
        self._category_descriptions: Dict[str, str] = {}

    # ---------------- Registration ----------------

    def add(self, command_obj: Command) -> bool:
        """
        Register a command. Returns False (and keeps the existing entry) when the
        name is empty, already taken, or the command has no callable handler.
        """
        if not command_obj.name or not callable(command_obj.handler):
            log.warning("Rejected command %r: missing name or handler", command_obj.name)
            return False
        if command_obj.name in self._commands_by_name:
            log.warning("Rejected command %r: name already registered", command_obj.name)
            return False

        self._commands_by_name[command_obj.name] = command_obj
        log.debug("Registered command %r", command_obj.name)
        return True

    def register(
        self,
        name: str,
        description: str,
        handler: Optional[CommandHandler],
        completer: Optional[CommandCompleter] = None,
    ) -> bool:
        """Build and add a Command in one call; same result contract as `add`."""
        return self.add(
            Command(name=name, description=description, handler=handler, completer=completer)  # type: ignore[arg-type]
        )

    # ---------------- Lookup ----------------

    def contains(self, name: str) -> bool:
        return name in self._commands_by_name

    def __contains__(self, name: object) -> bool:
        return name in self._commands_by_name

    def __len__(self) -> int:
        return len(self._commands_by_name)

    def get(self, name: str) -> Optional[Command]:
        """Return the command registered under `name`, or None."""
        return self._commands_by_name.get(name)

    def all(self) -> list[Command]:
        """Return commands in name order."""
        return [self._commands_by_name[n] for n in self.names()]

    def names(self) -> list[str]:
        """Return all command names in sorted order."""
        return sorted(self._commands_by_name)

    def categories(self) -> dict[str, list[Command]]:
        """Group commands by category for help output."""
        grouped: dict[str, list[Command]] = {}
        for cmd in self.all():
            grouped.setdefault(cmd.category, []).append(cmd)
        return grouped

    def set_category_description(self, category: str, description: str) -> None:
        self._category_descriptions[category] = description.strip()

    def category_description(self, category: str) -> str:
        """Return display text for a category, or an empty string."""
        return self._category_descriptions.get(category, "")

    # ---------------- Completion ----------------

    def complete(self, buffer: str) -> list[str]:
        """Full-line completions for an edit buffer (see interface.completion)."""
        from shellkit.interface.completion import complete

        return complete(self, buffer)


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    completer: CommandCompleter | None = None,
    category: str | None = None,
) -> Callable[[CommandHandler], Command]:
    """
    Decorator turning a handler function into a Command object.

    - `name` defaults to the function name.
    - `description` defaults to the first line of the docstring.
    The decorated name is bound to the Command; register it with
    ``CommandRegistry.add`` or export it from a plugin's COMMANDS list.
    """

    def wrapper(func: CommandHandler) -> Command:
        doc = (getattr(func, "__doc__", None) or "").strip()
        if description is None:
            summary = doc.splitlines()[0] if doc else ""
        else:
            summary = description
        command_obj = Command(
            name=name or func.__name__,  # type: ignore[attr-defined]
            description=summary,
            handler=func,
            completer=completer,
            category=category or "general",
        )
        command_obj.module = getattr(func, "__module__", "")
        return command_obj

    return wrapper
