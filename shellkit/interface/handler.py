#!/usr/bin/env python3
# shellkit/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help formatting.

A line is tokenized, its first token names the command and the rest are
passed to the handler as positional arguments. Handlers validate their own
arguments and report problems through the context console.
"""

import logging

from shellkit.commands import CommandContext, CommandRegistry
from shellkit.interface.parser import tokenize
from shellkit.ui import format_table

log = logging.getLogger(__name__)

# Short hint appended to unknown command errors
HELP_TEXT = "Type 'help' to list commands."


def suggest_commands(registry: CommandRegistry, name: str) -> list[str]:
    """Return every registered name that starts with `name`, in name order."""
    return [candidate for candidate in registry.names() if candidate.startswith(name)]


def format_help(registry: CommandRegistry) -> str:
    """Render the list of commands with their descriptions."""
    rows = [[cmd.name, cmd.description] for cmd in registry.all()]
    if not rows:
        return "No commands registered."
    return "Available commands:\n" + format_table(rows, border=False, indent=2)


def format_category_help(registry: CommandRegistry, category: str) -> str:
    """Render one category: its description line, then its commands."""
    commands_in_category = registry.categories().get(category)
    if not commands_in_category:
        return f"No such category: {category}"
    description = registry.category_description(category)
    header = f"{category}: {description}" if description else f"{category}:"
    rows = [[cmd.name, cmd.description] for cmd in commands_in_category]
    return header + "\n" + format_table(rows, border=False, indent=2)


def format_command_help(registry: CommandRegistry, name: str) -> str:
    """Render help for a command, or for a category when `name` is one."""
    command_obj = registry.get(name)
    if command_obj is None:
        if name in registry.categories():
            return format_category_help(registry, name)
        return f"No such command or category: {name}"
    return "\n".join(
        [
            f"Name:        {command_obj.name}",
            f"Category:    {command_obj.category}",
            f"Description: {command_obj.description or '-'}",
        ]
    )


def help_topics(registry: CommandRegistry) -> list[str]:
    """Every name `help <topic>` accepts: command names and categories."""
    return sorted(set(registry.names()) | set(registry.categories()))


def execute_line(line: str, registry: CommandRegistry, context: CommandContext) -> bool:
    """
    Parse and execute one input line.

    Returns:
        True for a blank line or once a handler has been invoked,
        False when the command name is unknown.
    """
    tokens = tokenize(line)
    if not tokens:
        return True

    command_name, *arguments = tokens
    command_obj = registry.get(command_name)
    if command_obj is None:
        log.debug("Unknown command %r", command_name)
        console = context.console
        console.println_color(f"Unknown command: {command_name}", "bright_red")
        matches = suggest_commands(registry, command_name)
        if matches:
            console.println(f"Possible matches: {', '.join(matches)}")
        console.println_color(HELP_TEXT, "bright_black")
        return False

    log.debug("Dispatching %r with %d argument(s)", command_name, len(arguments))
    command_obj.invoke(arguments, context)
    return True
