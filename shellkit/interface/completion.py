#!/usr/bin/env python3
# shellkit/interface/completion.py
from __future__ import annotations

"""
Command line completion.

Completions are whole replacement lines, so a frontend only ever swaps its
buffer; it never needs to know how the line is tokenized.

Strategy:
  1) Nothing typed yet: every command name.
  2) Typing the first token: command names starting with it.
  3) Past the command name: ask the command's completer for the token being
     typed, given the arguments already finished before it.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shellkit.commands import CommandRegistry


def split_for_completion(buffer: str) -> tuple[list[str], bool]:
    """
    Return (tokens, trailing_space).

    Tokens are plain whitespace-separated words; quotes are not interpreted
    while a line is still being typed.
    """
    trailing_space = bool(buffer) and buffer[-1].isspace()
    return buffer.split(), trailing_space


def complete(registry: CommandRegistry, buffer: str) -> list[str]:
    """Return the full-line completions for `buffer`."""
    tokens, trailing_space = split_for_completion(buffer)

    if not tokens:
        return [f"{name} " for name in registry.names()]

    if len(tokens) == 1 and not trailing_space:
        typed = tokens[0]
        return [f"{name} " for name in registry.names() if name.startswith(typed)]

    command_name = tokens[0]
    command_obj = registry.get(command_name)
    if command_obj is None or command_obj.completer is None:
        return []

    if trailing_space:
        stable_args = tokens[1:]
        partial = ""
    else:
        stable_args = tokens[1:-1]
        partial = tokens[-1]

    suggestions = command_obj.completer(partial, list(stable_args))
    if not suggestions:
        return []

    prefix = f"{command_name} "
    if stable_args:
        prefix += " ".join(stable_args) + " "
    return sorted({prefix + suggestion for suggestion in suggestions})
