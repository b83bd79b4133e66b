#!/usr/bin/env python3
# shellkit/__init__.py
from __future__ import annotations
"""
Interactive command shell toolkit.

Subpackages expose their own APIs (shellkit.commands, shellkit.interface,
shellkit.ui, ...). Only the most common entry points are re-exported here.
"""


from shellkit.commands import Command, CommandContext, CommandRegistry, command
from shellkit.config import AppConfig, load_config
from shellkit.app import ShellApplication

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandContext",
    "CommandRegistry",
    "command",
    "AppConfig",
    "load_config",
    "ShellApplication",
]
