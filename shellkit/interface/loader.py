#!/usr/bin/env python3
# shellkit/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all modules under a given package (default: 'plugins').
- Supports 'entrypoint.py' inside a subpackage exporting COMMAND/COMMANDS.
- Derives categories from the subpackage name when a command keeps 'general'.
- Collects category descriptions from CATEGORY_DESCRIPTION or the subpackage docstring.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterable, Optional

from shellkit.commands import Command, CommandRegistry

log = logging.getLogger(__name__)

RejectedCallback = Callable[[Command], None]


def _exported_commands(module: ModuleType) -> list[Command]:
    """Collect COMMAND/COMMANDS exported by a module, if present."""
    found: list[Command] = []
    single = getattr(module, "COMMAND", None)
    if isinstance(single, Command):
        found.append(single)
    many = getattr(module, "COMMANDS", None)
    if isinstance(many, Iterable):
        found.extend(item for item in many if isinstance(item, Command))
    return found


def _category_description(package: ModuleType) -> str:
    """CATEGORY_DESCRIPTION if set, else the first docstring line."""
    value = getattr(package, "CATEGORY_DESCRIPTION", None)
    if isinstance(value, str):
        return value.strip()
    doc = (package.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


def register_all(
    registry: CommandRegistry,
    commands: Iterable[Command],
    *,
    on_rejected: Optional[RejectedCallback] = None,
) -> int:
    """Add commands to the registry; returns how many were accepted."""
    accepted = 0
    for command_obj in commands:
        if registry.add(command_obj):
            accepted += 1
        elif on_rejected is not None:
            on_rejected(command_obj)
    return accepted


def load_commands(
    registry: CommandRegistry,
    commands_package: str = "plugins",
    *,
    on_rejected: Optional[RejectedCallback] = None,
) -> int:
    """
    Import all modules under the given package and register their commands.

    Supported layouts:
      1) Plain modules: plugins/foo.py exporting COMMAND/COMMANDS
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         exporting COMMAND/COMMANDS (category defaults to 'bar')

    Returns the number of commands registered.
    """
    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(f"'{commands_package}' must be a package (folder) with modules.")

    registered_count = 0
    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            category = None
            if modinfo.ispkg:
                if not (Path(base_path) / module_name / "entrypoint.py").exists():
                    log.debug("Skipping %s.%s: no entrypoint", commands_package, module_name)
                    continue
                module = importlib.import_module(f"{commands_package}.{module_name}.entrypoint")
                category = module_name
                subpackage = importlib.import_module(f"{commands_package}.{module_name}")
                registry.set_category_description(category, _category_description(subpackage))
            else:
                module = importlib.import_module(f"{commands_package}.{module_name}")

            commands = _exported_commands(module)
            for command_obj in commands:
                if category and command_obj.category == "general":
                    command_obj.category = category
            registered_count += register_all(registry, commands, on_rejected=on_rejected)
            log.debug("Loaded %d command(s) from %s", len(commands), module.__name__)

    return registered_count
