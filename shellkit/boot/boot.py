#!/usr/bin/env python3
# shellkit/boot/boot.py
from __future__ import annotations
"""
Boot sequence for a shell application.

Steps run in order and report Linux-style [  OK  ] / [FAILED] lines when
SHOW_BOOT is enabled. Only plugin discovery is allowed to fail without
aborting the boot.
"""

from dataclasses import dataclass
import logging
import platform
from typing import TYPE_CHECKING, Any, Callable

from shellkit.commands import Command, CommandRegistry
from shellkit.config import AppConfig
from shellkit.interface.loader import load_commands
from shellkit.ui import Console, enable_windows_vt, init_logger

if TYPE_CHECKING:
    from shellkit.app import ShellApplication


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    registry: CommandRegistry
    loaded_count: int


class _Steps:
    """Runs boot steps and prints their status on the application console."""

    def __init__(self, console: Console, *, verbose: bool) -> None:
        self.console = console
        self.verbose = verbose

    def __call__(self, label: str, fn: Callable[[], Any], *, required: bool = True) -> Any:
        try:
            out = fn()
        except Exception as exc:
            self.console.println_color(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
            if required:
                raise
            logging.getLogger(__name__).warning("Boot step failed: %s (%s)", label, exc)
            return None
        if self.verbose:
            self.console.println_color(f"[  OK  ] {label}", "green")
        return out


def boot_sequence(app: ShellApplication) -> BootState:
    config = app.config
    console = app.console
    registry = app.registry
    step = _Steps(console, verbose=config.show_boot)

    def _report_rejected(command_obj: Command) -> None:
        console.println_color(f"Failed to register command: {command_obj.name}", "bright_red")
        logger.warning("Failed to register command: %s", command_obj.name)

    # ---------- console + env ----------
    step("Enable ANSI sequences", enable_windows_vt)
    step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
    )

    # ---------- logging ----------
    logger = step(
        "Initialize logger",
        lambda: init_logger("shellkit", config.log_level, config.log_file_path),
    )

    # ---------- commands ----------
    step("Register builtin commands", lambda: app.register_builtin_commands(_report_rejected))
    step("Register application commands", lambda: app.register_commands(registry))

    if config.plugin_package:
        step(
            f"Load commands package '{config.plugin_package}'",
            lambda: load_commands(registry, config.plugin_package, on_rejected=_report_rejected),
            required=False,
        )
    else:
        step("Skip plugin discovery (config)", lambda: None)

    loaded_count = step("Count command definitions", lambda: len(registry))
    logger.info("Boot complete: %d command(s)", loaded_count)
    step("Boot complete", lambda: None)

    return BootState(
        config=config,
        logger=logger,
        registry=registry,
        loaded_count=loaded_count,
    )
