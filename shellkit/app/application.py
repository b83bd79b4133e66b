#!/usr/bin/env python3
# shellkit/app/application.py
from __future__ import annotations

"""
Outer shell loop.

ShellApplication wires configuration, the command registry, a CLI frontend
and the dispatcher together. Subclasses customize it through:
    - banner() / prompt()
    - on_start(console) / on_shutdown(console)
    - register_commands(registry)
"""

import logging
from typing import Callable, Optional

from shellkit.app.signals import CancellationToken, SignalManager
from shellkit.boot import BootState, boot_sequence
from shellkit.commands import Command, CommandContext, CommandRegistry
from shellkit.config import AppConfig
from shellkit.interface import (
    BaseCLI,
    execute_line,
    format_command_help,
    format_help,
    help_topics,
    make_cli,
    register_all,
)
from shellkit.ui import Console

log = logging.getLogger(__name__)


class ShellApplication:
    """Read-dispatch loop with builtin help/exit/quit commands."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        console: Optional[Console] = None,
        cli: Optional[BaseCLI] = None,
        token: Optional[CancellationToken] = None,
    ) -> None:
        self.config = config if config is not None else AppConfig()
        self.console = console if console is not None else Console()
        self.registry = CommandRegistry()
        self.token = token if token is not None else CancellationToken()
        self._cli = cli
        self.state: Optional[BootState] = None

    # ---------------- Hooks ----------------

    def banner(self) -> str:
        return self.config.banner

    def prompt(self) -> str:
        return self.config.prompt

    def on_start(self, console: Console) -> None:
        pass

    def on_shutdown(self, console: Console) -> None:
        pass

    def register_commands(self, registry: CommandRegistry) -> None:
        """Override to add application commands before plugins are loaded."""

    # ---------------- Builtins ----------------

    def register_builtin_commands(self, on_rejected: Callable[[Command], None]) -> None:
        def _help(args: list[str], context: CommandContext) -> None:
            if len(args) > 1:
                context.console.println_color("Usage: help [command|category]", "bright_red")
            elif args:
                context.console.println(format_command_help(self.registry, args[0]))
            else:
                context.console.println(format_help(self.registry))

        def _complete_help(partial: str, stable_args: list[str]) -> list[str]:
            if stable_args:
                return []
            return [topic for topic in help_topics(self.registry) if topic.startswith(partial)]

        def _exit(args: list[str], context: CommandContext) -> None:
            context.running = False

        builtins = [
            Command(
                name="help",
                description="Show all available commands.",
                handler=_help,
                completer=_complete_help,
                module=__name__,
            ),
            Command(name="exit", description="Exit the shell.", handler=_exit, module=__name__),
            Command(name="quit", description="Alias for exit.", handler=_exit, module=__name__),
        ]
        register_all(self.registry, builtins, on_rejected=on_rejected)

    # ---------------- Loop ----------------

    def _dispatch(self, line: str, context: CommandContext) -> None:
        try:
            execute_line(line, self.registry, context)
        except Exception as exc:
            log.exception("Command failed: %s", line)
            context.console.println_color(f"[error] {type(exc).__name__}: {exc}", "bright_red")

    def run(self) -> int:
        console = self.console

        with SignalManager(self.token) as signals:
            self.state = boot_sequence(self)

            if self.config.show_banner and self.banner():
                console.println_color(self.banner(), "bright_cyan", bold=True)
            self.on_start(console)

            context = CommandContext(console=console, running=True, config=self.config)
            cli = self._cli or make_cli(self.config, self.registry, console=console)

            with cli:
                while context.running and not signals.stop_requested:
                    line = cli.read_line(self.prompt())
                    if line is None:
                        break
                    self._dispatch(line, context)

            if signals.stop_requested:
                console.println_color("Termination signal received. Exiting...", "bright_yellow")

            self.on_shutdown(console)
            console.flush()
        return 0
