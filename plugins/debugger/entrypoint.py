# plugins/debugger/entrypoint.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from shellkit.commands import Command, CommandContext, command
from shellkit.config import DEFAULTS
from shellkit.net import UdpClient, UdpError
from shellkit.ui import Spinner

TRACE_MODES = ("on", "off")


@dataclass(slots=True)
class DebuggerState:
    program_counter: int = 0
    tracing: bool = False


def _parse_port(text: str) -> Optional[int]:
    try:
        port = int(text)
    except ValueError:
        return None
    return port if 1 <= port <= 65535 else None


def _complete_trace(partial: str, stable_args: list[str]) -> list[str]:
    if stable_args:
        return []
    return [mode for mode in TRACE_MODES if mode.startswith(partial)]


def make_commands(
    state: Optional[DebuggerState] = None,
    *,
    udp_client: Optional[UdpClient] = None,
    timeout_ms: Optional[int] = None,
) -> list[Command]:
    """Build the debugger commands bound to ``state``."""
    state = state if state is not None else DebuggerState()
    udp = udp_client if udp_client is not None else UdpClient()

    def _default_wait_ms(context: CommandContext) -> int:
        if timeout_ms is not None:
            return timeout_ms
        if context.config is not None:
            return context.config.udp_timeout_ms
        return int(DEFAULTS["UDP_TIMEOUT_MS"])

    # ---------- status ----------
    @command(name="status", description="Show debugger state.", category="debugger")
    def status(args: list[str], context: CommandContext) -> None:
        trace = "on" if state.tracing else "off"
        context.console.println_color(f"program_counter={state.program_counter}", "bright_green")
        context.console.println_color(f"trace={trace}", "bright_green")

    # ---------- step ----------
    @command(name="step", description="Advance program counter.", category="debugger")
    def step(args: list[str], context: CommandContext) -> None:
        amount = 1
        if args:
            try:
                amount = int(args[0])
            except ValueError:
                amount = 0
        if len(args) > 1 or amount <= 0:
            context.console.println_color("Usage: step [positive_integer]", "bright_red")
            return
        state.program_counter += amount
        context.console.println_color(f"Stepped to {state.program_counter}", "bright_cyan")

    # ---------- trace ----------
    @command(
        name="trace",
        description="Enable or disable tracing.",
        completer=_complete_trace,
        category="debugger",
    )
    def trace(args: list[str], context: CommandContext) -> None:
        if len(args) != 1 or args[0] not in TRACE_MODES:
            context.console.println_color("Usage: trace <on|off>", "bright_red")
            return
        state.tracing = args[0] == "on"
        message = "Trace enabled." if state.tracing else "Trace disabled."
        context.console.println_color(message, "bright_yellow")

    # ---------- udp_send ----------
    @command(name="udp_send", description="Send a UDP datagram.", category="debugger")
    def udp_send(args: list[str], context: CommandContext) -> None:
        if len(args) < 3:
            context.console.println_color("Usage: udp_send <host> <port> <message>", "bright_red")
            return
        port = _parse_port(args[1])
        if port is None:
            context.console.println_color("Invalid UDP port.", "bright_red")
            return
        try:
            udp.send_to(args[0], port, " ".join(args[2:]))
        except UdpError as exc:
            context.console.println_color(f"UDP send failed: {exc}", "bright_red")
            return
        context.console.println_color("UDP payload sent.", "bright_green")

    # ---------- udp_wait ----------
    @command(name="udp_wait", description="Wait for one UDP datagram.", category="debugger")
    def udp_wait(args: list[str], context: CommandContext) -> None:
        if not 1 <= len(args) <= 2:
            context.console.println_color("Usage: udp_wait <port> [timeout_ms]", "bright_red")
            return
        port = _parse_port(args[0])
        if port is None:
            context.console.println_color("Invalid UDP port.", "bright_red")
            return
        wait_ms = _default_wait_ms(context)
        if len(args) == 2:
            try:
                wait_ms = int(args[1])
            except ValueError:
                wait_ms = -1
            if wait_ms < 0:
                context.console.println_color("Invalid timeout value.", "bright_red")
                return
        try:
            with Spinner(f"Waiting for UDP on port {port}...", enabled=sys.stdout.isatty()):
                message = udp.receive_once(port, wait_ms)
        except UdpError as exc:
            context.console.println_color(f"UDP wait failed: {exc}", "bright_red")
            return
        context.console.println_color(f"Received: {message}", "bright_green")

    return [status, step, trace, udp_send, udp_wait]


STATE = DebuggerState()
COMMANDS = make_commands(STATE)
