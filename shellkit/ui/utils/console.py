#!/usr/bin/env python3
# shellkit/ui/utils/console.py
from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from .ansi import ANSI, CLEAR_TO_EOL, enable_windows_vt, sgr

# Single shared print mutex for all UI output (console/spinner/logging).
PRINT_MUTEX = threading.Lock()


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


class Console:
    """
    Output sink shared by the line editor, the dispatcher and command handlers.

    Colors are keys of ``ANSI`` without the ``bg_`` prefix ("bright_red", "cyan", ...).
    Painting is a no-op when the stream is not a terminal, so captured output
    (tests, pipes) stays plain text.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, color: Optional[bool] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            color = _is_tty(self.stream) and enable_windows_vt()
        self.ansi_enabled = color

    # ---- plain text ---------------------------------------------------------

    def print(self, text: str = "") -> None:
        with PRINT_MUTEX:
            self.stream.write(text)

    def println(self, text: str = "") -> None:
        with PRINT_MUTEX:
            self.stream.write(f"{text}\n")

    def flush(self) -> None:
        self.stream.flush()

    # ---- colored text -------------------------------------------------------

    def paint(
        self,
        text: str,
        foreground: Optional[str] = None,
        background: Optional[str] = None,
        *,
        bold: bool = False,
    ) -> str:
        """Return `text` wrapped in SGR codes, or unchanged when ANSI is off."""
        if not self.ansi_enabled:
            return text
        styles = []
        if bold:
            styles.append("bold")
        if foreground:
            styles.append(foreground)
        if background:
            styles.append(f"bg_{background}")
        seq = sgr(*styles)
        return f"{seq}{text}{ANSI['reset']}" if seq else text

    def print_color(
        self,
        text: str,
        foreground: Optional[str] = None,
        background: Optional[str] = None,
        *,
        bold: bool = False,
    ) -> None:
        self.print(self.paint(text, foreground, background, bold=bold))

    def println_color(
        self,
        text: str,
        foreground: Optional[str] = None,
        background: Optional[str] = None,
        *,
        bold: bool = False,
    ) -> None:
        self.println(self.paint(text, foreground, background, bold=bold))

    # ---- line editing primitives -------------------------------------------

    def redraw(self, prompt: str, buffer: str) -> None:
        """Overwrite the current terminal line with prompt + buffer."""
        with PRINT_MUTEX:
            self.stream.write(f"\r{prompt}{buffer}{CLEAR_TO_EOL}")
            self.stream.flush()

    def bell(self) -> None:
        with PRINT_MUTEX:
            self.stream.write("\a")
            self.stream.flush()
