#!/usr/bin/env python3
# shellkit/interface/keys.py
from __future__ import annotations

"""
Raw keystroke capture.

A key source answers two questions for the line editor: is a live terminal
attached, and what is the next key. Two implementations:
    - PosixKeySource: termios/tty, one UTF-8 character per read.
    - WindowsKeySource: msvcrt console input.
default_key_source() picks one for the running platform.
"""

import logging
import os
import select
import sys
from typing import Optional, TextIO

log = logging.getLogger(__name__)

# Control keys shared by both platforms
KEY_TAB = "\t"
KEY_ENTER = ("\r", "\n")
KEY_ERASE = ("\b", "\x7f")
KEY_CTRL_C = "\x03"
KEY_CTRL_D = "\x04"
KEY_ESCAPE = "\x1b"


def stream_is_tty(stream: TextIO) -> bool:
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, ValueError, OSError):
        # Replaced or closed streams (pytest capture, StringIO)
        return False


class RawModeGuard:
    """
    Context manager that switches a POSIX terminal to character-at-a-time
    input without echo, and restores the saved attributes on exit.

    `enabled` stays False when the terminal cannot be reconfigured; nothing
    is restored in that case.
    """

    def __init__(self, fd: int) -> None:
        import termios

        self._termios = termios
        self.fd = fd
        self.enabled = False
        self._saved: Optional[list] = None

    def __enter__(self) -> "RawModeGuard":
        termios = self._termios
        try:
            self._saved = termios.tcgetattr(self.fd)
            raw = termios.tcgetattr(self.fd)
            raw[3] &= ~(termios.ICANON | termios.ECHO)
            raw[6][termios.VMIN] = 1
            raw[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except (termios.error, OSError) as exc:
            log.debug("Raw mode unavailable on fd %d: %s", self.fd, exc)
            return self
        self.enabled = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if not self.enabled:
            return
        self.enabled = False
        self._termios.tcsetattr(self.fd, self._termios.TCSAFLUSH, self._saved)


class _ConsoleGuard:
    """Windows consoles already deliver keys unechoed through msvcrt."""

    enabled = True

    def __enter__(self) -> "_ConsoleGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


class KeySource:
    """
    Base interface for keystroke sources.

    Subclasses implement raw_mode() and read_key(); the whole-line path used
    when no terminal is attached is shared.
    """

    # Key that ends input when pressed on an empty line
    cancel_key = KEY_CTRL_D

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def is_interactive(self) -> bool:
        return stream_is_tty(self.stdin) and stream_is_tty(self.stdout)

    def raw_mode(self):  # pragma: no cover - interface
        raise NotImplementedError

    def read_key(self) -> Optional[str]:  # pragma: no cover - interface
        """Return the next key, "" for an ignored sequence, None at end of input."""
        raise NotImplementedError

    def read_line(self) -> Optional[str]:
        """Read one whole line without its terminator; None at end of stream."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.removesuffix("\n").removesuffix("\r")


class PosixKeySource(KeySource):
    """termios-backed source reading the terminal byte by byte."""

    cancel_key = KEY_CTRL_D

    # How long to wait for the rest of an escape sequence after ESC
    ESCAPE_TIMEOUT = 0.05

    def _fd(self) -> int:
        return self.stdin.fileno()

    def raw_mode(self) -> RawModeGuard:
        return RawModeGuard(self._fd())

    def _read_byte(self) -> bytes:
        return os.read(self._fd(), 1)

    def _pending(self) -> bool:
        ready, _, _ = select.select([self._fd()], [], [], self.ESCAPE_TIMEOUT)
        return bool(ready)

    def read_key(self) -> Optional[str]:
        first = self._read_byte()
        if not first:
            return None

        if first == KEY_ESCAPE.encode():
            return self._skip_escape_sequence()

        lead = first[0]
        if lead >= 0xF0:
            width = 4
        elif lead >= 0xE0:
            width = 3
        elif lead >= 0xC0:
            width = 2
        else:
            width = 1

        data = first
        while len(data) < width:
            more = self._read_byte()
            if not more:
                break
            data += more
        return data.decode("utf-8", errors="replace")

    def _skip_escape_sequence(self) -> str:
        # CSI (ESC [ ... final) and SS3 (ESC O x) sequences from arrow/function keys
        if not self._pending():
            return KEY_ESCAPE
        introducer = self._read_byte()
        if introducer not in (b"[", b"O"):
            return ""
        while True:
            byte = self._read_byte()
            if not byte or 0x40 <= byte[0] <= 0x7E:
                return ""


class WindowsKeySource(KeySource):
    """msvcrt-backed source for the Windows console."""

    cancel_key = KEY_CTRL_C

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        super().__init__(stdin, stdout)
        import msvcrt  # type: ignore[import-not-found]

        self._msvcrt = msvcrt

    def raw_mode(self) -> _ConsoleGuard:
        return _ConsoleGuard()

    def read_key(self) -> Optional[str]:
        key = self._msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            # Extended key (arrows, F-keys): the scan code follows
            self._msvcrt.getwch()
            return ""
        return key


def default_key_source(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> KeySource:
    """Return the key source for the running platform."""
    if os.name == "nt":
        return WindowsKeySource(stdin, stdout)
    return PosixKeySource(stdin, stdout)
