#!/usr/bin/env python3
# shellkit/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import os
import re
from functools import lru_cache

# ---- SGR table --------------------------------------------------------------

_COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def _sgr_code(code: int) -> str:
    return f"\x1b[{code}m"


def _build_table() -> dict[str, str]:
    table = {
        "reset": _sgr_code(0),
        "bold": _sgr_code(1),
        "dim": _sgr_code(2),
        "underline": _sgr_code(4),
        "reverse": _sgr_code(7),
    }
    # fg 30-37 / 90-97, bg 40-47 / 100-107
    for offset, name in enumerate(_COLOR_NAMES):
        table[name] = _sgr_code(30 + offset)
        table[f"bright_{name}"] = _sgr_code(90 + offset)
        table[f"bg_{name}"] = _sgr_code(40 + offset)
        table[f"bg_bright_{name}"] = _sgr_code(100 + offset)
    return table


# Style and color keys ("bold", "bright_red", "bg_blue", ...) -> escape sequence
ANSI: dict[str, str] = _build_table()

# Erase from cursor to end of line
CLEAR_TO_EOL = "\x1b[K"

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences (colors, line erase) from text."""
    return ANSI_REGEX.sub("", text)


# ---- Windows console --------------------------------------------------------

_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_STD_HANDLES = (-11, -12)  # stdout, stderr


def _terminal_speaks_ansi() -> bool:
    env = os.environ
    return bool(
        env.get("WT_SESSION")
        or env.get("ANSICON")
        or env.get("ConEmuANSI") == "ON"
        or env.get("TERM", "").startswith(("xterm", "vt100"))
    )


def _set_vt_mode(kernel32, handle_id: int) -> bool:
    handle = kernel32.GetStdHandle(handle_id)
    if handle in (0, -1):
        return False
    mode = ctypes.c_uint()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False
    return bool(kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING))


@lru_cache(maxsize=None)
def enable_windows_vt() -> bool:
    """
    Make sure escape sequences are interpreted by the console.

    Always True off Windows. On Windows, True when the terminal already
    handles ANSI or VT processing could be switched on for stdout or stderr.
    """
    if os.name != "nt" or _terminal_speaks_ansi():
        return True
    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        results = [_set_vt_mode(kernel32, handle_id) for handle_id in _STD_HANDLES]
    except (AttributeError, OSError):
        return False
    return any(results)


# ---- Helpers ----------------------------------------------------------------

def sgr(*styles: str) -> str:
    """Concatenate the sequences of known style keys; unknown keys are ignored."""
    return "".join(ANSI[s] for s in styles if s in ANSI)


def colorize(text: str, *styles: str) -> str:
    seq = sgr(*styles)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
