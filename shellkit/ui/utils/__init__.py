#!/usr/bin/env python3
# shellkit/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    CLEAR_TO_EOL,
    strip_ansi,
    enable_windows_vt,
    colorize,
    sgr,
)
from .console import PRINT_MUTEX, Console

__all__ = [
    "ANSI",
    "CLEAR_TO_EOL",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "sgr",
    "PRINT_MUTEX",
    "Console",
]
