#!/usr/bin/env python3
# shellkit/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    CLEAR_TO_EOL,
    strip_ansi,
    enable_windows_vt,
    colorize,
    sgr,
    PRINT_MUTEX,
    Console,
)
from .static import (
    format_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .animated import Spinner

__all__ = [
    "ANSI",
    "CLEAR_TO_EOL",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "sgr",
    "PRINT_MUTEX",
    "Console",
    "format_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "Spinner",
]
