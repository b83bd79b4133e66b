#!/usr/bin/env python3
# shellkit/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from shellkit.ui.utils import ANSI, PRINT_MUTEX, enable_windows_vt, strip_ansi

_LOG_FORMAT = "[%(levelname)s] %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_FILE_MAX_BYTES = 2_000_000
_FILE_BACKUPS = 3


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler that colors records by level on terminals and writes plain
    text everywhere else.

    Records are written under PRINT_MUTEX so they never interleave with a
    half-drawn prompt line or a spinner frame.
    """

    LEVEL_STYLES = {
        logging.DEBUG: "bright_black",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "magenta",
    }

    def __init__(self, stream=None) -> None:
        super().__init__(stream)
        isatty = getattr(self.stream, "isatty", None)
        self.use_ansi = bool(isatty and isatty()) and enable_windows_vt()

    def _paint(self, levelno: int, message: str) -> str:
        if not self.use_ansi:
            return strip_ansi(message)
        style = self.LEVEL_STYLES.get(levelno)
        return f"{ANSI[style]}{message}{ANSI['reset']}" if style else message

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self._paint(record.levelno, self.format(record))
            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter for log files: escape sequences removed."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        return logging.WARNING
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.WARNING
    return level


def init_logger(
    name: str = "shellkit",
    level: Union[int, str, None] = logging.WARNING,
    logfile: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Initialize the package logger.

    - stderr: colored by level on a terminal, plain otherwise, at `level`.
    - logfile (optional): rotating, UTF-8, ANSI-free, always at DEBUG.

    Modules log through ``logging.getLogger(__name__)`` and reach these
    handlers as children of ``shellkit``. Calling it again adjusts levels but
    never stacks handlers.
    """
    console_level = _resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if logfile else console_level)
    logger.propagate = False

    stream_handlers = [h for h in logger.handlers if isinstance(h, ColorizingStreamHandler)]
    if not stream_handlers:
        stream_handler = ColorizingStreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(stream_handler)
        stream_handlers = [stream_handler]
    for handler in stream_handlers:
        handler.setLevel(console_level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        Path(logfile).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            logfile, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(PlainFormatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
