#!/usr/bin/env python3
# shellkit/interface/editor.py
from __future__ import annotations

"""
Interactive line editor.

Reads one line key by key with trailing-edit only (the cursor always sits at
the end of the buffer). Tab asks a completion provider for whole-line
candidates:
    - none: ring the bell
    - one: replace the buffer with it
    - several: list them and keep typing
Without a live terminal the editor reads a plain line instead.
"""

import logging
from typing import Callable, Optional, Sequence

from shellkit.interface.keys import KEY_ENTER, KEY_ERASE, KEY_TAB, KeySource, default_key_source
from shellkit.ui import Console

log = logging.getLogger(__name__)

CompletionProvider = Callable[[str], Sequence[str]]


class LineEditor:
    """Character-at-a-time line reader bound to a console and a key source."""

    def __init__(self, console: Optional[Console] = None, key_source: Optional[KeySource] = None) -> None:
        self.console = console if console is not None else Console()
        self.key_source = key_source if key_source is not None else default_key_source()

    def read_line(self, prompt: str, completion_provider: CompletionProvider) -> Optional[str]:
        """
        Return the submitted line (possibly empty), or None when input ended
        or was cancelled on an empty line.
        """
        keys = self.key_source
        if not keys.is_interactive():
            return keys.read_line()

        self.console.print(prompt)
        self.console.flush()

        with keys.raw_mode() as guard:
            if not guard.enabled:
                return keys.read_line()
            return self._read_keys(prompt, completion_provider)

    def _read_keys(self, prompt: str, completion_provider: CompletionProvider) -> Optional[str]:
        keys = self.key_source
        console = self.console
        buffer = ""

        while True:
            key = keys.read_key()
            if key is None:
                return None

            if key == keys.cancel_key and not buffer:
                console.println()
                return None

            if key in KEY_ENTER:
                console.println()
                return buffer

            if key in KEY_ERASE:
                if buffer:
                    buffer = buffer[:-1]
                    console.redraw(prompt, buffer)
                continue

            if key == KEY_TAB:
                buffer = self._complete(prompt, buffer, completion_provider)
                continue

            if key and key.isprintable():
                buffer += key
                console.redraw(prompt, buffer)

    def _complete(self, prompt: str, buffer: str, completion_provider: CompletionProvider) -> str:
        console = self.console
        candidates = list(completion_provider(buffer))
        log.debug("%d completion(s) for %r", len(candidates), buffer)

        if not candidates:
            console.bell()
            return buffer

        if len(candidates) == 1:
            buffer = candidates[0]
            console.redraw(prompt, buffer)
            return buffer

        console.println()
        console.println("".join(f"{candidate}  " for candidate in candidates))
        console.redraw(prompt, buffer)
        return buffer
