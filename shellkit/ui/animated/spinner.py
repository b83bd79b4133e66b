#!/usr/bin/env python3
# shellkit/ui/animated/spinner.py
from __future__ import annotations

import itertools
import sys
import threading
from typing import Optional, TextIO

from shellkit.ui.utils import PRINT_MUTEX


class Spinner:
    """
    Animated "busy" line for blocking waits inside a command handler.

        with Spinner("Waiting for UDP on port 9000...", enabled=sys.stdout.isatty()):
            client.receive_once(9000, 3000)

    The frame line is erased when the block exits, so the handler's own
    output starts on a clean line. A disabled spinner writes nothing.
    """

    FRAMES = ("|", "/", "-", "\\")

    def __init__(
        self,
        text: str = "Working...",
        *,
        file: Optional[TextIO] = None,
        interval: float = 0.1,
        enabled: bool = True,
    ) -> None:
        self.text = text
        self.stream = file if file is not None else sys.stderr
        self.interval = interval
        self.enabled = enabled
        self._done = threading.Event()
        self._worker: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._worker is not None

    def start(self) -> None:
        if not self.enabled or self._worker is not None:
            return
        self._done.clear()
        self._worker = threading.Thread(target=self._animate, name="shellkit-spinner", daemon=True)
        self._worker.start()

    def stop(self) -> None:
        if self._worker is None:
            return
        self._done.set()
        self._worker.join()
        self._worker = None
        width = len(self.text) + 2
        with PRINT_MUTEX:
            self.stream.write("\r" + " " * width + "\r")
            self.stream.flush()

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _animate(self) -> None:
        for frame in itertools.cycle(self.FRAMES):
            with PRINT_MUTEX:
                self.stream.write(f"\r{frame} {self.text}")
                self.stream.flush()
            if self._done.wait(self.interval):
                return
