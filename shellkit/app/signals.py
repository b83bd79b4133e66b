#!/usr/bin/env python3
# shellkit/app/signals.py
from __future__ import annotations

"""
Termination signals as a cooperative cancellation token.

The shell loop polls the token between lines; a signal never interrupts a
read or a running command.
"""

import logging
import signal
import threading
from typing import Any, Optional

log = logging.getLogger(__name__)

# SIGHUP does not exist on Windows
_SIGNAL_NAMES = ("SIGINT", "SIGTERM", "SIGHUP")


class CancellationToken:
    """A one-way stop request shared by a signal handler and the shell loop."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()


class SignalManager:
    """
    Context manager routing termination signals to a CancellationToken.

    Previous handlers are restored on exit. Outside the main thread signal
    handlers cannot be installed; the manager is then inert.
    """

    def __init__(self, token: Optional[CancellationToken] = None) -> None:
        self.token = token if token is not None else CancellationToken()
        self._previous: dict[int, Any] = {}

    def _on_signal(self, signum: int, frame) -> None:
        self.token.cancel()

    def __enter__(self) -> "SignalManager":
        self.token.reset()
        if threading.current_thread() is not threading.main_thread():
            log.debug("Not on the main thread; signal handlers not installed")
            return self
        for name in _SIGNAL_NAMES:
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            self._previous[signum] = signal.signal(signum, self._on_signal)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        while self._previous:
            signum, handler = self._previous.popitem()
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)

    @property
    def stop_requested(self) -> bool:
        return self.token.cancelled
