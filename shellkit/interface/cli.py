#!/usr/bin/env python3
# shellkit/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

    1) builtin: LineEditor (raw keystrokes, tab completion) - default
    2) prompt_toolkit: full-featured line editing over the same completions

Both consume the same whole-line completion provider.
"""

import logging
import sys
from typing import TYPE_CHECKING, Optional, Sequence

from shellkit.interface.editor import CompletionProvider, LineEditor
from shellkit.interface.keys import KeySource, stream_is_tty

if TYPE_CHECKING:
    from shellkit.commands import CommandRegistry
    from shellkit.config import AppConfig
    from shellkit.ui import Console

log = logging.getLogger(__name__)

LINE_EDITORS = ("builtin", "prompt_toolkit")


def _no_completion(buffer: str) -> Sequence[str]:
    return []


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - read_line(prompt)
        - teardown()

    This base also provides context manager support to guarantee teardown.
    """

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def read_line(self, prompt: str) -> Optional[str]:  # pragma: no cover - interface
        ...

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class LineEditorCLI(BaseCLI):
    """Built-in raw-keystroke editor."""

    def __init__(
        self,
        completion_provider: CompletionProvider,
        *,
        console: Optional[Console] = None,
        key_source: Optional[KeySource] = None,
    ) -> None:
        self.editor = LineEditor(console, key_source)
        self.completion_provider = completion_provider

    def read_line(self, prompt: str) -> Optional[str]:
        return self.editor.read_line(prompt, self.completion_provider)


class PromptToolkitCLI(BaseCLI):
    """prompt_toolkit session whose completions replace the whole line."""

    def __init__(self, completion_provider: CompletionProvider) -> None:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                for line in completion_provider(text_before_cursor):
                    # replace everything typed so far with the candidate line
                    yield Completion(line, start_position=-len(text_before_cursor))

        self._session_type = PromptSession
        self._session = None
        self.completer = _Completer()

    def setup(self) -> None:
        if self._session is None:
            self._session = self._session_type(completer=self.completer, complete_while_typing=False)

    def read_line(self, prompt: str) -> Optional[str]:
        self.setup()
        try:
            return self._session.prompt(prompt)  # type: ignore[union-attr]
        except (EOFError, KeyboardInterrupt):
            return None


def make_cli(
    config: AppConfig,
    registry: CommandRegistry,
    *,
    console: Optional[Console] = None,
    key_source: Optional[KeySource] = None,
) -> BaseCLI:
    """
    Build the frontend selected by `config.line_editor`.

    prompt_toolkit needs a terminal; with redirected input the built-in editor
    (which then reads plain lines) is used instead.
    """
    provider: CompletionProvider = registry.complete if config.enable_completion else _no_completion

    if config.line_editor == "prompt_toolkit":
        stdin = key_source.stdin if key_source is not None else sys.stdin
        if stream_is_tty(stdin):
            return PromptToolkitCLI(provider)
        log.info("stdin is not a terminal; using the builtin line editor")

    return LineEditorCLI(provider, console=console, key_source=key_source)
