from io import StringIO

import pytest

from shellkit.commands import CommandContext, CommandRegistry
from shellkit.interface import BaseCLI, KeySource
from shellkit.ui import Console


class RecordingGuard:
    """Raw-mode stand-in that records whether it was entered and left."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True


class ScriptedKeySource(KeySource):
    """Key source replaying a fixed list of keys; None marks end of input."""

    def __init__(self, keys=(), *, interactive=True, raw_enabled=True, lines=""):
        super().__init__(stdin=StringIO(lines), stdout=StringIO())
        self.keys = list(keys)
        self.interactive = interactive
        self.guards: list[RecordingGuard] = []
        self.raw_enabled = raw_enabled

    def is_interactive(self) -> bool:
        return self.interactive

    def raw_mode(self):
        guard = RecordingGuard(self.raw_enabled)
        self.guards.append(guard)
        return guard

    def read_key(self):
        if not self.keys:
            return None
        return self.keys.pop(0)


class ScriptedCLI(BaseCLI):
    """Frontend returning queued lines; None once the queue is empty."""

    def __init__(self, lines, on_read=None):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.on_read = on_read
        self.setup_called = False
        self.teardown_called = False

    def setup(self):
        self.setup_called = True

    def teardown(self):
        self.teardown_called = True

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if self.on_read is not None:
            self.on_read(len(self.prompts))
        if not self.lines:
            return None
        return self.lines.pop(0)



@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def console(output) -> Console:
    return Console(output, color=False)


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def context(console) -> CommandContext:
    return CommandContext(console=console)


@pytest.fixture
def noop():
    def _handler(args, context):
        return None

    return _handler
