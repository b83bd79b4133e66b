
import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from shellkit.config import AppConfig
from shellkit.interface import LineEditorCLI, PromptToolkitCLI, make_cli

from tests.conftest import ScriptedKeySource


@pytest.fixture
def trace_registry(registry, noop):
    registry.register("help", "", noop)
    registry.register("trace", "", noop, lambda partial, stable: [m for m in ("on", "off") if m.startswith(partial)])
    return registry


def test_prompt_toolkit_completions_replace_the_line(trace_registry):
    cli = PromptToolkitCLI(trace_registry.complete)
    document = Document("trace o", cursor_position=len("trace o"))
    completions = list(cli.completer.get_completions(document, CompleteEvent(completion_requested=True)))

    assert [c.text for c in completions] == ["trace off", "trace on"]
    assert {c.start_position for c in completions} == {-len("trace o")}


def test_prompt_toolkit_completion_uses_text_before_cursor(trace_registry):
    cli = PromptToolkitCLI(trace_registry.complete)
    document = Document("he ignored", cursor_position=2)
    completions = list(cli.completer.get_completions(document, CompleteEvent()))
    assert [c.text for c in completions] == ["help "]


def test_make_cli_defaults_to_builtin_editor(trace_registry, console):
    keys = ScriptedKeySource(list("tr\t\r"))
    cli = make_cli(AppConfig(), trace_registry, console=console, key_source=keys)

    assert isinstance(cli, LineEditorCLI)
    with cli:
        assert cli.read_line("> ") == "trace "


def test_make_cli_without_completion(trace_registry, console, output):
    keys = ScriptedKeySource(list("tr\t\r"))
    cli = make_cli(AppConfig(enable_completion=False), trace_registry, console=console, key_source=keys)

    assert cli.read_line("> ") == "tr"
    assert "\a" in output.getvalue()


def test_make_cli_prompt_toolkit_needs_a_terminal(trace_registry, console):
    keys = ScriptedKeySource(interactive=False, lines="status\n")
    cli = make_cli(AppConfig(line_editor="prompt_toolkit"), trace_registry, console=console, key_source=keys)

    assert isinstance(cli, LineEditorCLI)
    assert cli.read_line("> ") == "status"


def test_line_editor_cli_end_of_input(console):
    keys = ScriptedKeySource(interactive=False, lines="")
    assert LineEditorCLI(lambda buffer: [], console=console, key_source=keys).read_line("> ") is None
