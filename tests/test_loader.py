import textwrap

import pytest

from shellkit.commands import Command, CommandRegistry
from shellkit.interface import load_commands, register_all


@pytest.fixture
def plugin_package(tmp_path, monkeypatch):
    def build(name, files):
        root = tmp_path / name
        for relative, source in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))
        return name

    return build


def test_register_all_counts_and_reports_rejections(noop):
    registry = CommandRegistry()
    rejected = []
    commands = [
        Command(name="a", description="", handler=noop),
        Command(name="a", description="again", handler=noop),
        Command(name="", description="", handler=noop),
    ]
    assert register_all(registry, commands, on_rejected=rejected.append) == 1
    assert [cmd.description for cmd in rejected] == ["again", ""]


def test_load_commands_from_modules_and_entrypoints(plugin_package):
    name = plugin_package(
        "loadertest_plugins",
        {
            "__init__.py": "",
            "solo.py": """
                from shellkit.commands import command

                @command(description="Single command.")
                def solo(args, context):
                    pass

                COMMAND = solo
            """,
            "tools/__init__.py": 'CATEGORY_DESCRIPTION = " Network tools. "\n',
            "tools/entrypoint.py": """
                from shellkit.commands import command

                @command()
                def ping(args, context):
                    '''Ping.'''

                @command(category="net")
                def pong(args, context):
                    '''Pong.'''

                COMMANDS = [ping, pong, "not a command"]
            """,
            "docs/__init__.py": '"""Documented group.\n\nMore text."""\n',
            "docs/entrypoint.py": "COMMANDS = []\n",
            "noentry/__init__.py": "",
            "noentry/helpers.py": "COMMAND = None\n",
            "_private.py": "raise RuntimeError('must not be imported')\n",
        },
    )
    registry = CommandRegistry()
    assert load_commands(registry, name) == 3
    assert registry.names() == ["ping", "pong", "solo"]
    assert registry.get("ping").category == "tools"
    assert registry.get("pong").category == "net"
    assert registry.get("solo").category == "general"
    assert registry.category_description("tools") == "Network tools."
    assert registry.category_description("docs") == "Documented group."


def test_load_commands_reports_duplicates(plugin_package, noop):
    name = plugin_package(
        "loadertest_dupes",
        {
            "__init__.py": "",
            "dup.py": """
                from shellkit.commands import Command
                COMMAND = Command(name="help", description="dup", handler=lambda a, c: None)
            """,
        },
    )
    registry = CommandRegistry()
    registry.register("help", "builtin", noop)
    rejected = []
    assert load_commands(registry, name, on_rejected=rejected.append) == 0
    assert [cmd.name for cmd in rejected] == ["help"]
    assert registry.get("help").description == "builtin"


def test_load_commands_requires_a_package(tmp_path, monkeypatch):
    (tmp_path / "loadertest_module.py").write_text("COMMANDS = []\n", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    with pytest.raises(RuntimeError):
        load_commands(CommandRegistry(), "loadertest_module")


def test_load_commands_missing_package():
    with pytest.raises(ModuleNotFoundError):
        load_commands(CommandRegistry(), "no_such_plugins_package")
