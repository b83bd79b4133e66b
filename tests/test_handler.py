from shellkit.commands import CommandContext
from shellkit.commands import Command
from shellkit.interface import (
    HELP_TEXT,
    execute_line,
    format_category_help,
    format_command_help,
    format_help,
    help_topics,
    suggest_commands,
)


def test_execute_line_dispatches_arguments(registry, context):
    calls = []

    def step(args, ctx):
        calls.append(args)

    registry.register("step", "Advance.", step)
    assert execute_line("step 5", registry, context) is True
    assert execute_line('step "a b" c', registry, context) is True
    assert calls == [["5"], ["a b", "c"]]


def test_execute_line_without_arguments_passes_empty_list(registry, context):
    calls = []
    registry.register("status", "", lambda args, ctx: calls.append(args))
    execute_line("status", registry, context)
    assert calls == [[]]


def test_blank_line_is_a_no_op(registry, context, output):
    assert execute_line("   ", registry, context) is True
    assert output.getvalue() == ""


def test_unknown_command_lists_prefix_matches(registry, context, output, noop):
    registry.register("help", "", noop)
    registry.register("hello", "", noop)
    registry.register("status", "", noop)

    assert execute_line("he", registry, context) is False
    lines = output.getvalue().splitlines()
    assert lines == [
        "Unknown command: he",
        "Possible matches: hello, help",
        HELP_TEXT,
    ]


def test_unknown_command_without_matches(registry, context, output, noop):
    registry.register("status", "", noop)
    assert execute_line("frobnicate now", registry, context) is False
    assert output.getvalue().splitlines() == ["Unknown command: frobnicate", HELP_TEXT]


def test_handler_can_stop_the_loop(registry, console):
    def stop(args, ctx):
        ctx.running = False

    registry.register("exit", "", stop)
    context = CommandContext(console=console)
    execute_line("exit", registry, context)
    assert context.running is False


def test_suggest_commands_is_sorted(registry, noop):
    for name in ("hello", "help", "history"):
        registry.register(name, "", noop)
    assert suggest_commands(registry, "hel") == ["hello", "help"]
    assert suggest_commands(registry, "x") == []


def test_format_help(registry, noop):
    assert format_help(registry) == "No commands registered."

    registry.register("status", "Show state.", noop)
    registry.register("exit", "Exit the shell.", noop)
    assert format_help(registry).splitlines() == [
        "Available commands:",
        "  exit    Exit the shell.",
        "  status  Show state.",
    ]


def test_format_category_help(registry, noop):
    registry.add(Command(name="step", description="Advance.", handler=noop, category="debugger"))
    registry.add(Command(name="status", description="Show state.", handler=noop, category="debugger"))
    registry.register("exit", "Exit the shell.", noop)

    assert format_category_help(registry, "debugger").splitlines() == [
        "debugger:",
        "  status  Show state.",
        "  step    Advance.",
    ]
    registry.set_category_description("debugger", "Toy debugger.")
    assert format_category_help(registry, "debugger").splitlines()[0] == "debugger: Toy debugger."
    assert format_category_help(registry, "net") == "No such category: net"


def test_format_command_help(registry, noop):
    registry.add(Command(name="step", description="Advance.", handler=noop, category="debugger"))
    registry.register("nodesc", "", noop)

    assert format_command_help(registry, "step").splitlines() == [
        "Name:        step",
        "Category:    debugger",
        "Description: Advance.",
    ]
    assert format_command_help(registry, "nodesc").splitlines()[-1] == "Description: -"
    assert format_command_help(registry, "debugger").splitlines() == ["debugger:", "  step  Advance."]
    assert format_command_help(registry, "nope") == "No such command or category: nope"


def test_help_topics(registry, noop):
    registry.add(Command(name="step", description="", handler=noop, category="debugger"))
    registry.register("exit", "", noop)
    assert help_topics(registry) == ["debugger", "exit", "general", "step"]
