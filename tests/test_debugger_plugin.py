import pytest

from plugins.debugger import entrypoint
from plugins.debugger.entrypoint import DebuggerState, make_commands
from shellkit.commands import CommandContext, CommandRegistry
from shellkit.config import AppConfig
from shellkit.interface import complete, execute_line, register_all
from shellkit.net import UdpError


class FakeUdp:
    def __init__(self, *, reply="pong", error=None):
        self.reply = reply
        self.error = error
        self.sent = []
        self.waits = []

    def send_to(self, host, port, message):
        if self.error:
            raise self.error
        self.sent.append((host, port, message))

    def receive_once(self, local_port, timeout_ms):
        self.waits.append((local_port, timeout_ms))
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def state():
    return DebuggerState()


@pytest.fixture
def udp():
    return FakeUdp()


@pytest.fixture
def shell(state, udp, context, output):
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=udp, timeout_ms=1500))

    def run(line):
        output.seek(0)
        output.truncate()
        execute_line(line, registry, context)
        return output.getvalue().splitlines()

    run.registry = registry
    return run


def test_commands_are_exported():
    names = sorted(cmd.name for cmd in entrypoint.COMMANDS)
    assert names == ["status", "step", "trace", "udp_send", "udp_wait"]
    assert {cmd.category for cmd in entrypoint.COMMANDS} == {"debugger"}


def test_status_reports_state(shell, state):
    state.program_counter = 7
    state.tracing = True
    assert shell("status") == ["program_counter=7", "trace=on"]


def test_step_scenario(shell, state):
    assert shell("step") == ["Stepped to 1"]
    assert shell("step 5") == ["Stepped to 6"]
    assert shell("step -1") == ["Usage: step [positive_integer]"]
    assert shell("step 0") == ["Usage: step [positive_integer]"]
    assert shell("step abc") == ["Usage: step [positive_integer]"]
    assert shell("step 1 2") == ["Usage: step [positive_integer]"]
    assert state.program_counter == 6
    assert shell("status") == ["program_counter=6", "trace=off"]


def test_trace_toggle(shell, state):
    assert shell("trace on") == ["Trace enabled."]
    assert state.tracing is True
    assert shell("trace off") == ["Trace disabled."]
    assert state.tracing is False
    assert shell("trace") == ["Usage: trace <on|off>"]
    assert shell("trace maybe") == ["Usage: trace <on|off>"]
    assert shell("trace on off") == ["Usage: trace <on|off>"]


def test_trace_completion(shell):
    registry = shell.registry
    assert complete(registry, "trace ") == ["trace off", "trace on"]
    assert complete(registry, "trace of") == ["trace off"]
    assert complete(registry, "trace on ") == []
    assert complete(registry, "tr") == ["trace "]


def test_udp_send(shell, udp):
    assert shell("udp_send 127.0.0.1 9000 hello there") == ["UDP payload sent."]
    assert udp.sent == [("127.0.0.1", 9000, "hello there")]


@pytest.mark.parametrize("line", ["udp_send", "udp_send host", "udp_send host 9000"])
def test_udp_send_usage(shell, line):
    assert shell(line) == ["Usage: udp_send <host> <port> <message>"]


@pytest.mark.parametrize("port", ["0", "65536", "http"])
def test_udp_send_invalid_port(shell, udp, port):
    assert shell(f"udp_send host {port} hi") == ["Invalid UDP port."]
    assert udp.sent == []


def test_udp_send_failure(state, context, output):
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=FakeUdp(error=UdpError("Failed to send UDP payload."))))
    execute_line("udp_send host 9000 hi", registry, context)
    assert output.getvalue().splitlines() == ["UDP send failed: Failed to send UDP payload."]


def test_udp_wait_default_and_explicit_timeout(shell, udp):
    assert shell("udp_wait 9000") == ["Received: pong"]
    assert shell("udp_wait 9001 0") == ["Received: pong"]
    assert udp.waits == [(9000, 1500), (9001, 0)]


@pytest.mark.parametrize("timeout", ["-1", "soon"])
def test_udp_wait_invalid_timeout(shell, udp, timeout):
    assert shell(f"udp_wait 9000 {timeout}") == ["Invalid timeout value."]
    assert udp.waits == []


def test_udp_wait_usage_and_port(shell):
    assert shell("udp_wait") == ["Usage: udp_wait <port> [timeout_ms]"]
    assert shell("udp_wait 1 2 3") == ["Usage: udp_wait <port> [timeout_ms]"]
    assert shell("udp_wait 70000") == ["Invalid UDP port."]


def test_udp_wait_failure(state, context, output):
    error = UdpError("No UDP message received before timeout.")
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=FakeUdp(error=error)))
    execute_line("udp_wait 9000 10", registry, context)
    assert output.getvalue().splitlines() == ["UDP wait failed: No UDP message received before timeout."]


def test_udp_wait_timeout_from_shell_config(state, console):
    udp = FakeUdp()
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=udp))
    execute_line("udp_wait 9000", registry, CommandContext(console, config=AppConfig(udp_timeout_ms=250)))
    execute_line("udp_wait 9000 40", registry, CommandContext(console, config=AppConfig(udp_timeout_ms=250)))
    assert udp.waits == [(9000, 250), (9000, 40)]


def test_udp_wait_timeout_without_config(state, context):
    udp = FakeUdp()
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=udp))
    execute_line("udp_wait 9000", registry, context)
    assert udp.waits == [(9000, 3000)]


def test_explicit_timeout_overrides_shell_config(state, console):
    udp = FakeUdp()
    registry = CommandRegistry()
    register_all(registry, make_commands(state, udp_client=udp, timeout_ms=1500))
    execute_line("udp_wait 9000", registry, CommandContext(console, config=AppConfig(udp_timeout_ms=250)))
    assert udp.waits == [(9000, 1500)]
