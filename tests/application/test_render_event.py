from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

import pytest

from logux_reporter.adapters.clock import FixedClock
from logux_reporter.adapters.theme import PlainTheme, RichTheme, select_theme
from logux_reporter.application.use_cases.render_event import FORMATTERS, create_render_event, join_blocks
from logux_reporter.domain import (
    EVENT_KINDS,
    NEXT_LINE,
    PADDING,
    SEPARATOR,
    AuthenticatedEvent,
    Client,
    ClientErrorEvent,
    ConnectEvent,
    DestroyEvent,
    DisconnectEvent,
    ErrorInfo,
    ListenEvent,
    ListenOptions,
    RuntimeErrorEvent,
    ServerInfo,
    SyncErrorEvent,
    build_event,
)

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
TIME = "at 2016-07-14 23:14:05"
PRODUCTION = ServerInfo(env="production", root="/srv/app")


@pytest.fixture
def render(fixed_clock: FixedClock):
    return create_render_event(clock=fixed_clock, select_theme=select_theme)


def _lines(entry: str) -> list[str]:
    assert entry.endswith(SEPARATOR)
    return entry[: -len(SEPARATOR)].split(NEXT_LINE)


def test_every_event_kind_has_a_formatter() -> None:
    assert set(FORMATTERS) == set(EVENT_KINDS.values())


def test_join_blocks_filters_empty_blocks() -> None:
    assert join_blocks(["first", "", "second", ""]) == "first" + NEXT_LINE + "second" + SEPARATOR


def test_destroy_renders_a_single_block(render) -> None:
    entry = render(DestroyEvent(), PRODUCTION)

    assert entry == f" INFO   Shutting down Logux server {TIME}" + SEPARATOR
    assert NEXT_LINE not in entry


def test_connect_lists_ip(render) -> None:
    assert _lines(render(ConnectEvent("127.0.0.1"), PRODUCTION)) == [
        f" INFO   Client was connected {TIME}",
        PADDING + "IP address: 127.0.0.1",
    ]


def test_authenticated_example(render) -> None:
    client = Client(remote_address="127.0.0.1", user_id="u1", subprotocol="1.0.0", protocol=(1, 0))

    lines = _lines(render(AuthenticatedEvent(client), PRODUCTION))

    assert lines == [
        f" INFO   User was authenticated {TIME}",
        PADDING + "User ID:        u1",
        PADDING + "Node ID:        unknown",
        PADDING + "Subprotocol:    1.0.0",
        PADDING + "Logux protocol: 1.0",
        PADDING + "IP address:     127.0.0.1",
    ]


def test_disconnect_of_anonymous_client(render) -> None:
    lines = _lines(render(DisconnectEvent(Client(remote_address="10.0.0.2")), PRODUCTION))

    assert lines[1:] == [
        PADDING + "User ID:    unauthenticated",
        PADDING + "Node ID:    unknown",
        PADDING + "IP address: 10.0.0.2",
    ]


def test_listen_with_certificate_uses_secure_scheme(render) -> None:
    app = ServerInfo(
        env="production",
        pid=21496,
        node_id="server:H1f8LAyzl",
        subprotocol="2.5.0",
        supports="2.x",
        version="0.1.0",
        listen=ListenOptions(host="0.0.0.0", port=443, cert="cert.pem", key="key.pem"),
    )

    lines = _lines(render(ListenEvent(), app))

    assert lines == [
        f" INFO   Logux server is listening {TIME}",
        PADDING + "Logux server: 0.1.0",
        PADDING + "PID:          21496",
        PADDING + "Node ID:      server:H1f8LAyzl",
        PADDING + "Environment:  production",
        PADDING + "Subprotocol:  2.5.0",
        PADDING + "Supports:     2.x",
        PADDING + "Listen:       wss://0.0.0.0:443",
    ]


def test_listen_in_development_adds_shutdown_hint(fixed_clock: FixedClock) -> None:
    render = create_render_event(clock=fixed_clock, select_theme=lambda app: PlainTheme())
    app = ServerInfo(env="development", listen=ListenOptions(server=object()))

    lines = _lines(render(ListenEvent(), app))

    assert lines[-1] == PADDING + "Press Ctrl-C to shutdown server"
    assert PADDING + "Listen:       Custom HTTP server" in lines


def test_development_output_is_colourised(render) -> None:
    entry = render(DestroyEvent(), ServerInfo(env="development"))
    assert "\x1b[" in entry
    assert ANSI_RE.sub("", entry) == f" INFO   Shutting down Logux server {TIME}" + SEPARATOR


def test_runtime_error_with_generic_name_omits_prefix(render) -> None:
    entry = render(RuntimeErrorEvent(error=ErrorInfo(name="Error", message="boom")), PRODUCTION)
    assert _lines(entry)[0] == f" ERROR  boom {TIME}"


def test_runtime_error_with_specific_name_keeps_prefix(render) -> None:
    entry = render(RuntimeErrorEvent(error=ErrorInfo(name="TypeError", message="boom")), PRODUCTION)
    assert _lines(entry)[0] == f" ERROR  TypeError: boom {TIME}"


def test_runtime_error_without_client_omits_context_block(render) -> None:
    stack = "Error: boom\n    at run (/srv/app/index.js:1:1)"

    lines = _lines(render(RuntimeErrorEvent(None, ErrorInfo(message="boom", stack=stack)), PRODUCTION))

    assert lines == [f" ERROR  boom {TIME}", PADDING + "at run (index.js:1:1)"]


def test_runtime_error_with_client_appends_context_after_stack(render) -> None:
    stack = "Error: boom\n    at run (/srv/app/index.js:1:1)"
    client = Client(remote_address="127.0.0.1", user_id="10", node_id="10:abc")

    lines = _lines(render(RuntimeErrorEvent(client, ErrorInfo(message="boom", stack=stack)), PRODUCTION))

    assert lines[1] == PADDING + "at run (index.js:1:1)"
    assert lines[2:] == [
        PADDING + "User ID:     10",
        PADDING + "Node ID:     10:abc",
        PADDING + "Subprotocol: unknown",
        PADDING + "IP address:  127.0.0.1",
    ]


@pytest.mark.parametrize(
    "received, message",
    [
        (True, "SyncError from client: wrong-format"),
        (False, "SyncError: wrong-format"),
    ],
)
def test_sync_error_prefix_depends_on_origin(render, received: bool, message: str) -> None:
    event = SyncErrorEvent(Client(remote_address="127.0.0.1"), ErrorInfo(name="SyncError", description="wrong-format", received=received))

    lines = _lines(render(event, PRODUCTION))

    assert lines[0] == f" ERROR  {message} {TIME}"
    assert lines[1] == PADDING + "User ID:     unauthenticated"


def test_client_error_is_a_warning(render) -> None:
    event = ClientErrorEvent(None, ErrorInfo(description="Wrong message format"))
    assert render(event, PRODUCTION) == f" WARN   Client error: Wrong message format {TIME}" + SEPARATOR


@pytest.mark.parametrize("kind", sorted(EVENT_KINDS))
def test_missing_optional_fields_render_placeholders(render, kind: str) -> None:
    event = build_event(kind)

    entry = render(event, ServerInfo(env="production"))

    assert "None" not in entry
    for line in _lines(entry):
        assert line.strip()
        assert not line.rstrip().endswith(":")


def test_theme_is_selected_once_per_render(fixed_clock: FixedClock) -> None:
    calls: list[str] = []

    def selector(app: ServerInfo) -> RichTheme:
        calls.append(app.env)
        return RichTheme()

    render = create_render_event(clock=fixed_clock, select_theme=selector)
    render(DisconnectEvent(Client()), PRODUCTION)

    assert calls == ["production"]


def test_unknown_event_type_fails_loudly(render) -> None:
    @dataclass(frozen=True)
    class RebootEvent:
        kind: ClassVar[str] = "reboot"

    with pytest.raises(TypeError, match="No formatter"):
        render(RebootEvent(), PRODUCTION)
