"""Use case turning one server event into a finished console entry.

Purpose
-------
Hold one formatter per event kind and the dispatcher that selects the theme,
runs the formatter, drops empty blocks and joins the rest.

Contents
--------
* Formatters ``_listen`` … ``_client_error`` returning ordered blocks.
* :data:`FORMATTERS` - exhaustive table keyed by event class.
* :func:`create_render_event` factory returning the render callable.

System Role
-----------
Application-layer orchestrator invoked by :class:`logux_reporter.Reporter`.
It never writes output; the caller decides where the entry goes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from logux_reporter.application.ports import ClockPort, ThemePort
from logux_reporter.domain import (
    NEXT_LINE,
    SEPARATOR,
    AuthenticatedEvent,
    ClientErrorEvent,
    ConnectEvent,
    DestroyEvent,
    DisconnectEvent,
    ListenEvent,
    ReporterEvent,
    RuntimeErrorEvent,
    ServerInfo,
    Severity,
    SyncErrorEvent,
)

from ._blocks import render_error_context, render_line, render_note, render_stack, render_table

logger = logging.getLogger(__name__)

BASE_ERROR_NAME = "Error"
"""Error name treated as generic; its ``name:`` prefix is omitted."""

Formatter = Callable[[ThemePort, ClockPort, ServerInfo, Any], list[str]]
ThemeSelector = Callable[[ServerInfo], ThemePort]
RenderCallable = Callable[[ReporterEvent, ServerInfo], str]


def _listen(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: ListenEvent) -> list[str]:
    return [
        render_line(theme, clock, Severity.INFO, "Logux server is listening"),
        render_table(
            theme,
            [
                ("Logux server", app.version or "unknown"),
                ("PID", app.pid if app.pid is not None else "unknown"),
                ("Node ID", app.node_id or "unknown"),
                ("Environment", app.env or "unknown"),
                ("Subprotocol", app.subprotocol or "unknown"),
                ("Supports", app.supports or "unknown"),
                ("Listen", app.listen.url),
            ],
        ),
        render_note(theme, "Press Ctrl-C to shutdown server") if app.is_development else "",
    ]


def _connect(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: ConnectEvent) -> list[str]:
    return [
        render_line(theme, clock, Severity.INFO, "Client was connected"),
        render_table(theme, [("IP address", event.ip or "unknown")]),
    ]


def _authenticated(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: AuthenticatedEvent) -> list[str]:
    client = event.client
    protocol = ".".join(str(part) for part in client.protocol) if client.protocol else "unknown"
    return [
        render_line(theme, clock, Severity.INFO, "User was authenticated"),
        render_table(
            theme,
            [
                ("User ID", client.user_id or "unauthenticated"),
                ("Node ID", client.node_id or "unknown"),
                ("Subprotocol", client.subprotocol or "unknown"),
                ("Logux protocol", protocol),
                ("IP address", client.remote_address or "unknown"),
            ],
        ),
    ]


def _disconnect(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: DisconnectEvent) -> list[str]:
    client = event.client
    return [
        render_line(theme, clock, Severity.INFO, "Client was disconnected"),
        render_table(
            theme,
            [
                ("User ID", client.user_id or "unauthenticated"),
                ("Node ID", client.node_id or "unknown"),
                ("IP address", client.remote_address or "unknown"),
            ],
        ),
    ]


def _destroy(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: DestroyEvent) -> list[str]:
    return [render_line(theme, clock, Severity.INFO, "Shutting down Logux server")]


def _runtime_error(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: RuntimeErrorEvent) -> list[str]:
    error = event.error
    if not error.name or error.name == BASE_ERROR_NAME:
        message = error.message
    else:
        message = f"{error.name}: {error.message}"
    return [
        render_line(theme, clock, Severity.ERROR, message),
        render_stack(theme, error.stack, app.root),
        render_error_context(theme, event.client),
    ]


def _sync_error(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: SyncErrorEvent) -> list[str]:
    error = event.error
    prefix = "SyncError from client:" if error.received else "SyncError:"
    return [
        render_line(theme, clock, Severity.ERROR, f"{prefix} {error.description or 'unknown'}"),
        render_error_context(theme, event.client),
    ]


def _client_error(theme: ThemePort, clock: ClockPort, app: ServerInfo, event: ClientErrorEvent) -> list[str]:
    return [
        render_line(theme, clock, Severity.WARN, f"Client error: {event.error.description or 'unknown'}"),
        render_error_context(theme, event.client),
    ]


FORMATTERS: dict[type, Formatter] = {
    ListenEvent: _listen,
    ConnectEvent: _connect,
    AuthenticatedEvent: _authenticated,
    DisconnectEvent: _disconnect,
    DestroyEvent: _destroy,
    RuntimeErrorEvent: _runtime_error,
    SyncErrorEvent: _sync_error,
    ClientErrorEvent: _client_error,
}
"""Formatter per event class; every member of ``ReporterEvent`` is covered."""


def join_blocks(blocks: list[str]) -> str:
    """Drop empty blocks and join the rest into one entry.

    Examples
    --------
    >>> join_blocks(["a", "", "b"]) == "a" + NEXT_LINE + "b" + SEPARATOR
    True
    """

    return NEXT_LINE.join(block for block in blocks if block != "") + SEPARATOR


def create_render_event(*, clock: ClockPort, select_theme: ThemeSelector) -> RenderCallable:
    """Build the dispatcher capturing the clock and theme selection.

    Parameters
    ----------
    clock:
        Source of the timestamp printed on the status line.
    select_theme:
        Called once per render with the :class:`ServerInfo`; returns the
        theme used for every block of the entry.

    Returns
    -------
    Callable[[ReporterEvent, ServerInfo], str]
        Function rendering one event into a string terminated by
        :data:`SEPARATOR`.

    Raises
    ------
    TypeError
        From the returned callable when the event type has no formatter.

    Examples
    --------
    >>> from datetime import datetime
    >>> from logux_reporter.adapters.clock import FixedClock
    >>> from logux_reporter.adapters.theme import PlainTheme
    >>> render = create_render_event(clock=FixedClock(datetime(2016, 7, 14, 23, 14, 5)), select_theme=lambda app: PlainTheme())
    >>> render(DestroyEvent(), ServerInfo(env="production")).rstrip()
    ' INFO   Shutting down Logux server at 2016-07-14 23:14:05'
    """

    def render(event: ReporterEvent, app: ServerInfo) -> str:
        formatter = FORMATTERS.get(type(event))
        if formatter is None:
            raise TypeError(f"No formatter for event type {type(event).__name__}")
        theme = select_theme(app)
        blocks = formatter(theme, clock, app, event)
        logger.debug("rendered %s event with %d blocks", event.kind, len(blocks))
        return join_blocks(blocks)

    return render


__all__ = ["BASE_ERROR_NAME", "FORMATTERS", "create_render_event", "join_blocks"]
