"""Reporter façade that wires domain, application, and adapter layers together.

Purpose
-------
Expose a small API for host servers: build a :class:`Reporter` once, or call
the module-level :func:`report` with the string tag the server emits.

Contents
--------
* :class:`Reporter` - composition of clock, colour mode, root and sink.
* :func:`report` - one-shot rendering with environment settings.
* :func:`set_clock`, :func:`reset_clock`, :func:`current_clock` - clock seam
  used by :func:`report`.
* :func:`reportdemo` - render sample entries for every event kind.
* :func:`summary_info` - metadata banner for the CLI.

System Role
-----------
Edge of the system: configuration and adapter choices live here while the
formatting rules stay in :mod:`logux_reporter.application`.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Iterable

from .adapters import RichConsoleAdapter, SystemClock, select_theme
from .application.ports import ClockPort, ConsolePort, ThemePort
from .application.use_cases import create_render_event
from .config import load_settings
from .domain import (
    EVENT_KINDS,
    Client,
    ErrorInfo,
    ListenOptions,
    ReporterEvent,
    ServerInfo,
    build_event,
)

logger = logging.getLogger(__name__)

_CLOCK: ClockPort = SystemClock()


class _CurrentClock(ClockPort):
    """Delegate to whatever clock :func:`set_clock` installed last."""

    def now(self) -> datetime:
        return _CLOCK.now()


def set_clock(clock: ClockPort) -> None:
    """Install ``clock`` as the time source of :func:`report`."""

    global _CLOCK
    _CLOCK = clock


def reset_clock() -> None:
    """Restore the system clock."""

    global _CLOCK
    _CLOCK = SystemClock()


def current_clock() -> ClockPort:
    return _CLOCK


class Reporter:
    """Render server events into console entries.

    Parameters
    ----------
    clock:
        Time source for status lines; defaults to the clock installed with
        :func:`set_clock`.
    color:
        ``auto`` colours only the development environment, ``always`` and
        ``never`` force the choice.
    root:
        Project root used when :attr:`ServerInfo.root` is empty.
    console:
        Sink used by :meth:`emit`; defaults to stdout through Rich.

    Examples
    --------
    >>> from datetime import datetime
    >>> from logux_reporter.adapters import FixedClock
    >>> reporter = Reporter(clock=FixedClock(datetime(2016, 7, 14, 23, 14, 5)))
    >>> entry = reporter.report("connect", ServerInfo(env="production"), "127.0.0.1")
    >>> entry.splitlines()[0]
    ' INFO   Client was connected at 2016-07-14 23:14:05'
    """

    def __init__(
        self,
        *,
        clock: ClockPort | None = None,
        color: str = "auto",
        root: str | None = None,
        console: ConsolePort | None = None,
    ) -> None:
        self._color = color
        self._root = root
        self._console = console
        self._render = create_render_event(clock=clock or _CurrentClock(), select_theme=self._select_theme)

    def _select_theme(self, app: ServerInfo) -> ThemePort:
        theme = select_theme(app, self._color)
        if self._color != "auto":
            logger.debug("colour mode %s overrides environment %r", self._color, app.env)
        return theme

    def render(self, event: ReporterEvent, app: ServerInfo) -> str:
        """Return the console entry for ``event`` emitted by ``app``."""

        if not app.root and self._root:
            app = replace(app, root=self._root)
        return self._render(event, app)

    def report(self, kind: str, app: ServerInfo, *args: Any) -> str:
        """Render the event tagged ``kind`` built from positional ``args``.

        Raises
        ------
        ValueError
            If ``kind`` is not a known event tag.
        """

        return self.render(build_event(kind, *args), app)

    def emit(self, event: ReporterEvent, app: ServerInfo) -> str:
        """Render ``event`` and write it to the configured console."""

        entry = self.render(event, app)
        if self._console is None:
            self._console = RichConsoleAdapter()
        self._console.emit(entry)
        return entry


def report(kind: str, app: ServerInfo, *args: Any) -> str:
    """Render one event using ``LOGUX_REPORTER_*`` settings and the current clock.

    Examples
    --------
    >>> from datetime import datetime
    >>> from logux_reporter.adapters import FixedClock
    >>> set_clock(FixedClock(datetime(2016, 7, 14, 23, 14, 5)))
    >>> report("destroy", ServerInfo(env="production")).rstrip()
    ' INFO   Shutting down Logux server at 2016-07-14 23:14:05'
    >>> reset_clock()
    """

    settings = load_settings()
    return Reporter(color=settings.color, root=settings.root).report(kind, app, *args)


_DEMO_ROOT = "/srv/logux-app"


def _demo_stack(root: str) -> str:
    root = root.rstrip("/")
    return "\n".join(
        [
            "Error: Cannot read property 'id' of undefined",
            f"    at Server.auth ({root}/server.js:12:21)",
            f"    at Object.check ({root}/node_modules/logux-server/base-server.js:231:14)",
            "    at process._tickCallback (internal/process/next_tick.js:103:7)",
        ]
    )


def _demo_events(root: str) -> dict[str, ReporterEvent]:
    client = Client(
        remote_address="127.0.0.1",
        user_id="100",
        node_id="100:uImkcF4z",
        subprotocol="1.0.0",
        protocol=(2, 0),
    )
    return {
        "listen": build_event("listen"),
        "connect": build_event("connect", "127.0.0.1"),
        "authenticated": build_event("authenticated", client),
        "disconnect": build_event("disconnect", client),
        "destroy": build_event("destroy"),
        "runtimeError": build_event(
            "runtimeError",
            client,
            ErrorInfo(name="Error", message="Cannot read property 'id' of undefined", stack=_demo_stack(root)),
        ),
        "syncError": build_event("syncError", client, ErrorInfo(name="SyncError", description="wrong-format", received=True)),
        "clientError": build_event("clientError", client, ErrorInfo(name="ClientError", description="Wrong message format")),
    }


def reportdemo(
    *,
    kinds: Iterable[str] | None = None,
    env: str = "development",
    root: str | None = None,
    color: str = "auto",
    clock: ClockPort | None = None,
    console: ConsolePort | None = None,
) -> dict[str, str]:
    """Render sample entries and return them keyed by event kind.

    Entries are also written to ``console`` when one is given.

    Raises
    ------
    ValueError
        If ``kinds`` names an unknown event tag.
    """

    resolved_root = root or _DEMO_ROOT
    requested = list(kinds) if kinds else list(EVENT_KINDS)
    unknown = [kind for kind in requested if kind not in EVENT_KINDS]
    if unknown:
        raise ValueError(f"Unknown event kind: {unknown[0]!r}")

    app = ServerInfo(
        env=env,
        pid=21496,
        node_id="server:H1f8LAyzl",
        subprotocol="2.5.0",
        supports="2.x || 1.x",
        root=resolved_root,
        version="0.1.0",
        listen=ListenOptions(host="127.0.0.1", port=31337),
    )
    reporter = Reporter(clock=clock, color=color, console=console)
    events = _demo_events(resolved_root)
    results: dict[str, str] = {}
    for kind in requested:
        if console is not None:
            results[kind] = reporter.emit(events[kind], app)
        else:
            results[kind] = reporter.render(events[kind], app)
    return results


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "Reporter",
    "current_clock",
    "report",
    "reportdemo",
    "reset_clock",
    "set_clock",
    "summary_info",
]
