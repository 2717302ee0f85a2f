"""Colorized console reporter for Logux server events.

``import logux_reporter`` gives host servers the façade (:func:`report`,
:class:`Reporter`) plus the event and payload types they construct.
"""

from __future__ import annotations

from .domain import (
    AuthenticatedEvent,
    Client,
    ClientErrorEvent,
    ConnectEvent,
    DestroyEvent,
    DisconnectEvent,
    ErrorInfo,
    FrameKind,
    ListenEvent,
    ListenOptions,
    RuntimeErrorEvent,
    ServerInfo,
    SyncErrorEvent,
)
from .reporter import Reporter, current_clock, report, reportdemo, reset_clock, set_clock, summary_info

__all__ = [
    "AuthenticatedEvent",
    "Client",
    "ClientErrorEvent",
    "ConnectEvent",
    "DestroyEvent",
    "DisconnectEvent",
    "ErrorInfo",
    "FrameKind",
    "ListenEvent",
    "ListenOptions",
    "Reporter",
    "RuntimeErrorEvent",
    "ServerInfo",
    "SyncErrorEvent",
    "current_clock",
    "report",
    "reportdemo",
    "reset_clock",
    "set_clock",
    "summary_info",
]
