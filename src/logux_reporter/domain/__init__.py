"""Domain values and pure rules used by the reporter."""

from __future__ import annotations

from .events import (
    EVENT_KINDS,
    AuthenticatedEvent,
    Client,
    ClientErrorEvent,
    ConnectEvent,
    DestroyEvent,
    DisconnectEvent,
    ErrorInfo,
    ListenEvent,
    ListenOptions,
    ReporterEvent,
    RuntimeErrorEvent,
    ServerInfo,
    SyncErrorEvent,
    build_event,
)
from .frames import DEPENDENCY_MARKERS, FrameKind, StackFrame, classify_frame, classify_stack, normalise_root
from .layout import LABEL_WIDTH, NEXT_LINE, PADDING, SEPARATOR
from .levels import Severity

__all__ = [
    "AuthenticatedEvent",
    "Client",
    "ClientErrorEvent",
    "ConnectEvent",
    "DEPENDENCY_MARKERS",
    "DestroyEvent",
    "DisconnectEvent",
    "EVENT_KINDS",
    "ErrorInfo",
    "FrameKind",
    "LABEL_WIDTH",
    "ListenEvent",
    "ListenOptions",
    "NEXT_LINE",
    "PADDING",
    "ReporterEvent",
    "RuntimeErrorEvent",
    "SEPARATOR",
    "ServerInfo",
    "Severity",
    "StackFrame",
    "SyncErrorEvent",
    "build_event",
    "classify_frame",
    "classify_stack",
    "normalise_root",
]
