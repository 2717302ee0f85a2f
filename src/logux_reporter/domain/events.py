"""Server events and the payload shapes they carry.

Purpose
-------
Describe every event the server hands to the reporter as an immutable value,
one dataclass per kind, so the dispatcher can match on the type instead of
looking up free-form strings.

Contents
--------
* Payload shapes: :class:`Client`, :class:`ErrorInfo`, :class:`ListenOptions`,
  :class:`ServerInfo`.
* Event union: :class:`ListenEvent`, :class:`ConnectEvent`,
  :class:`AuthenticatedEvent`, :class:`DisconnectEvent`,
  :class:`DestroyEvent`, :class:`RuntimeErrorEvent`, :class:`SyncErrorEvent`,
  :class:`ClientErrorEvent`.
* :data:`EVENT_KINDS` and :func:`build_event` translating string tags.

System Role
-----------
Sits in the domain layer. Optional fields stay ``None`` here; the formatters
decide which placeholder replaces them.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


@dataclass(slots=True, frozen=True)
class Client:
    """Connected client as seen by the server.

    Attributes
    ----------
    remote_address:
        IP address of the peer.
    user_id:
        Authenticated user, ``None`` before authentication.
    node_id:
        Node identifier announced by the client.
    subprotocol:
        Application sub-protocol version announced by the client.
    protocol:
        Logux wire-protocol version, e.g. ``(1, 0)``.
    """

    remote_address: str | None = None
    user_id: str | None = None
    node_id: str | None = None
    subprotocol: str | None = None
    protocol: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.protocol is not None:
            object.__setattr__(self, "protocol", tuple(self.protocol))


@dataclass(slots=True, frozen=True)
class ErrorInfo:
    """Error raised inside the server or reported by a peer.

    ``description`` is set for protocol errors; ``received`` marks errors that
    the remote side reported instead of the server detecting them.
    """

    name: str = "Error"
    message: str = ""
    stack: str | None = None
    description: str | None = None
    received: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", "" if self.name is None else str(self.name))
        object.__setattr__(self, "message", "" if self.message is None else str(self.message))

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        """Capture ``exc`` as a one-line header followed by one line per frame.

        Newlines in the message are folded into spaces so the header stays a
        single line. Frames carry no source excerpt.

        Examples
        --------
        >>> try:
        ...     raise KeyError("missing")
        ... except KeyError as error:
        ...     info = ErrorInfo.from_exception(error)
        >>> info.name, info.stack.splitlines()[0]
        ('KeyError', "KeyError: 'missing'")
        >>> info.stack.splitlines()[1].strip().startswith('File "')
        True
        """

        name = type(exc).__name__
        message = str(exc)
        summary = " ".join(message.splitlines())
        lines = [f"{name}: {summary}" if summary else name]
        for frame in traceback.extract_tb(exc.__traceback__):
            lines.append(f'  File "{frame.filename}", line {frame.lineno}, in {frame.name}')
        return cls(name=name, message=message, stack="\n".join(lines))


@dataclass(slots=True, frozen=True)
class ListenOptions:
    """Where and how the server listens."""

    host: str = "127.0.0.1"
    port: int | None = None
    cert: str | None = None
    key: str | None = None
    server: Any = None

    @property
    def url(self) -> str:
        """Return the address shown in the ``listen`` table.

        Examples
        --------
        >>> ListenOptions(host="0.0.0.0", port=443, cert="cert.pem").url
        'wss://0.0.0.0:443'
        >>> ListenOptions(host="127.0.0.1", port=31337).url
        'ws://127.0.0.1:31337'
        >>> ListenOptions(server=object()).url
        'Custom HTTP server'
        """

        if self.server is not None:
            return "Custom HTTP server"
        scheme = "wss://" if self.cert else "ws://"
        if self.port is None:
            return f"{scheme}{self.host}"
        return f"{scheme}{self.host}:{self.port}"


@dataclass(slots=True, frozen=True)
class ServerInfo:
    """Server configuration relevant to the reporter.

    ``env`` doubles as the mode flag: only ``"development"`` gets colours and
    the shutdown hint.
    """

    env: str = "development"
    pid: int | None = None
    node_id: str | None = None
    subprotocol: str | None = None
    supports: str | None = None
    root: str | None = None
    version: str | None = None
    listen: ListenOptions = field(default_factory=ListenOptions)

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(slots=True, frozen=True)
class ListenEvent:
    """Server started listening."""

    kind: ClassVar[str] = "listen"


@dataclass(slots=True, frozen=True)
class ConnectEvent:
    """A client opened a connection."""

    kind: ClassVar[str] = "connect"
    ip: str | None = None


@dataclass(slots=True, frozen=True)
class AuthenticatedEvent:
    """A client passed authentication."""

    kind: ClassVar[str] = "authenticated"
    client: Client = field(default_factory=Client)


@dataclass(slots=True, frozen=True)
class DisconnectEvent:
    """A client connection was closed."""

    kind: ClassVar[str] = "disconnect"
    client: Client = field(default_factory=Client)


@dataclass(slots=True, frozen=True)
class DestroyEvent:
    """Server is shutting down."""

    kind: ClassVar[str] = "destroy"


@dataclass(slots=True, frozen=True)
class RuntimeErrorEvent:
    """Uncaught error, optionally tied to a client."""

    kind: ClassVar[str] = "runtimeError"
    client: Client | None = None
    error: ErrorInfo = field(default_factory=ErrorInfo)


@dataclass(slots=True, frozen=True)
class SyncErrorEvent:
    """Protocol-level disagreement between server and client."""

    kind: ClassVar[str] = "syncError"
    client: Client | None = None
    error: ErrorInfo = field(default_factory=ErrorInfo)


@dataclass(slots=True, frozen=True)
class ClientErrorEvent:
    """Client misbehaviour short of a protocol violation."""

    kind: ClassVar[str] = "clientError"
    client: Client | None = None
    error: ErrorInfo = field(default_factory=ErrorInfo)


ReporterEvent = Union[
    ListenEvent,
    ConnectEvent,
    AuthenticatedEvent,
    DisconnectEvent,
    DestroyEvent,
    RuntimeErrorEvent,
    SyncErrorEvent,
    ClientErrorEvent,
]

EVENT_KINDS: dict[str, type] = {
    cls.kind: cls
    for cls in (
        ListenEvent,
        ConnectEvent,
        AuthenticatedEvent,
        DisconnectEvent,
        DestroyEvent,
        RuntimeErrorEvent,
        SyncErrorEvent,
        ClientErrorEvent,
    )
}
"""Event classes keyed by the string tag the server emits."""


def build_event(kind: str, *args: Any) -> ReporterEvent:
    """Return the event for ``kind`` built from positional ``args``.

    Raises
    ------
    ValueError
        If ``kind`` is not one of :data:`EVENT_KINDS`.

    Examples
    --------
    >>> build_event("connect", "127.0.0.1")
    ConnectEvent(ip='127.0.0.1')
    >>> build_event("reboot")
    Traceback (most recent call last):
    ...
    ValueError: Unknown event kind: 'reboot'
    """

    try:
        cls = EVENT_KINDS[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown event kind: {kind!r}") from exc
    return cls(*args)


__all__ = [
    "AuthenticatedEvent",
    "Client",
    "ClientErrorEvent",
    "ConnectEvent",
    "DestroyEvent",
    "DisconnectEvent",
    "EVENT_KINDS",
    "ErrorInfo",
    "ListenEvent",
    "ListenOptions",
    "ReporterEvent",
    "RuntimeErrorEvent",
    "ServerInfo",
    "SyncErrorEvent",
    "build_event",
]
