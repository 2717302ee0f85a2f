"""Block renderers composed by the event formatters.

Each helper returns one block: a status line, an aligned key/value table, a
grey note, or a classified stack trace. Empty input yields ``""`` so the
dispatcher can drop the block.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from logux_reporter.application.ports import ClockPort, ThemePort
from logux_reporter.domain import (
    LABEL_WIDTH,
    NEXT_LINE,
    PADDING,
    Client,
    FrameKind,
    Severity,
    classify_stack,
)

Field = tuple[str, Any]

_FRAME_STYLES = {
    FrameKind.EXTERNAL: "red",
    FrameKind.DEPENDENCY: "red",
    FrameKind.APPLICATION: "yellow",
}


def right_pad(theme: ThemePort, text: str, width: int) -> str:
    """Pad ``text`` with spaces until its visible width reaches ``width``."""

    return text + " " * max(width - theme.measure(text), 0)


def render_time(theme: ThemePort, clock: ClockPort) -> str:
    return theme.paint("at " + clock.now().strftime("%Y-%m-%d %H:%M:%S"), "dim")


def render_line(theme: ThemePort, clock: ClockPort, severity: Severity, message: str) -> str:
    """Return the status line: inverted badge, bold message, dim timestamp."""

    badge = theme.paint(severity.label, f"bold {severity.color} on black reverse")
    text = theme.paint(message, f"bold {severity.color}")
    return right_pad(theme, badge, LABEL_WIDTH) + text + " " + render_time(theme, clock)


def render_table(theme: ThemePort, fields: Sequence[Field]) -> str:
    """Return ``fields`` as indented ``label: value`` rows with aligned values.

    Examples
    --------
    >>> from logux_reporter.adapters.theme import PlainTheme
    >>> print(render_table(PlainTheme(), [("PID", 1), ("Node ID", "server")]).replace(NEXT_LINE, "\\n"))
            PID:     1
            Node ID: server
    """

    if not fields:
        return ""
    width = max(theme.measure(label) for label, _ in fields) + 2
    return NEXT_LINE.join(
        PADDING + right_pad(theme, label + ": ", width) + theme.paint(str(value), "bold") for label, value in fields
    )


def render_note(theme: ThemePort, text: str) -> str:
    return PADDING + theme.paint(text, "bright_black")


def render_stack(theme: ThemePort, stack: str | None, root: str | None) -> str:
    """Return the stack trace without its header, one coloured frame per line."""

    frames = classify_stack(stack, root)
    return NEXT_LINE.join(theme.paint(frame.text, _FRAME_STYLES[frame.kind]) for frame in frames)


def render_error_context(theme: ThemePort, client: Client | None) -> str:
    """Return the client table attached to error entries, ``""`` without client."""

    if client is None:
        return ""
    return render_table(
        theme,
        [
            ("User ID", client.user_id or "unauthenticated"),
            ("Node ID", client.node_id or "unknown"),
            ("Subprotocol", client.subprotocol or "unknown"),
            ("IP address", client.remote_address or "unknown"),
        ],
    )


__all__ = [
    "Field",
    "render_error_context",
    "render_line",
    "render_note",
    "render_stack",
    "render_table",
    "render_time",
    "right_pad",
]
