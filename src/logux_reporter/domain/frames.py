"""Stack frame classification.

Purpose
-------
Decide, per stack trace line, whether the frame belongs to the application,
to one of its dependencies, or to code outside the project root, and rebase
in-project paths so they read relative to the root.

Contents
--------
* :class:`FrameKind` - the three classification outcomes.
* :class:`StackFrame` - classified, rebased line ready for colouring.
* :func:`normalise_root`, :func:`classify_frame`, :func:`classify_stack`.

System Role
-----------
Pure domain logic; the stack renderer only maps :class:`FrameKind` to a
colour. Node-style frames (``at fn (/path/file.js:1:2)``) and Python-style
frames (``File "/path/file.py", line 1, in fn``) are both understood.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum

from .layout import PADDING

DEPENDENCY_MARKERS: tuple[str, ...] = ("node_modules", "site-packages", "dist-packages")
"""Path segments identifying third-party code inside the project root."""

_LEADING_WS = re.compile(r"^\s*")
_NODE_FRAME = re.compile(r"(\s+at [^(]+ \()([^)]+)(\))")
_PYTHON_FRAME = re.compile(r'(\s+File ")([^"]+)(",.*)')


class FrameKind(Enum):
    """Where the code of a frame lives."""

    EXTERNAL = "external"
    DEPENDENCY = "dependency"
    APPLICATION = "application"


@dataclass(slots=True, frozen=True)
class StackFrame:
    """A classified stack trace line with its display text."""

    kind: FrameKind
    text: str


def normalise_root(root: str | None) -> str | None:
    """Return ``root`` ending with the path separator, or ``None`` when unset.

    Examples
    --------
    >>> import os
    >>> normalise_root("/srv/app") == "/srv/app" + os.sep
    True
    >>> normalise_root("") is None
    True
    """

    if not root:
        return None
    return root if root.endswith(os.sep) else root + os.sep


def classify_frame(line: str, root: str | None) -> StackFrame:
    """Classify one stack trace line against an already normalised ``root``.

    Leading whitespace is replaced by :data:`PADDING`. Frames under ``root``
    are shown with the root prefix removed; everything after the path match
    is dropped for Node-style frames.

    Examples
    --------
    >>> frame = classify_frame("  at run (/srv/app/index.js:2:3)", "/srv/app/")
    >>> frame.kind, frame.text.strip()
    (<FrameKind.APPLICATION: 'application'>, 'at run (index.js:2:3)')
    >>> classify_frame("  at run (/srv/app/node_modules/x.js:1:1)", "/srv/app/").kind
    <FrameKind.DEPENDENCY: 'dependency'>
    >>> classify_frame("  at process._tickCallback (node.js:1:1)", "/srv/app/").kind
    <FrameKind.EXTERNAL: 'external'>
    """

    padded = _LEADING_WS.sub(PADDING, line, count=1)
    match = _NODE_FRAME.search(padded) or _PYTHON_FRAME.search(padded)
    if match is None or root is None or not match.group(2).startswith(root):
        return StackFrame(FrameKind.EXTERNAL, padded)

    relative = match.group(2)[len(root):]
    if match.re is _NODE_FRAME:
        text = match.group(1) + relative + match.group(3)
    else:
        text = padded[: match.start(2)] + relative + padded[match.end(2):]
    kind = FrameKind.DEPENDENCY if any(marker in relative for marker in DEPENDENCY_MARKERS) else FrameKind.APPLICATION
    return StackFrame(kind, text)


def classify_stack(stack: str | None, root: str | None) -> list[StackFrame]:
    """Classify every line of ``stack`` after the header line.

    ``root`` is normalised here, so callers may pass it with or without a
    trailing separator.
    """

    if not stack:
        return []
    normalised = normalise_root(root)
    return [classify_frame(line, normalised) for line in stack.split("\n")[1:]]


__all__ = [
    "DEPENDENCY_MARKERS",
    "FrameKind",
    "StackFrame",
    "classify_frame",
    "classify_stack",
    "normalise_root",
]
