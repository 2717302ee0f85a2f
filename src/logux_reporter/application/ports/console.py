"""Console port describing where finished entries are written.

Purpose
-------
Give host code a narrow protocol for sinks so the reporter can be wired to a
terminal, a captured buffer or a test double alike.

Contents
--------
* :class:`ConsolePort` - runtime-checkable protocol with a single ``emit``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write a rendered entry to an output stream."""

    def emit(self, text: str) -> None:
        """Write ``text`` verbatim."""


__all__ = ["ConsolePort"]
