"""Severity levels understood by the line renderer.

Purpose
-------
Bind every severity to the label and colour used in the status line so the
mapping cannot drift between formatters.

Contents
--------
* :class:`Severity` enum with presentation metadata.
* ``_COLOR_TABLE`` constant mapping severities to Rich colour names.
"""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Severities rendered in the status line of an entry."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def label(self) -> str:
        """Return the label shown in the inverted badge, space-wrapped."""

        return f" {self.value} "

    @property
    def color(self) -> str:
        """Return the Rich colour name associated with the severity."""

        return _COLOR_TABLE[self]


_COLOR_TABLE = {
    Severity.INFO: "green",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
}
# Foreground colours applied to badge and message per severity.


__all__ = ["Severity"]
