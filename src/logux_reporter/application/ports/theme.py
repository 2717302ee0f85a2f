"""Theme port describing how text gets styled.

Purpose
-------
Let the block renderers ask for styling by Rich style string (``"bold red"``,
``"dim"``) without knowing whether colours are enabled.

Contents
--------
* :class:`ThemePort` - ``paint`` applies a style, ``measure`` returns the
  visible width of possibly styled text.

System Role
-----------
Implemented by :class:`logux_reporter.adapters.theme.RichTheme` (ANSI
output) and :class:`logux_reporter.adapters.theme.PlainTheme` (no styling).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ThemePort(Protocol):
    """Style text for terminal output."""

    def paint(self, text: str, style: str) -> str:
        """Return ``text`` wrapped in ``style``."""

    def measure(self, text: str) -> int:
        """Return the visible width of ``text``, ignoring escape sequences."""


__all__ = ["ThemePort"]
