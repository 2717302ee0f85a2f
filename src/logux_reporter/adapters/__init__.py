"""Adapter implementations for clocks, themes and console sinks."""

from __future__ import annotations

from .clock import FixedClock, SystemClock
from .console.rich_console import RichConsoleAdapter
from .theme import PlainTheme, RichTheme, select_theme, visible_width

__all__ = [
    "FixedClock",
    "PlainTheme",
    "RichConsoleAdapter",
    "RichTheme",
    "SystemClock",
    "select_theme",
    "visible_width",
]
