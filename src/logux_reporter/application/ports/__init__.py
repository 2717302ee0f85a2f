"""Protocols the application layer depends on."""

from __future__ import annotations

from .console import ConsolePort
from .theme import ThemePort
from .time import ClockPort

__all__ = ["ClockPort", "ConsolePort", "ThemePort"]
