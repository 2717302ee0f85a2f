"""Rich-backed themes implementing :class:`ThemePort`.

Purpose
-------
Turn Rich style strings into ANSI escape sequences for development consoles
and keep production output free of any styling.

Contents
--------
* :class:`RichTheme` - renders styles with :class:`rich.style.Style`.
* :class:`PlainTheme` - returns text unchanged.
* :func:`visible_width` - terminal width of text that may carry ANSI codes.
* :func:`select_theme` - pick a theme from the server environment.

System Role
-----------
Chosen once per rendered entry by the dispatcher; both themes are stateless
and safe to share.
"""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text

from logux_reporter.application.ports.theme import ThemePort
from logux_reporter.domain.events import ServerInfo

COLOR_MODES = ("auto", "always", "never")


def visible_width(text: str) -> int:
    """Return the cell width of ``text`` once ANSI sequences are stripped.

    Examples
    --------
    >>> visible_width("\\x1b[1mUser ID: \\x1b[0m")
    9
    """

    return Text.from_ansi(text).cell_len


class RichTheme(ThemePort):
    """Style text with ANSI codes from the 16-colour palette."""

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        self._color_system = color_system

    def paint(self, text: str, style: str) -> str:
        """Return ``text`` wrapped in the escape codes of ``style``.

        Examples
        --------
        >>> RichTheme().paint("boom", "bold red")
        '\\x1b[1;31mboom\\x1b[0m'
        """

        return Style.parse(style).render(text, color_system=self._color_system)

    def measure(self, text: str) -> int:
        return visible_width(text)


class PlainTheme(ThemePort):
    """Leave text untouched."""

    def paint(self, text: str, style: str) -> str:
        return text

    def measure(self, text: str) -> int:
        return visible_width(text)


def select_theme(app: ServerInfo, color: str = "auto") -> ThemePort:
    """Return the theme for ``app`` honouring a ``color`` override.

    ``auto`` styles output only in the development environment.

    Examples
    --------
    >>> type(select_theme(ServerInfo(env="development"))).__name__
    'RichTheme'
    >>> type(select_theme(ServerInfo(env="production"))).__name__
    'PlainTheme'
    >>> type(select_theme(ServerInfo(env="production"), color="always")).__name__
    'RichTheme'
    """

    if color not in COLOR_MODES:
        raise ValueError(f"Unknown color mode: {color!r}")
    if color == "always" or (color == "auto" and app.is_development):
        return RichTheme()
    return PlainTheme()


__all__ = ["COLOR_MODES", "PlainTheme", "RichTheme", "select_theme", "visible_width"]
