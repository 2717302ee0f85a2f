"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write finished reporter entries to the file behind a Rich console.

Contents
--------
* :class:`RichConsoleAdapter` - sink used by the CLI and host applications.

System Role
-----------
Entries already carry their ANSI codes and ``\\r\\v`` line joins. Rich's
``print`` would strip those control characters, so the adapter writes to the
console file directly and only uses Rich to resolve the target stream.
"""

from __future__ import annotations

from rich.console import Console

from logux_reporter.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Emit rendered entries verbatim."""

    def __init__(self, *, console: Console | None = None, stderr: bool = False) -> None:
        self._console = console if console is not None else Console(stderr=stderr)

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, text: str) -> None:
        """Write ``text`` and flush the stream.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleAdapter(console=Console(file=buffer)).emit("entry\\n\\n")
        >>> buffer.getvalue()
        'entry\\n\\n'
        """

        stream = self._console.file
        stream.write(text)
        stream.flush()


__all__ = ["RichConsoleAdapter"]
