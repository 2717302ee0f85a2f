"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "logux_reporter"
title = "Colorized console reporter for Logux server events"
version = "0.1.0"
author = "Logux Reporter contributors"
shell_command = "logux-reporter"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (``print`` by default).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for logux_reporter:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    width = max(len(label) for label, _ in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    emit(f"Info for {name}:\n")
    for label, value in fields:
        emit(f"    {label.ljust(width)} = {value}\n")
