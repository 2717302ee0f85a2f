"""Whitespace constants shared by every rendered block.

Purpose
-------
Keep padding and line separators in one place so tables, stack traces and the
dispatcher agree on the same layout.

Contents
--------
* :data:`PADDING` - indentation for table rows, notes and stack frames.
* :data:`LABEL_WIDTH` - visible width of the severity label column.
* :data:`NEXT_LINE` - separator between lines that belong to one entry.
* :data:`SEPARATOR` - terminator appended after every entry.

System Role
-----------
Log collectors split their input on ``\\n``. Lines of one entry are therefore
joined with ``\\r\\v`` on platforms where ``os.linesep`` is a single byte, so
a multi-line entry survives as one record. Entries end with a doubled
platform line separator.
"""

from __future__ import annotations

import os

PADDING = " " * 8
LABEL_WIDTH = 8


def next_line_for(linesep: str) -> str:
    """Return the in-entry line separator for a platform ``linesep``.

    Examples
    --------
    >>> next_line_for("\\n") == "\\r\\v"
    True
    >>> next_line_for("\\r\\n")
    '\\r\\n'
    """

    return "\r\v" if linesep == "\n" else linesep


NEXT_LINE = next_line_for(os.linesep)
SEPARATOR = os.linesep * 2


__all__ = ["LABEL_WIDTH", "NEXT_LINE", "PADDING", "SEPARATOR", "next_line_for"]
