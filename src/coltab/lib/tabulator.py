"""Side-by-side word-wrapped column output.

``tabulate`` writes N columns line by line into a text sink. Each column is
left-aligned and wrapped on blanks; a word is never split across lines, and a
word longer than its column is written whole on a line of its own. Every
column except the last is padded with ``fill`` up to its width and followed by
``sep``. Columns that run out of text early keep contributing padding until
the longest column is done.

    >>> tabulate_text([Column("abc def ghi", 6), Column("123 4432 17 8989", 4)], sep=" | ")
    'abc    | 123\\ndef    | 4432\\nghi    | 17\\n       | 8989\\n'
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, TypeVar

from coltab.lib.column import as_column
from coltab.lib.cursor import LINE_TERMINATOR, ColumnCursor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coltab.lib.column import Column, ColumnLike
    from coltab.lib.ports import TextSink

logger = logging.getLogger(__name__)

SinkT = TypeVar("SinkT", bound="TextSink")

TAB = "\t"
TAB_STEP = 8


def emit_segment(cursor: ColumnCursor, column: Column, sink: TextSink) -> None:
    """Write as much of ``column`` as belongs on the current line.

    The breaking character is consumed and dropped; the column boundary or
    the line terminator stands in for it.
    """

    while (ch := cursor.next_char(column)) is not None:
        if cursor.would_break(ch, column):
            break
        cursor.emit(ch, sink)


def pad_to_width(sink: TextSink, line_pos: int, width: int, fill: str) -> None:
    # Tab fill advances by a full tab stop and may overshoot the width.
    step = TAB_STEP if fill == TAB else 1
    for _ in range(line_pos, width, step):
        sink.write(fill)


def tabulate(
    sink: SinkT,
    columns: Iterable[ColumnLike],
    sep: str = " ",
    fill: str = " ",
) -> SinkT:
    """Write ``columns`` side by side into ``sink`` and return ``sink``.

    ``columns`` must hold at least one entry and every width must be at least
    1; neither precondition is checked. Errors raised by ``sink.write``
    propagate unchanged.
    """

    cols = [as_column(column) for column in columns]
    cursors = [ColumnCursor() for _ in cols]
    last = len(cols) - 1
    lines = 0

    while any(not cursor.is_exhausted(column) for cursor, column in zip(cursors, cols)):
        for index, (cursor, column) in enumerate(zip(cursors, cols)):
            emit_segment(cursor, column, sink)
            if index != last:
                pad_to_width(sink, cursor.line_pos, column.width, fill)
                sink.write(sep)
            cursor.start_new_line()
        sink.write(LINE_TERMINATOR)
        lines += 1

    logger.debug("Tabulated %d column(s) into %d line(s).", len(cols), lines)
    return sink


def tabulate_text(columns: Iterable[ColumnLike], sep: str = " ", fill: str = " ") -> str:
    """Tabulate into a string instead of a stream."""

    return tabulate(io.StringIO(), columns, sep=sep, fill=fill).getvalue()
