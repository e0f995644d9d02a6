"""Per-column wrap state and the line-break decision."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coltab.lib.column import Column
    from coltab.lib.ports import TextSink

LINE_TERMINATOR = "\n"
_BLANKS = frozenset(" \t")


def is_blank(ch: str) -> bool:
    """Space or horizontal tab. A newline is not blank."""

    return ch in _BLANKS


@dataclass(slots=True)
class ColumnCursor:
    """Progress through one column's text.

    ``consume_pos`` indexes the next unread character and only ever grows.
    ``line_pos`` counts characters emitted on the current output line.
    """

    consume_pos: int = 0
    line_pos: int = 0

    def is_exhausted(self, column: Column) -> bool:
        return self.consume_pos >= len(column.text)

    def next_char(self, column: Column) -> str | None:
        """Consume and return the next character, or None at end of text."""

        if self.is_exhausted(column):
            return None
        ch = column.text[self.consume_pos]
        self.consume_pos += 1
        return ch

    def word_fits(self, column: Column) -> bool:
        """Check whether the word starting at ``consume_pos`` fits the line.

        Counting starts at ``line_pos``. The word fits when a blank is found,
        or the text ends, before the count reaches the column width.
        """

        text = column.text
        width = column.width
        length = self.line_pos
        index = self.consume_pos
        while index < len(text) and length < width:
            if is_blank(text[index]):
                return True
            index += 1
            length += 1
        return length < width

    def would_break(self, ch: str, column: Column) -> bool:
        """Break on a newline, or on a blank whose following word does not fit."""

        return ch == LINE_TERMINATOR or (is_blank(ch) and not self.word_fits(column))

    def emit(self, ch: str, sink: TextSink) -> None:
        sink.write(ch)
        self.line_pos += 1

    def start_new_line(self) -> None:
        self.line_pos = 0
