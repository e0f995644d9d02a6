"""Column value type: one text source plus its display width."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

ColumnLike: TypeAlias = "Column | tuple[str, int]"


@dataclass(frozen=True, slots=True)
class Column:
    """One independently wrapped text source with a fixed display width.

    ``width`` is counted in characters and must be at least 1. A zero width is
    a caller error and is not checked. ``text`` may be empty, in which case the
    column only ever contributes fill.
    """

    text: str
    width: int


def as_column(value: ColumnLike) -> Column:
    """Accept either a ``Column`` or a ``(text, width)`` pair."""

    if isinstance(value, Column):
        return value
    text, width = value
    return Column(text=text, width=width)
