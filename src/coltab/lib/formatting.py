"""Shared formatting protocol and context for output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from coltab.lib.tabulator import tabulate_text


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Parameters passed to text formatters."""

    width: int = 80  # terminal column width hint


@runtime_checkable
class TextFormattable(Protocol):
    """Protocol for output dataclasses that provide a human-readable text format."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...


def definition_list(
    rows: list[tuple[str, str]],
    *,
    width: int = 80,
    sep: str = "  ",
) -> str:
    """Render term/description pairs as a wrapped two-column listing.

    The term column is as wide as the longest term; descriptions wrap in
    whatever width remains.

    >>> definition_list([("fill", "padding character"), ("sep", "text between columns")], width=24)
    'fill  padding character\\nsep   text between\\n      columns'
    """

    if not rows:
        return ""
    term_width = max(1, max(len(term) for term, _ in rows))
    description_width = max(1, width - term_width - len(sep))
    return "".join(
        tabulate_text(
            [(term, term_width), (description, description_width)],
            sep=sep,
        )
        # A row with nothing in it still takes one line.
        or "\n"
        for term, description in rows
    ).removesuffix("\n")
