"""Core coltab library exports."""

from coltab.lib.column import Column, ColumnLike, as_column
from coltab.lib.cursor import ColumnCursor
from coltab.lib.ports import TextSink
from coltab.lib.tabulator import tabulate, tabulate_text

__all__ = [
    "Column",
    "ColumnCursor",
    "ColumnLike",
    "TextSink",
    "as_column",
    "tabulate",
    "tabulate_text",
]
