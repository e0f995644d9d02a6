"""Side-by-side word-wrapped text columns for command-line output."""

from coltab.lib import (
    Column,
    ColumnCursor,
    ColumnLike,
    TextSink,
    as_column,
    tabulate,
    tabulate_text,
)

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnCursor",
    "ColumnLike",
    "TextSink",
    "__version__",
    "as_column",
    "tabulate",
    "tabulate_text",
]
