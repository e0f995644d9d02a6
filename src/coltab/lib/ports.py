"""Output sink protocol."""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Append-only text destination: streams, StringIO, file objects."""

    def write(self, s: str, /) -> object: ...
