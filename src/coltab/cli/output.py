"""CLI output formatting utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, cast

from coltab.lib.formatting import FormatContext, TextFormattable
from coltab.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json"]

_DEFAULT_FORMAT_CTX = FormatContext()


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def normalize_output_format(*, requested: str | None, json_mode: bool) -> OutputFormat:
    """Resolve final output format from flags."""

    if json_mode:
        return "json"
    if requested is None or requested == "":
        return "text"

    normalized = requested.strip().lower()
    if normalized in {"text", "json"}:
        return cast("OutputFormat", normalized)
    raise SystemExit("--format must be one of: text, json")


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(to_jsonable(value), sort_keys=True))
        return
    if isinstance(value, TextFormattable):
        text = value.format_text(_DEFAULT_FORMAT_CTX)
        # Nothing to show means no output at all, not a blank line.
        if text:
            print(text)
    else:
        print(json.dumps(to_jsonable(value), sort_keys=True, indent=2))
