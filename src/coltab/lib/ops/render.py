"""Render files or literal strings as side-by-side wrapped columns."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from coltab.lib.column import Column
from coltab.lib.config.settings import load_config, normalize_fill
from coltab.lib.ops.registry import OperationSpec, operation
from coltab.lib.tabulator import tabulate_text

if TYPE_CHECKING:
    from coltab.lib.config.settings import TabulatorConfig
    from coltab.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)

STDIN_SOURCE = "-"


@dataclass(frozen=True, slots=True)
class RenderInput:
    sources: tuple[str, ...] = ()
    widths: tuple[int, ...] = ()
    separator: str | None = None
    fill: str | None = None
    literal: bool = False
    config_path: str | None = None


@dataclass(frozen=True, slots=True)
class RenderOutput:
    text: str
    lines: int
    columns: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        # print() supplies the final newline.
        return self.text.removesuffix("\n")


def _read_source(source: str) -> str:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")
    return path.read_text(encoding="utf-8")


def _resolve_widths(
    widths: tuple[int, ...],
    *,
    count: int,
    config: TabulatorConfig,
) -> list[int]:
    if len(widths) > count:
        raise ValueError(f"Got {len(widths)} widths for {count} column(s).")
    for width in widths:
        if width < 1:
            raise ValueError(f"Column width must be >= 1, got {width}.")
    return [*widths, *([config.default_width] * (count - len(widths)))]


def build_columns(payload: RenderInput, config: TabulatorConfig) -> list[Column]:
    """Pair each source text with its width."""

    if not payload.sources:
        raise ValueError("At least one source is required.")
    if not payload.literal and payload.sources.count(STDIN_SOURCE) > 1:
        raise ValueError("Standard input ('-') can only be used once.")

    texts = (
        list(payload.sources)
        if payload.literal
        else [_read_source(source) for source in payload.sources]
    )
    widths = _resolve_widths(payload.widths, count=len(texts), config=config)
    return [Column(text=text, width=width) for text, width in zip(texts, widths, strict=True)]


def render_sync(payload: RenderInput) -> RenderOutput:
    config = load_config(Path(payload.config_path) if payload.config_path else None)
    separator = config.separator if payload.separator is None else payload.separator
    fill = config.fill if payload.fill is None else normalize_fill(payload.fill, source="--fill")

    columns = build_columns(payload, config)
    logger.debug(
        "Rendering columns.",
        widths=[column.width for column in columns],
        separator=separator,
        fill=fill,
    )
    text = tabulate_text(columns, sep=separator, fill=fill)
    return RenderOutput(text=text, lines=text.count("\n"), columns=len(columns))


operation(
    OperationSpec(
        name="render",
        handler=render_sync,
        input_type=RenderInput,
        output_type=RenderOutput,
        cli_group=None,
        cli_name="render",
        description="Print sources side by side as word-wrapped columns.",
    )
)
