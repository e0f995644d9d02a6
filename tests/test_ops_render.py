"""render and config.show operations called directly."""

from __future__ import annotations

import dataclasses
import io
from pathlib import Path

import pytest

from coltab.lib.formatting import FormatContext, TextFormattable, definition_list
from coltab.lib.ops.config import (
    ConfigResolvedValue,
    ConfigShowInput,
    ConfigShowOutput,
    config_show_sync,
)
from coltab.lib.ops.registry import get_all_operations
from coltab.lib.ops.render import RenderInput, RenderOutput, render_sync
from coltab.lib.serialization import to_jsonable


def test_literal_sources_render_side_by_side() -> None:
    result = render_sync(
        RenderInput(
            sources=("abc def ghi", "123 4432 17 8989"),
            widths=(6, 4),
            separator=" | ",
            literal=True,
        )
    )

    assert result == RenderOutput(
        text="abc    | 123\ndef    | 4432\nghi    | 17\n       | 8989\n",
        lines=4,
        columns=2,
    )
    assert result.format_text() == result.text.removesuffix("\n")


def test_file_sources_use_config_defaults(tmp_path: Path) -> None:
    (tmp_path / "coltab.toml").write_text(
        '[layout]\nseparator = "|"\nfill = "."\n\n[columns]\ndefault_width = 5\n',
        encoding="utf-8",
    )
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("one two\n", encoding="utf-8")
    right.write_text("x\n", encoding="utf-8")

    result = render_sync(RenderInput(sources=(str(left), str(right))))

    assert result.text == "one..|x\ntwo..|\n"


def test_explicit_options_override_config(tmp_path: Path) -> None:
    (tmp_path / "coltab.toml").write_text('[layout]\nseparator = "|"\n', encoding="utf-8")

    result = render_sync(
        RenderInput(sources=("ab", "c"), widths=(4,), separator=":", fill="tab", literal=True)
    )

    assert result.text == "ab\t:c\n"


def test_stdin_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))

    result = render_sync(RenderInput(sources=("-",), widths=(4,)))

    assert result.text == "from\nstdin\n"


@pytest.mark.parametrize(
    ("payload", "error", "pattern"),
    (
        (RenderInput(), ValueError, "At least one source"),
        (RenderInput(sources=("a",), widths=(0,), literal=True), ValueError, ">= 1"),
        (RenderInput(sources=("a",), widths=(2, 3), literal=True), ValueError, "2 widths"),
        (RenderInput(sources=("a",), fill="..", literal=True), ValueError, "--fill"),
        (RenderInput(sources=("-", "-")), ValueError, "only be used once"),
        (RenderInput(sources=("missing.txt",)), FileNotFoundError, "missing.txt"),
    ),
)
def test_render_rejects_bad_input(
    payload: RenderInput,
    error: type[Exception],
    pattern: str,
) -> None:
    with pytest.raises(error, match=pattern):
        render_sync(payload)


def test_config_show_reports_value_sources(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    (tmp_path / "coltab.toml").write_text("[layout]\nfill = '.'\n", encoding="utf-8")
    monkeypatch.setenv("COLTAB_DEFAULT_WIDTH", "12")

    result = config_show_sync(ConfigShowInput())

    by_key = {item.key: item for item in result.values}
    assert result.path == (tmp_path.resolve() / "coltab.toml").as_posix()
    assert (by_key["separator"].value, by_key["separator"].source) == (" ", "default")
    assert (by_key["fill"].value, by_key["fill"].source) == (".", "file")
    assert by_key["default_width"].value == 12
    assert by_key["default_width"].env_var == "COLTAB_DEFAULT_WIDTH"

    text = result.format_text(FormatContext(width=60))
    assert text.splitlines()[0] == f"path: {result.path}"
    assert "default_width  12 [source: env (COLTAB_DEFAULT_WIDTH)]" in text


def test_all_output_types_are_text_formattable() -> None:
    for spec in get_all_operations():
        assert issubclass(spec.output_type, TextFormattable), spec.name


def test_definition_list_wraps_descriptions_under_their_column() -> None:
    text = definition_list(
        [("fill", "padding character"), ("sep", "text between columns")],
        width=24,
    )
    assert text == "fill  padding character\nsep   text between\n      columns"
    assert definition_list([]) == ""


def test_definition_list_keeps_blank_rows() -> None:
    text = definition_list([("a", "x"), ("", ""), ("b", "y")], width=10)
    assert text == "a  x\n\nb  y"


def test_format_context_only_carries_width() -> None:
    assert [field.name for field in dataclasses.fields(FormatContext)] == ["width"]


def test_config_show_output_serializes_nested_values() -> None:
    output = ConfigShowOutput(
        path="/tmp/coltab.toml",
        values=(ConfigResolvedValue(key="fill", value=".", source="file"),),
    )

    assert to_jsonable(output) == {
        "path": "/tmp/coltab.toml",
        "values": [{"key": "fill", "value": ".", "source": "file", "env_var": None}],
    }
