"""Config inspection operations."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal

from coltab.lib.config._paths import resolve_config_path
from coltab.lib.config.settings import (
    ENV_OVERRIDE_MAP,
    TabulatorConfig,
    load_config,
    read_config_file,
)
from coltab.lib.formatting import FormatContext, definition_list
from coltab.lib.ops.registry import OperationSpec, operation

ValueSource = Literal["default", "file", "env"]

_FILE_KEYS: dict[str, tuple[tuple[str | None, str], ...]] = {
    "separator": (("layout", "separator"), ("layout", "sep"), (None, "separator")),
    "fill": (("layout", "fill"), (None, "fill")),
    "default_width": (
        ("columns", "default_width"),
        ("columns", "width"),
        (None, "default_width"),
    ),
}


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    config_path: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigResolvedValue:
    key: str
    value: object
    source: ValueSource
    env_var: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    path: str
    values: tuple[ConfigResolvedValue, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        width = ctx.width if ctx is not None else FormatContext().width
        rows: list[tuple[str, str]] = []
        for item in self.values:
            source_note = item.source
            if item.env_var is not None:
                source_note = f"{source_note} ({item.env_var})"
            rows.append((item.key, f"{item.value!r} [source: {source_note}]"))
        return f"path: {self.path}\n{definition_list(rows, width=width)}"


def _in_file(payload: dict[str, object], field_name: str) -> bool:
    for section, key in _FILE_KEYS[field_name]:
        if section is None:
            if key in payload:
                return True
            continue
        table = payload.get(section)
        if isinstance(table, dict) and key in table:
            return True
    return False


def _env_var_for(field_name: str) -> str:
    return next(env for env, name in ENV_OVERRIDE_MAP.items() if name == field_name)


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    explicit = Path(payload.config_path) if payload.config_path else None
    path = resolve_config_path(explicit)
    file_payload = read_config_file(path)
    resolved = load_config(explicit)

    values: list[ConfigResolvedValue] = []
    for field in fields(TabulatorConfig):
        env_var = _env_var_for(field.name)
        source: ValueSource = "default"
        if os.getenv(env_var) is not None:
            source = "env"
        elif _in_file(file_payload, field.name):
            source = "file"
        values.append(
            ConfigResolvedValue(
                key=field.name,
                value=getattr(resolved, field.name),
                source=source,
                env_var=env_var if source == "env" else None,
            )
        )
    return ConfigShowOutput(path=path.as_posix(), values=tuple(values))


operation(
    OperationSpec(
        name="config.show",
        handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
        cli_group="config",
        cli_name="show",
        description="Show resolved layout defaults and where each value comes from.",
    )
)
