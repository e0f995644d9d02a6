"""Layout defaults loaded from `coltab.toml` and environment overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, cast

from coltab.lib.config._paths import resolve_config_path

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TabulatorConfig:
    """Resolved layout defaults used when a caller leaves a knob unset."""

    separator: str = " "
    fill: str = " "
    default_width: int = 40


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "layout": {
        "separator": "separator",
        "sep": "separator",
        "fill": "fill",
    },
    "columns": {
        "default_width": "default_width",
        "width": "default_width",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "separator": "separator",
    "fill": "fill",
    "default_width": "default_width",
}

ENV_OVERRIDE_MAP: dict[str, str] = {
    "COLTAB_SEPARATOR": "separator",
    "COLTAB_FILL": "fill",
    "COLTAB_DEFAULT_WIDTH": "default_width",
}

FILL_ALIASES: dict[str, str] = {
    "space": " ",
    "tab": "\t",
}


def normalize_fill(raw_value: str, *, source: str) -> str:
    """Resolve a fill value to exactly one character."""

    value = FILL_ALIASES.get(raw_value.strip().lower(), raw_value)
    if len(value) != 1:
        raise ValueError(
            f"Invalid value for '{source}': expected a single character, got {raw_value!r}."
        )
    return value


def _check_width(value: int, *, source: str) -> int:
    if value < 1:
        raise ValueError(f"Invalid value for '{source}': expected int >= 1, got {value!r}.")
    return value


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name == "default_width":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return _check_width(raw_value, source=source)

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if field_name == "fill":
        return normalize_fill(raw_value, source=source)
    # Separators are literal text; surrounding blanks are significant.
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    if field_name == "default_width":
        try:
            value = int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        return _check_width(value, source=env_name)

    if field_name == "fill":
        return normalize_fill(raw_value, source=env_name)
    return raw_value


def _default_values() -> dict[str, object]:
    defaults = TabulatorConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(TabulatorConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown coltab config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_file_value(
                    field_name=field_name,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown coltab config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def read_config_file(path: Path) -> dict[str, object]:
    """Parse one TOML config file; a missing file reads as empty."""

    if not path.is_file():
        return {}
    return cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))


def load_config(path: Path | None = None) -> TabulatorConfig:
    """Load `coltab.toml` (see `resolve_config_path`) and apply env overrides."""

    values = _default_values()
    resolved = resolve_config_path(path)
    payload = read_config_file(resolved)
    if payload:
        _apply_toml_payload(values=values, payload=payload, path=resolved)

    _apply_env_overrides(values)
    return TabulatorConfig(
        separator=cast("str", values["separator"]),
        fill=cast("str", values["fill"]),
        default_width=cast("int", values["default_width"]),
    )
