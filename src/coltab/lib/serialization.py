"""Serialization helpers for JSON output."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, cast


def to_jsonable(value: Any) -> Any:
    """Convert output dataclasses (and their nested tuples) to JSON payloads."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        typed_dict = cast("dict[object, object]", value)
        return {str(key): to_jsonable(item) for key, item in typed_dict.items()}
    if isinstance(value, (list, tuple)):
        typed_seq = cast("list[object] | tuple[object, ...]", value)
        return [to_jsonable(item) for item in typed_seq]
    return value
