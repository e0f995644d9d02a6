"""CLI command handlers for config.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from coltab.lib.ops.config import ConfigShowInput, config_show_sync
from coltab.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _config_show(
    emit: Emitter,
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a coltab.toml file."),
    ] = None,
) -> None:
    emit(config_show_sync(ConfigShowInput(config_path=config)))


def register_config_commands(app: App, emit: Emitter) -> set[str]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "config.show": lambda: partial(_config_show, emit),
    }

    registered: set[str] = set()

    for op in get_all_operations():
        if op.cli_group != "config":
            continue
        handler_factory = handlers.get(op.name)
        if handler_factory is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = handler_factory()
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
        registered.add(f"{op.cli_group}.{op.cli_name}")

    return registered
