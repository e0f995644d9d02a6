"""CLI command handler for the render operation."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from coltab.lib.ops.registry import get_all_operations
from coltab.lib.ops.render import RenderInput, render_sync

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _render(
    emit: Emitter,
    *sources: Annotated[
        str,
        Parameter(help="Files to print side by side. '-' reads stdin and must follow '--'."),
    ],
    width: Annotated[
        tuple[int, ...],
        Parameter(
            name=["--width", "-w"],
            help="Column width, repeat once per column. Missing widths use the config default.",
        ),
    ] = (),
    sep: Annotated[
        str | None,
        Parameter(name=["--sep", "-s"], help="Text placed between adjacent columns."),
    ] = None,
    fill: Annotated[
        str | None,
        Parameter(
            name=["--fill", "-f"],
            help="Padding character; 'space' and 'tab' are accepted by name.",
        ),
    ] = None,
    literal: Annotated[
        bool,
        Parameter(name=["--literal", "-l"], help="Treat sources as the column text itself."),
    ] = False,
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a coltab.toml file."),
    ] = None,
) -> None:
    emit(
        render_sync(
            RenderInput(
                sources=tuple(sources),
                widths=tuple(width),
                separator=sep,
                fill=fill,
                literal=literal,
                config_path=config,
            )
        )
    )


def register_render_command(app: App, emit: Emitter) -> set[str]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "render": lambda: partial(_render, emit),
    }

    registered: set[str] = set()

    for op in get_all_operations():
        if op.cli_group is not None:
            continue
        handler_factory = handlers.get(op.name)
        if handler_factory is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = handler_factory()
        handler.__name__ = f"cmd_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
        registered.add(op.cli_name)

    return registered
