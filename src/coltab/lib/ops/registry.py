"""Operation registry shared by the CLI and programmatic callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


@dataclass(frozen=True, slots=True)
class OperationSpec(Generic[InputT, OutputT]):
    """Single source of truth for an operation exposed on the CLI."""

    name: str
    handler: Callable[[InputT], OutputT]
    input_type: type[InputT]
    output_type: type[OutputT]
    cli_group: str | None
    cli_name: str
    description: str


_REGISTRY: dict[str, OperationSpec[Any, Any]] = {}
_bootstrapped = False


def operation(spec: OperationSpec[InputT, OutputT]) -> OperationSpec[InputT, OutputT]:
    """Register an operation and guard against duplicates."""

    if spec.name in _REGISTRY:
        raise ValueError(
            f"Duplicate operation name '{spec.name}': already registered by "
            f"{_REGISTRY[spec.name].handler}"
        )
    _REGISTRY[spec.name] = spec
    return spec


def get_all_operations() -> list[OperationSpec[Any, Any]]:
    """Return all registered operations sorted by canonical name."""

    _ensure_bootstrapped()
    return [_REGISTRY[name] for name in sorted(_REGISTRY)]


def _bootstrap_operation_modules() -> None:
    # Operation modules self-register via `operation(...)` on import.
    import coltab.lib.ops.config as config_ops
    import coltab.lib.ops.render as render_ops

    _ = (config_ops, render_ops)


def _ensure_bootstrapped() -> None:
    global _bootstrapped
    if _bootstrapped:
        return
    # Only mark bootstrapped after a successful import sequence so failures retry.
    _bootstrap_operation_modules()
    _bootstrapped = True
