"""Path resolution for the coltab config file."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "coltab.toml"


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Resolve which `coltab.toml` applies.

    Precedence:
    1. Explicit function argument.
    2. `COLTAB_CONFIG` environment variable.
    3. `coltab.toml` in the current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_path = os.getenv("COLTAB_CONFIG")
    if env_path:
        return Path(env_path).expanduser().resolve()

    return Path.cwd().resolve() / CONFIG_FILENAME
