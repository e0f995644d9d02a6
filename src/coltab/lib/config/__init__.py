"""Configuration discovery and parsing helpers."""

from coltab.lib.config._paths import CONFIG_FILENAME, resolve_config_path
from coltab.lib.config.settings import TabulatorConfig, load_config, normalize_fill

__all__ = [
    "CONFIG_FILENAME",
    "TabulatorConfig",
    "load_config",
    "normalize_fill",
    "resolve_config_path",
]
