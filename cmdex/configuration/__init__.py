"""Public interface for the cmdex configuration system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    clear_config_cache,
    get_config,
    load_config,
    locate_config_file,
    merge_configs,
    reload_config,
)
from .schema import CmdexConfig

__all__ = [
    "CmdexConfig",
    "clear_config_cache",
    "ConfigurationError",
    "get_config",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "reload_config",
]
