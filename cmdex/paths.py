"""Helpers for resolving the store location."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from cmdex.configuration.schema import CmdexConfig


def store_path(config: CmdexConfig, cwd: Optional[Path] = None) -> Path:
    """Return the store file for ``config``; relative paths hang off ``cwd``."""
    path = Path(config.store.path).expanduser()
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path
