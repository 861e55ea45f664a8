"""Subcommand modules; each exposes ``register(app) -> CommandMap``."""

from __future__ import annotations

from . import edit, listing, run, save

COMMAND_MODULES = (save, listing, edit, run)

__all__ = ["COMMAND_MODULES"]
