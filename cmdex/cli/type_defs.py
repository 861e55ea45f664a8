"""Shared typing helpers for the cmdex command modules."""

from __future__ import annotations

from typing import Dict

from typer.models import CommandFunctionType

# What each commands/<name>.py ``register`` returns: command name -> handler.
CommandMap = Dict[str, CommandFunctionType]
