"""Save command for storing a command under an alias."""

from __future__ import annotations

from typing import List

import typer

from cmdex.errors import StorageError
from cmdex.logging import print_error, print_ok

from ..common import PASSTHROUGH_CONTEXT, get_store, join_command
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=PASSTHROUGH_CONTEXT)
    def save(
        ctx: typer.Context,
        alias: str = typer.Argument(..., help="Short name to store the command under."),
        command: List[str] = typer.Argument(
            ..., help="Command words; use $1, $2, ... for arguments."
        ),
    ) -> None:
        """Save a command set with an alias."""
        store = get_store(ctx)
        try:
            store.put(alias, join_command(command))
        except (StorageError, ValueError) as exc:
            print_error(f"Error saving command: {exc}")
            return
        print_ok(f"Command saved with alias: {alias}")

    return {"save": save}
