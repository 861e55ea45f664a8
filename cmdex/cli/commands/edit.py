"""Edit command for replacing the command behind an existing alias."""

from __future__ import annotations

from typing import List

import typer

from cmdex.errors import CmdexError
from cmdex.logging import print_error, print_ok

from ..common import PASSTHROUGH_CONTEXT, get_store, join_command
from ..completions import alias_name_completion
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=PASSTHROUGH_CONTEXT)
    def edit(
        ctx: typer.Context,
        alias: str = typer.Argument(
            ...,
            help="Alias to update; it must already exist.",
            shell_complete=alias_name_completion,
        ),
        new_command: List[str] = typer.Argument(..., help="Replacement command words."),
    ) -> None:
        """Edit an existing command set."""
        store = get_store(ctx)
        try:
            store.update(alias, join_command(new_command))
        except (CmdexError, ValueError) as exc:
            print_error(f"Error editing command: {exc}")
            return
        print_ok(f"Command updated for alias: {alias}")

    return {"edit": edit}
