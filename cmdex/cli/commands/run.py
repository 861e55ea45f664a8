"""Run command: expand an alias and execute it."""

from __future__ import annotations

from typing import List, Optional

import typer

from cmdex import executor
from cmdex.errors import (
    AliasNotFound,
    CommandParseError,
    EmptyCommand,
    SpawnError,
    StorageError,
)
from cmdex.logging import print_error

from ..common import PASSTHROUGH_CONTEXT, RUN_COMMAND, cli_config, get_store
from ..completions import alias_name_completion
from ..type_defs import CommandMap


def run_saved_command(ctx: typer.Context, alias: str, args: List[str]) -> None:
    """Resolve and execute ``alias``; every failure is reported, never raised."""
    store = get_store(ctx)
    mode = cli_config().run.split_mode
    try:
        argv = executor.resolve(store, alias, args, mode=mode)
    except (AliasNotFound, StorageError) as exc:
        print_error(f"Error retrieving command: {exc}")
        return
    except (EmptyCommand, CommandParseError) as exc:
        print_error(str(exc))
        return

    try:
        executor.execute(argv)
    except SpawnError as exc:
        print_error(f"Error executing command: {exc}")


def register(app: typer.Typer) -> CommandMap:
    @app.command(name=RUN_COMMAND, context_settings=PASSTHROUGH_CONTEXT)
    def run(
        ctx: typer.Context,
        alias: str = typer.Argument(
            ..., help="Alias to run.", shell_complete=alias_name_completion
        ),
        args: Optional[List[str]] = typer.Argument(
            None, help="Values for the $1, $2, ... placeholders."
        ),
    ) -> None:
        """Run a saved command set."""
        run_saved_command(ctx, alias, args or [])

    return {RUN_COMMAND: run}
