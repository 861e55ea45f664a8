"""List command for showing saved aliases."""

from __future__ import annotations

import typer

from cmdex.errors import StorageError
from cmdex.logging import print_error, print_plain

from ..common import COMMAND_CONTEXT, get_store
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(name="list", context_settings=COMMAND_CONTEXT)
    def list_aliases(ctx: typer.Context) -> None:
        """List all saved aliases and their associated commands."""
        store = get_store(ctx)
        try:
            store.for_each(lambda alias, template: print_plain(f"{alias}: {template}"))
        except StorageError as exc:
            print_error(f"Error listing commands: {exc}")

    return {"list": list_aliases}
