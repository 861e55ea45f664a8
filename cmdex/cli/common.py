from __future__ import annotations

import click
import typer

from cmdex import __version__
from cmdex.configuration import (
    CmdexConfig,
    ConfigurationError,
    clear_config_cache,
    get_config,
)
from cmdex.errors import StorageOpenError
from cmdex.logging import console, print_error
from cmdex.paths import store_path
from cmdex.store import AliasStore

HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}
# Commands that take a shell command as trailing words must not choke on its flags.
PASSTHROUGH_CONTEXT = {**COMMAND_CONTEXT, "ignore_unknown_options": True}

RUN_COMMAND = "run"


def cli_config() -> CmdexConfig:
    """Return the active configuration, exiting with a message if it is invalid."""
    try:
        return get_config()
    except ConfigurationError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)


def refresh_cli_context() -> None:
    """Drop cached configuration so the next command re-reads it."""
    clear_config_cache()


def open_store() -> AliasStore:
    """Open the configured store; failure to open is fatal."""
    config = cli_config()
    try:
        return AliasStore.open(
            store_path(config), lock_timeout=config.store.lock_timeout
        )
    except StorageOpenError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)


def get_store(ctx: click.Context) -> AliasStore:
    """Return the process-wide store handle, opening it on first use.

    The handle lives on the root context so every command in this invocation
    shares it, and it is closed when that context closes. Help output never
    reaches this point, so it never creates the store file.
    """
    store = ctx.find_object(AliasStore)
    if store is None:
        store = open_store()
        root = ctx.find_root()
        root.obj = store
        root.call_on_close(store.close)
    return store


def join_command(words: list[str]) -> str:
    return " ".join(words)


def print_version() -> None:
    console.print(f"[bold]cmdex[/bold] [accent]v{__version__}[/]")
