"""Typer application wiring for the cmdex CLI."""

from __future__ import annotations

import click
import typer
from typer.core import TyperGroup

from cmdex import __description__

from .commands import COMMAND_MODULES
from .common import RUN_COMMAND, print_version
from .help import show_root_help
from .type_defs import CommandMap


class AliasFallbackGroup(TyperGroup):
    """Command group that treats an unknown first word as an alias to run."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args:
            name = args[0]
            if not name.startswith("-") and self.get_command(ctx, name) is None:
                args = [RUN_COMMAND, *args]
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=AliasFallbackGroup,
    help=__description__,
    context_settings={"help_option_names": []},
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show CLI version and exit.",
        is_eager=True,
    ),
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
) -> None:
    if version:
        print_version()
        raise typer.Exit()
    if help_ or ctx.invoked_subcommand is None:
        show_root_help(ctx)
        raise typer.Exit()


def register_commands(target: typer.Typer) -> CommandMap:
    commands: CommandMap = {}
    for module in COMMAND_MODULES:
        commands.update(module.register(target))
    return commands


COMMANDS = register_commands(app)


def main() -> None:
    app(prog_name="cmdex")


__all__ = ["AliasFallbackGroup", "COMMANDS", "app", "main"]
