"""Help text rendering and formatting for the CLI.

This module handles the root help display including:
- Usage lines, covering bare alias invocation
- Command table with argument hints
- Option formatting
- Examples
"""

from __future__ import annotations

from typing import Iterable, Sequence

import click
import typer
from rich.table import Table

from cmdex import __description__
from cmdex.logging import PALETTE, console

HELP_EXAMPLES = [
    ("cmdex save gs git status", "Store 'git status' under the alias gs."),
    ("cmdex save greet 'echo hello $1'", "Use $1, $2, ... as positional placeholders."),
    ("cmdex run greet world", "Run an alias, filling in its placeholders."),
    ("cmdex greet world", "Same as run: unknown first words are aliases."),
    ("cmdex list", "Show every saved alias."),
]


def show_root_help(ctx: typer.Context) -> None:
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print("  cmdex [OPTIONS] COMMAND [ARGS]...")
    console.print("  cmdex [OPTIONS] ALIAS [ARGS]...\n", markup=False)
    console.print("[section]Commands[/section]")
    console.print(build_command_table(ctx))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_option_table(ctx))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def build_help_table(
    rows: Iterable[tuple[str, ...]],
    *,
    column_styles: Sequence[dict[str, object]] | None = None,
) -> Table:
    table = Table.grid(padding=(0, 3))
    styles = column_styles or (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*row)
    return table


def build_command_table(ctx: typer.Context) -> Table:
    return build_help_table(command_help_rows(ctx))


def build_option_table(ctx: typer.Context) -> Table:
    return build_help_table(option_help_rows(ctx))


def build_examples_table() -> Table:
    column_styles = (
        {"style": f"bold {PALETTE['cyan']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    return build_help_table(HELP_EXAMPLES, column_styles=column_styles)


def command_help_rows(ctx: typer.Context):
    command_group = ctx.command
    if command_group is None or not hasattr(command_group, "list_commands"):
        return []
    rows = []
    for name in command_group.list_commands(ctx):
        command = command_group.get_command(ctx, name)
        if not command or command.hidden:
            continue
        rows.append((name, command_param_hint(command), _command_description(command)))
    return rows


def option_help_rows(ctx: typer.Context):
    rows = []
    if ctx.command is None:
        return rows
    for param in ctx.command.params:
        if param.param_type_name != "option" or getattr(param, "hidden", False):
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def _command_description(command) -> str:
    text = command.help or command.short_help
    if not text:
        callback = getattr(command, "callback", None)
        text = (callback.__doc__ or "") if callback else ""
    lines = text.strip().splitlines()
    return lines[0].strip() if lines else ""


def command_param_hint(command: click.Command) -> str:
    arguments = [param for param in command.params if param.param_type_name == "argument"]
    return " ".join(format_argument_hint(param) for param in arguments)


def format_argument_hint(param: click.Argument) -> str:
    name = param.human_readable_name or param.name or ""
    if not name:
        return ""
    normalized = name.replace("_", " ").strip()
    normalized = normalized.replace(" ", "-").upper()
    if param.nargs == -1:
        normalized = f"{normalized}..."
    if not param.required:
        return f"[{normalized}]"
    return f"<{normalized}>"


def primary_long_option(param: "click.Option") -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: "click.Option") -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)
