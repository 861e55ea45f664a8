"""Resolve an alias into an argv and run it."""

from __future__ import annotations

import shlex
import subprocess
from typing import List, Sequence

from cmdex.errors import CommandParseError, EmptyCommand, SpawnError
from cmdex.store import AliasStore

SPLIT_FIELDS = "fields"
SPLIT_SHELL = "shell"
SPLIT_MODES = (SPLIT_FIELDS, SPLIT_SHELL)


def placeholder(index: int) -> str:
    return f"${index}"


def substitute(template: str, args: Sequence[str]) -> str:
    """Replace ``$1``, ``$2``, ... in ``template`` with the matching argument.

    Replacement is literal and runs in ascending index order, so a value that
    contains a later placeholder is substituted again, and ``$1`` also matches
    the start of ``$10``. Placeholders without an argument are left as is.
    """
    command = template
    for index, arg in enumerate(args, start=1):
        command = command.replace(placeholder(index), arg)
    return command


def tokenize(command: str, mode: str = SPLIT_FIELDS) -> List[str]:
    """Split ``command`` into words.

    ``fields`` splits on whitespace runs and knows nothing about quotes;
    ``shell`` uses POSIX shell quoting rules.
    """
    if mode == SPLIT_FIELDS:
        return command.split()
    if mode == SPLIT_SHELL:
        try:
            return shlex.split(command)
        except ValueError as exc:
            raise CommandParseError(f"cannot parse command: {exc}") from exc
    raise ValueError(f"unknown split mode: {mode!r}")


def resolve(
    store: AliasStore,
    alias: str,
    args: Sequence[str] = (),
    *,
    mode: str = SPLIT_FIELDS,
) -> List[str]:
    """Look up ``alias`` and return the argv it expands to."""
    template = store.get(alias)
    argv = tokenize(substitute(template, args), mode)
    if not argv:
        raise EmptyCommand(alias)
    return argv


def execute(argv: Sequence[str]) -> int:
    """Run ``argv`` attached to this process's stdout/stderr and wait for it."""
    if not argv:
        raise EmptyCommand()
    try:
        subprocess.run(list(argv), check=True)
    except FileNotFoundError as exc:
        raise SpawnError(f"executable file not found: {argv[0]}") from exc
    except subprocess.CalledProcessError as exc:
        raise SpawnError(
            _describe_exit(exc.returncode), returncode=exc.returncode
        ) from exc
    except OSError as exc:
        raise SpawnError(f"cannot start {argv[0]}: {exc.strerror or exc}") from exc
    return 0


def run_alias(
    store: AliasStore,
    alias: str,
    args: Sequence[str] = (),
    *,
    mode: str = SPLIT_FIELDS,
) -> int:
    return execute(resolve(store, alias, args, mode=mode))


def _describe_exit(returncode: int) -> str:
    if returncode < 0:
        return f"terminated by signal {-returncode}"
    return f"exit status {returncode}"
