"""Shell completion helpers for the cmdex CLI."""

from __future__ import annotations

from typing import Iterable, List

import click
import typer
from click.shell_completion import CompletionItem

from cmdex.configuration import ConfigurationError, get_config
from cmdex.errors import StorageError
from cmdex.paths import store_path
from cmdex.store import AliasStore

CompletionList = List[CompletionItem]


def alias_name_completion(
    ctx: typer.Context | None,  # noqa: ARG001 - required by Click shell completion
    param: click.Parameter | None,  # noqa: ARG001
    incomplete: str,
) -> CompletionList:
    """Return saved alias names filtered by the user's partial input."""

    matches = _match_candidates(_saved_aliases(), incomplete)
    return _as_completion_items(matches)


def _saved_aliases() -> List[str]:
    try:
        config = get_config()
        path = store_path(config)
        if not path.exists():
            return []
        with AliasStore.open(path, lock_timeout=0) as store:
            return store.aliases()
    except (ConfigurationError, StorageError):
        return []


def _match_candidates(candidates: Iterable[str], needle: str) -> List[str]:
    term = needle or ""
    return [candidate for candidate in candidates if candidate.startswith(term)]


def _as_completion_items(matches: List[str]) -> CompletionList:
    return [CompletionItem(match) for match in matches]


__all__ = ["alias_name_completion"]
