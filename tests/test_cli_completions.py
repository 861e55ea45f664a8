from __future__ import annotations

from cmdex.cli.completions import alias_name_completion
from cmdex.store import AliasStore


def _values(items):
    return [item.value for item in items]


def test_alias_completion_filters_saved_aliases(workdir):
    with AliasStore.open(workdir / "cmdex.db") as store:
        store.put("gs", "git status")
        store.put("gl", "git log")
        store.put("ls", "ls -la")

    assert _values(alias_name_completion(None, None, "g")) == ["gl", "gs"]
    assert _values(alias_name_completion(None, None, "")) == ["gl", "gs", "ls"]


def test_alias_completion_without_store(workdir):
    assert alias_name_completion(None, None, "g") == []
    assert not (workdir / "cmdex.db").exists()


def test_alias_completion_with_locked_store(workdir):
    holder = AliasStore.open(workdir / "cmdex.db")
    try:
        assert alias_name_completion(None, None, "") == []
    finally:
        holder.close()


def test_alias_completion_is_case_sensitive(workdir):
    with AliasStore.open(workdir / "cmdex.db") as store:
        store.put("gs", "git status")
        store.put("Gradle", "./gradlew build")

    assert _values(alias_name_completion(None, None, "g")) == ["gs"]
    assert _values(alias_name_completion(None, None, "G")) == ["Gradle"]
