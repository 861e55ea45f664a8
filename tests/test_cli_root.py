from __future__ import annotations

from cmdex.cli import app
from cmdex.store import AliasStore


def test_version_flag(runner):
    """--version flag displays version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "cmdex" in result.stdout


def test_help_flag(runner, workdir):
    """--help flag displays rich help without touching the store."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Commands" in result.stdout
    assert "save" in result.stdout
    assert not (workdir / "cmdex.db").exists()


def test_no_arguments_shows_help(runner):
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "Examples" in result.stdout


def test_subcommand_help(runner):
    result = runner.invoke(app, ["save", "--help"])
    assert result.exit_code == 0
    assert "Save a command set with an alias" in result.stdout


def test_store_created_in_working_directory(runner, workdir):
    result = runner.invoke(app, ["save", "g", "git", "status"])
    assert result.exit_code == 0

    assert (workdir / "cmdex.db").exists()
    listed = runner.invoke(app, ["list"])
    assert "g: git status" in listed.stdout.splitlines()


def test_store_path_env_override(runner, tmp_path, monkeypatch):
    target = tmp_path / "elsewhere" / "aliases.db"
    monkeypatch.setenv("CMDEX_DB", str(target))

    result = runner.invoke(app, ["save", "g", "git", "status"])

    assert result.exit_code == 0
    with AliasStore.open(target) as store:
        assert store.get("g") == "git status"


def test_store_open_failure_is_fatal(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("CMDEX_DB", str(tmp_path))

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "cannot open store" in result.stdout


def test_locked_store_is_fatal(runner, workdir):
    (workdir / "cmdex.toml").write_text("[store]\nlock_timeout = 0.05\n", encoding="utf-8")
    holder = AliasStore.open(workdir / "cmdex.db")
    try:
        result = runner.invoke(app, ["list"])
    finally:
        holder.close()

    assert result.exit_code == 1


def test_invalid_configuration_is_fatal(runner, workdir):
    (workdir / "cmdex.toml").write_text("[store]\nunknown = 1\n", encoding="utf-8")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_subcommand_help_does_not_create_store(runner, workdir):
    for command in ("save", "list", "edit", "run"):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    assert not (workdir / "cmdex.db").exists()


def test_usage_error_does_not_create_store(runner, workdir):
    result = runner.invoke(app, ["save", "g"])

    assert result.exit_code == 2
    assert not (workdir / "cmdex.db").exists()


def test_store_closed_after_command(runner, workdir):
    runner.invoke(app, ["save", "g", "git", "status"])

    with AliasStore.open(workdir / "cmdex.db", lock_timeout=0.05) as store:
        assert store.get("g") == "git status"
