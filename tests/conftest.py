from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cmdex.cli.common import refresh_cli_context
from cmdex.store import AliasStore


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Run every test from an empty directory with no user configuration."""

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CMDEX_CONFIG", raising=False)
    monkeypatch.delenv("CMDEX_DB", raising=False)

    refresh_cli_context()
    yield workdir
    refresh_cli_context()


@pytest.fixture
def workdir(isolate_environment):
    return isolate_environment


@pytest.fixture
def store(tmp_path):
    handle = AliasStore.open(tmp_path / "aliases.db")
    yield handle
    handle.close()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
