from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cmdex.configuration import loader as loader_module
from cmdex.configuration.errors import ConfigurationError
from cmdex.configuration.schema import CmdexConfig, StoreConfig
from cmdex.paths import store_path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_config_file():
    config = loader_module.load_config()

    assert loader_module.locate_config_file() is None
    assert config.store.path == "cmdex.db"
    assert config.store.lock_timeout == 1.0
    assert config.run.split_mode == "fields"


def test_env_config_takes_priority(tmp_path, workdir, monkeypatch):
    env_config = _write(tmp_path / "custom" / "config.toml", "")
    _write(workdir / "cmdex.toml", "")
    monkeypatch.setenv("CMDEX_CONFIG", str(env_config))

    loader_module.locate_config_file.cache_clear()
    assert loader_module.locate_config_file() == env_config.resolve()


def test_env_config_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CMDEX_CONFIG", str(tmp_path / "missing.toml"))

    loader_module.locate_config_file.cache_clear()
    with pytest.raises(ConfigurationError):
        loader_module.locate_config_file()


def test_local_config_preferred_over_xdg(tmp_path, workdir):
    local = _write(workdir / "cmdex.toml", "")
    _write(tmp_path / "xdg" / "cmdex" / "config.toml", "")

    loader_module.locate_config_file.cache_clear()
    assert loader_module.locate_config_file() == local.resolve()


def test_xdg_then_home(tmp_path):
    home_config = _write(tmp_path / "home" / ".config" / "cmdex" / "config.toml", "")

    loader_module.locate_config_file.cache_clear()
    assert loader_module.locate_config_file() == home_config.resolve()

    xdg_config = _write(tmp_path / "xdg" / "cmdex" / "config.toml", "")
    loader_module.locate_config_file.cache_clear()
    assert loader_module.locate_config_file() == xdg_config.resolve()


def test_user_values_merge_over_defaults(workdir):
    _write(workdir / "cmdex.toml", '[store]\npath = "data/aliases.db"\n')

    config = loader_module.reload_config()

    assert config.store.path == "data/aliases.db"
    assert config.store.lock_timeout == 1.0


def test_store_path_env_override(workdir, monkeypatch):
    _write(workdir / "cmdex.toml", '[store]\npath = "from-file.db"\n')
    monkeypatch.setenv("CMDEX_DB", "/var/tmp/from-env.db")

    assert loader_module.reload_config().store.path == "/var/tmp/from-env.db"


@pytest.mark.parametrize(
    "text",
    [
        "[store]\nunknown = true\n",
        "[store]\nlock_timeout = -1\n",
        '[run]\nsplit_mode = "csv"\n',
        '[store]\npath = "  "\n',
    ],
)
def test_invalid_values_rejected(workdir, text):
    _write(workdir / "cmdex.toml", text)

    loader_module.locate_config_file.cache_clear()
    with pytest.raises(ConfigurationError):
        loader_module.load_config()


def test_invalid_toml(workdir):
    _write(workdir / "cmdex.toml", "[store\n")

    loader_module.locate_config_file.cache_clear()
    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        loader_module.load_config()


def test_merge_configs_is_deep_and_non_mutating():
    base = {"store": {"path": "a", "lock_timeout": 1.0}}
    merged = loader_module.merge_configs(base, {"store": {"path": "b"}})

    assert merged == {"store": {"path": "b", "lock_timeout": 1.0}}
    assert base["store"]["path"] == "a"


def test_store_config_bounds():
    StoreConfig(lock_timeout=0)

    with pytest.raises(ValidationError):
        StoreConfig(lock_timeout=-0.5)


def test_store_path_resolution(tmp_path):
    relative = CmdexConfig.from_dict({"store": {"path": "cmdex.db"}})
    absolute = CmdexConfig.from_dict({"store": {"path": str(tmp_path / "x.db")}})

    assert store_path(relative, cwd=tmp_path) == tmp_path / "cmdex.db"
    assert store_path(absolute, cwd=Path("/elsewhere")) == tmp_path / "x.db"
