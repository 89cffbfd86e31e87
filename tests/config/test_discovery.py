"""Tests for casework.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from casework.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        cfg = tmp_path / "casework.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg

    def test_walks_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        cfg = tmp_path / "casework.toml"
        cfg.write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == cfg

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_cfg = tmp_path / "elsewhere.toml"
        env_cfg.write_text("")
        (tmp_path / "casework.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_cfg))
        assert find_config(tmp_path) == env_cfg

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
