"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolrelay.config import RelayConfig, load_config
from toolrelay.exceptions import ConfigError


def _write_project_config(root: Path, body: str) -> None:
    config_dir = root / ".toolrelay"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(body, encoding="utf-8")


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config == RelayConfig(working_dir=tmp_path)
        assert config.list_files_limit == 1000
        assert not config.require_approval

    def test_project_toml(self, tmp_path: Path) -> None:
        _write_project_config(
            tmp_path, 'list_files_limit = 50\nlog_level = "debug"\nrequire_approval = true\n'
        )
        config = load_config(tmp_path)
        assert config.list_files_limit == 50
        assert config.log_level == "DEBUG"
        assert config.require_approval

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project_config(tmp_path, "list_files_limit = 50\n")
        monkeypatch.setenv("TOOLRELAY_LIST_FILES_LIMIT", "7")
        monkeypatch.setenv("TOOLRELAY_REQUIRE_APPROVAL", "yes")
        config = load_config(tmp_path)
        assert config.list_files_limit == 7
        assert config.require_approval

    def test_global_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        global_path = tmp_path / "global.toml"
        global_path.write_text('log_level = "warning"\n', encoding="utf-8")
        monkeypatch.setattr("toolrelay.config._GLOBAL_CONFIG_PATH", global_path)
        assert load_config(tmp_path).log_level == "WARNING"

    def test_invalid_toml_ignored(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "list_files_limit = = 3\n")
        assert load_config(tmp_path).list_files_limit == 1000

    def test_non_integer_limit(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLRELAY_LIST_FILES_LIMIT", "lots")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_non_positive_limit(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "list_files_limit = 0\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)
