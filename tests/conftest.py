"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolrelay.config import RelayConfig
from toolrelay.dispatcher import Dispatcher
from toolrelay.tools.registry import ToolRegistry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's global config and TOOLRELAY_* env vars out of tests."""
    global_dir = tmp_path_factory.mktemp("global-config")
    monkeypatch.setattr("toolrelay.config._GLOBAL_CONFIG_PATH", global_dir / "config.toml")
    for var in ("TOOLRELAY_LIST_FILES_LIMIT", "TOOLRELAY_LOG_LEVEL", "TOOLRELAY_REQUIRE_APPROVAL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """A small source tree with nested directories."""
    (tmp_path / "a.txt").write_text("alpha\n", encoding="utf-8")
    (tmp_path / "b9.txt").write_text("nine\n", encoding="utf-8")
    (tmp_path / "b10.txt").write_text("ten\n", encoding="utf-8")
    deep = tmp_path / "sub" / "deep"
    deep.mkdir(parents=True)
    (tmp_path / "sub" / "c.txt").write_text("charlie\n", encoding="utf-8")
    (deep / "d.txt").write_text("delta\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def dispatcher(tmp_path: Path) -> Dispatcher:
    return Dispatcher(ToolRegistry.default(), RelayConfig(working_dir=tmp_path))
