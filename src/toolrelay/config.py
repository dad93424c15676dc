"""Configuration management for toolrelay.

Settings are loaded from three sources in order of priority:
1. Environment variables (highest priority)
2. Project-level config: .toolrelay/config.toml
3. Global config: ~/.config/toolrelay/config.toml (lowest priority)
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console

from toolrelay.exceptions import ConfigError
from toolrelay.tools.formatting import LIST_FILES_LIMIT

console = Console(stderr=True)

_GLOBAL_CONFIG_PATH = Path.home() / ".config" / "toolrelay" / "config.toml"


@dataclass
class RelayConfig:
    """toolrelay configuration.

    Attributes:
        working_dir: Directory every tool path is resolved against.
        list_files_limit: Maximum entries returned by list_files.
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR).
        require_approval: Ask before running commands or writing files.
    """

    working_dir: Path = field(default_factory=Path.cwd)
    list_files_limit: int = LIST_FILES_LIMIT
    log_level: str = "INFO"
    require_approval: bool = False


def load_config(working_dir: Path) -> RelayConfig:
    """Load configuration from env vars, project config, and global config.

    Priority: env vars > .toolrelay/config.toml > ~/.config/toolrelay/config.toml

    Args:
        working_dir: Directory the tools operate in.

    Returns:
        A fully resolved RelayConfig instance.

    Raises:
        ConfigError: If a setting has an invalid value.
    """
    config = RelayConfig(working_dir=working_dir)

    _apply_toml(config, _load_toml(_GLOBAL_CONFIG_PATH))
    _apply_toml(config, _load_toml(working_dir / ".toolrelay" / "config.toml"))
    _apply_env(config)

    if config.list_files_limit < 1:
        raise ConfigError(f"list_files_limit must be positive, got {config.list_files_limit}")
    return config


def _load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file, returning an empty dict if missing or invalid."""
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not parse {path}: {exc}")
        return {}


def _to_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def _apply_toml(config: RelayConfig, settings: dict[str, Any]) -> None:
    """Merge TOML settings into a RelayConfig."""
    if "list_files_limit" in settings:
        config.list_files_limit = _to_int("list_files_limit", settings["list_files_limit"])
    if "log_level" in settings:
        config.log_level = str(settings["log_level"]).upper()
    if "require_approval" in settings:
        config.require_approval = bool(settings["require_approval"])


def _apply_env(config: RelayConfig) -> None:
    """Override config with environment variables where set."""
    if limit := os.environ.get("TOOLRELAY_LIST_FILES_LIMIT"):
        config.list_files_limit = _to_int("TOOLRELAY_LIST_FILES_LIMIT", limit)
    if log_level := os.environ.get("TOOLRELAY_LOG_LEVEL"):
        config.log_level = log_level.upper()
    if approval := os.environ.get("TOOLRELAY_REQUIRE_APPROVAL"):
        config.require_approval = approval.lower() in ("true", "1", "yes")
