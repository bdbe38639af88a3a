"""CookbookConfig: optional project-local config.

Without a cookbook.toml the defaults reproduce the classic behaviour:
recipes live in receipts.txt in the working directory, logging at INFO.

cookbook.toml example:

    [cookbook]
    name = "Diego's Cookbook"   # banner shown by the menu
    file = "receipts.txt"       # relative to the directory holding cookbook.toml

    [log]
    level = "INFO"              # DEBUG | INFO | WARNING | ERROR
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_CONFIG_FILENAME = "cookbook.toml"
_DEFAULT_FILE = "receipts.txt"
_DEFAULT_NAME = "Diego's Cookbook"
_DEFAULT_LEVEL = "INFO"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
_LEVEL_ALIASES = {"WARN": "WARNING"}


class ConfigError(Exception):
    """cookbook.toml is unreadable or holds an invalid value."""


def normalize_level(level: str) -> str:
    """Upper-case a level name and map WARN to WARNING. Raises ConfigError."""
    name = _LEVEL_ALIASES.get(level.upper(), level.upper())
    if name not in LOG_LEVELS:
        msg = f"Unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})"
        raise ConfigError(msg)
    return name


@dataclass
class LogConfig:
    level: str = _DEFAULT_LEVEL


@dataclass
class CookbookConfig:
    """Resolved configuration for a cookbook."""

    root: Path                      # directory that contains cookbook.toml (or cwd)
    name: str = _DEFAULT_NAME
    file: Path = field(default_factory=lambda: Path(_DEFAULT_FILE))
    log: LogConfig = field(default_factory=LogConfig)

    @property
    def config_path(self) -> Path:
        return self.root / _CONFIG_FILENAME


def load_config(root: Path | str | None = None) -> CookbookConfig:
    """Load cookbook.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        try:
            with config_path.open("rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid {config_path}: {exc}"
            raise ConfigError(msg) from exc

    book_section = raw.get("cookbook", {})
    log_section = raw.get("log", {})

    return CookbookConfig(
        root=root_path,
        name=str(book_section.get("name", _DEFAULT_NAME)),
        file=root_path / str(book_section.get("file", _DEFAULT_FILE)),
        log=LogConfig(level=normalize_level(str(log_section.get("level", _DEFAULT_LEVEL)))),
    )


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for cookbook.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start


def init_config(root: Path, name: str | None = None) -> Path:
    """Write a default cookbook.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"cookbook.toml already exists at {config_path}"
        raise FileExistsError(msg)

    book_name = (name or _DEFAULT_NAME).replace('"', "'")
    content = f"""\
[cookbook]
name = "{book_name}"
# file = "receipts.txt"   # default, relative to this file

# [log]
# level = "INFO"          # DEBUG | INFO | WARNING | ERROR
"""
    config_path.write_text(content)
    return config_path
