"""Loading and defaults for the TOML configuration file."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from . import fsutil

DEFAULT_FOLDER_NAME_CONFIG = ".config/memov2/"
DEFAULT_FOLDER_NAME_BASE = "dailymemo/"
DEFAULT_FOLDER_NAME_TODOS = "todos/"
DEFAULT_FOLDER_NAME_MEMOS = "memos/"
DEFAULT_TODOS_DAYS_TO_SEEK = 10
CONFIG_FILE_NAME = "config.toml"


def _join(*parts: str) -> str:
    """Join path parts, skipping empty ones, and clean the result."""
    kept = [part for part in parts if part]
    if not kept:
        return ""
    return os.path.normpath(os.path.join(*kept))


def _typed(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    if kind is int and isinstance(value, bool):
        raise ValueError(f"invalid type for {key}: expected int")
    if not isinstance(value, kind):
        raise ValueError(f"invalid type for {key}: expected {kind.__name__}")
    return value


@dataclass
class TomlConfig:
    """Directory layout and behaviour settings."""

    base_dir: str = ""
    todos_folder_name: str = ""
    memos_folder_name: str = ""
    todos_days_to_seek: int = 0

    def todos_dir(self) -> str:
        return _join(self.base_dir, self.todos_folder_name)

    def memos_dir(self) -> str:
        return _join(self.base_dir, self.memos_folder_name)

    def to_dict(self) -> dict[str, Any]:
        """Return the mapping stored in the TOML file."""
        return {
            "base_dir": self.base_dir,
            "todos_foldername": self.todos_folder_name,
            "memos_foldername": self.memos_folder_name,
            "todos_daystoseek": self.todos_days_to_seek,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TomlConfig":
        """Build a config from a decoded TOML mapping; missing keys are empty."""
        return cls(
            base_dir=_typed(data, "base_dir", str, ""),
            todos_folder_name=_typed(data, "todos_foldername", str, ""),
            memos_folder_name=_typed(data, "memos_foldername", str, ""),
            todos_days_to_seek=_typed(data, "todos_daystoseek", int, 0),
        )


@dataclass
class TomlConfigOption:
    """Overrides applied on top of the default configuration."""

    base_dir: str = ""
    todos_folder_name: str = ""
    memos_folder_name: str = ""
    todos_days_to_seek: int = 0


def config_dir_path() -> tuple[str, str]:
    """Return the configuration directory and the config file path."""
    home = str(Path.home())
    config_dir = _join(home, DEFAULT_FOLDER_NAME_CONFIG)
    return config_dir, _join(config_dir, CONFIG_FILE_NAME)


def new_default_config() -> TomlConfig:
    config_dir, _ = config_dir_path()
    return TomlConfig(
        base_dir=_join(config_dir, DEFAULT_FOLDER_NAME_BASE),
        todos_folder_name=DEFAULT_FOLDER_NAME_TODOS,
        memos_folder_name=DEFAULT_FOLDER_NAME_MEMOS,
        todos_days_to_seek=DEFAULT_TODOS_DAYS_TO_SEEK,
    )


def new_toml_config(option: TomlConfigOption) -> TomlConfig:
    """Return the default config with the non-empty options applied."""
    config = new_default_config()
    if option.base_dir:
        config.base_dir = option.base_dir
    if option.todos_folder_name:
        config.todos_folder_name = option.todos_folder_name
    if option.memos_folder_name:
        config.memos_folder_name = option.memos_folder_name
    if option.todos_days_to_seek > 0:
        config.todos_days_to_seek = option.todos_days_to_seek
    return config


def load_toml_config() -> TomlConfig:
    """Read the config file, creating it and the data directories if absent."""
    config_dir, path = config_dir_path()
    fsutil.ensure_dir(config_dir)

    if not fsutil.exists(path):
        config = new_default_config()
        with open(path, "wb") as stream:
            tomli_w.dump(config.to_dict(), stream)
        for directory in (config.base_dir, config.todos_dir(), config.memos_dir()):
            fsutil.ensure_dir(directory)
        return config

    with open(path, "rb") as stream:
        try:
            data = tomllib.load(stream)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"failed to decode config file: {exc}") from exc
    return TomlConfig.from_dict(data)