#!/usr/bin/env python3
# ABOUTME: Persistent configuration for trlt (API key and model name).
# ABOUTME: Reads and writes a TOML file in the per-user config directory.

import os
import sys
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Optional

import tomli_w
from rich.console import Console

from trlt.errors import (
    ConfigDirectoryError,
    ConfigError,
    ConfigNotFoundError,
    FileAccessError,
)

console = Console(stderr=True)

CONFIG_FILENAME = "trlt.toml"
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass
class Config:
    """API key and model used to authorize and parametrize translations."""

    api_key: str
    model: str = DEFAULT_MODEL


def config_dir() -> Path:
    """Get the per-user configuration directory.

    Uses $XDG_CONFIG_HOME when it is set, otherwise ~/.config.

    Raises:
        ConfigDirectoryError: If the home directory cannot be resolved
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)

    home_dir = os.path.expanduser("~")
    if home_dir == "~":
        raise ConfigDirectoryError("Failed to get config directory")
    return Path(home_dir) / ".config"


def config_path() -> Path:
    """Get the path of the configuration file."""
    return config_dir() / CONFIG_FILENAME


def prompt_for_api_key() -> str:
    """Ask for the API key on standard input.

    Returns:
        The entered key without surrounding whitespace, or "" at end of input
    """
    console.print("Provide the OpenAI API key: ", end="")
    line = sys.stdin.readline()
    return line.strip()


class ConfigStore:
    """Loads and saves the trlt configuration file."""

    def __init__(
        self,
        path: Optional[Path] = None,
        prompt: Callable[[], str] = prompt_for_api_key,
    ):
        """Initialize the store.

        Args:
            path: Explicit config file location; the per-user path when None
            prompt: Called to obtain the API key when none is given to write()
        """
        self._path = Path(path) if path is not None else None
        self.prompt = prompt

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = config_path()
        return self._path

    def write(self, api_key: Optional[str], model: str = DEFAULT_MODEL) -> Config:
        """Persist the API key and model, prompting for the key if needed.

        Args:
            api_key: The OpenAI API key, or None to ask for it
            model: The model name used for translations

        Returns:
            The config that was written

        Raises:
            ConfigError: If the API key or model is empty
            ConfigDirectoryError: If the config directory cannot be determined
            FileAccessError: If the file cannot be written
        """
        if not api_key:
            api_key = self.prompt()
        if not api_key:
            raise ConfigError("An OpenAI API key is required")
        if not model:
            raise ConfigError("A model name is required")

        config = Config(api_key=api_key, model=model)
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(tomli_w.dumps(asdict(config)), encoding="utf-8")
        except OSError as e:
            raise FileAccessError(f"Unable to write config to {path}: {e}") from e

        return config

    def read(self) -> Config:
        """Load the configuration file.

        Raises:
            ConfigNotFoundError: If the file is missing or malformed
            ConfigDirectoryError: If the config directory cannot be determined
        """
        path = self.path
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigNotFoundError(f"{path} does not exist") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigNotFoundError(str(e)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigNotFoundError(f"invalid TOML in {path}: {e}") from e

        for key in ("api_key", "model"):
            value = data.get(key)
            if not isinstance(value, str) or not value:
                raise ConfigNotFoundError(f"missing or empty '{key}' in {path}")

        return Config(api_key=data["api_key"], model=data["model"])
