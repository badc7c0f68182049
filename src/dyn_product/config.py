"""Configuration management for dyn-product.

Handles saving and loading user preferences for the ``dynprod`` command:
input and output separators and the default combination limit.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w

from .constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_INPUT_SEPARATOR,
    DEFAULT_LIMIT,
    DEFAULT_OUTPUT_SEPARATOR,
)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.dynprod on all platforms)
    """
    return Path.home() / CONFIG_DIR_NAME


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / CONFIG_FILE_NAME


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "input": {
            "separator": DEFAULT_INPUT_SEPARATOR,
        },
        "output": {
            "separator": DEFAULT_OUTPUT_SEPARATOR,
            # 0 = no limit
            "limit": DEFAULT_LIMIT,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use instead of ~/.dynprod/config.toml
        """
        self.config_path = Path(config_path) if config_path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.warning("Error loading config %s: %s", self.config_path, e)
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.warning("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        return self._dirty

    # Input settings
    def get_input_separator(self) -> str:
        return self.data["input"]["separator"]

    def set_input_separator(self, separator: str) -> None:
        """Set the separator used to split inline rows.

        Raises:
            ValueError: If separator is empty
        """
        if not separator:
            raise ValueError("Input separator must not be empty")
        self.data["input"]["separator"] = separator
        self._dirty = True

    # Output settings
    def get_output_separator(self) -> str:
        return self.data["output"]["separator"]

    def set_output_separator(self, separator: str) -> None:
        """Set the string used to join items in text output."""
        self.data["output"]["separator"] = separator
        self._dirty = True

    def get_limit(self) -> int:
        """Get the default combination limit (0 means unlimited).

        Raises:
            ValueError: If the stored limit is not an integer
        """
        limit = self.data["output"].get("limit", DEFAULT_LIMIT)
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"Limit in config must be an integer, got {limit!r}")
        return limit

    def set_limit(self, limit: int) -> None:
        """Set the default combination limit.

        Args:
            limit: Maximum combinations to print, 0 for no limit

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            raise ValueError("Limit must be 0 (unlimited) or a positive number")
        self.data["output"]["limit"] = limit
        self._dirty = True
