"""
Configuration management for shellbridge.
Handles user settings and their persistence in ~/.shellbridge/config.json.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv, find_dotenv

# Load .env file if it exists, searching upwards from the working directory
dotenv_path = find_dotenv(usecwd=True)
if dotenv_path:
    load_dotenv(dotenv_path, override=False)


logger = logging.getLogger(__name__)

TO_POWERSHELL = "to-powershell"
TO_BASH = "to-bash"
DIRECTIONS = (TO_POWERSHELL, TO_BASH)

TRUE_VALUES = ("1", "true", "yes", "on")


class Config:
    """Manages shellbridge configuration and settings."""

    DEFAULT_CONFIG = {
        "direction": TO_POWERSHELL,
        "reverse_respect_quotes": False,  # Quote-aware reverse pass
        "color": True,  # Highlight translations on a terminal
        "log_level": "WARNING",
        "history_size": 1000,  # Lines kept in the session history file
    }

    # Environment variables that override the file
    ENV_OVERRIDES = {
        "SHELLBRIDGE_DIRECTION": "direction",
        "SHELLBRIDGE_LOG_LEVEL": "log_level",
        "SHELLBRIDGE_COLOR": "color",
    }

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config system.

        Args:
            config_dir: Override default config directory
        """
        if config_dir:
            self.config_dir = Path(config_dir).expanduser()
        else:
            self.config_dir = Path.home() / ".shellbridge"

        self.config_file = self.config_dir / "config.json"
        self.history_file = self.config_dir / "history.txt"

        self.settings = self._load_config()
        self._load_env_vars()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or fall back to defaults."""
        config = self.DEFAULT_CONFIG.copy()
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Config file %s corrupted, using defaults", self.config_file)
            return config
        if not isinstance(loaded, dict):
            logger.warning("Config file %s is not a JSON object, using defaults", self.config_file)
            return config
        # Merge with defaults (in case new keys added)
        config.update(loaded)
        return config

    def _load_env_vars(self):
        """Apply SHELLBRIDGE_* environment overrides (never saved)."""
        self._env_keys = set()
        for env_name, key in self.ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None:
                continue
            if key == "color":
                self.settings[key] = value.strip().lower() in TRUE_VALUES
            else:
                self.settings[key] = value.strip()
            self._env_keys.add(key)

    def save(self):
        """Save current configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        settings_to_save = self.settings.copy()
        # Environment overrides stay in the environment
        for key in self._env_keys:
            settings_to_save.pop(key, None)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(settings_to_save, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a configuration value and save."""
        self.settings[key] = value
        self._env_keys.discard(key)
        self.save()

    def direction(self) -> str:
        """Return the configured translation direction."""
        value = str(self.settings.get("direction", TO_POWERSHELL)).lower()
        if value not in DIRECTIONS:
            raise ValueError(
                f"Unknown direction: {value}. "
                f"Supported: {', '.join(repr(d) for d in DIRECTIONS)}"
            )
        return value

    def log_level(self) -> int:
        """Return the configured log level as a logging constant."""
        level = logging.getLevelName(str(self.settings.get("log_level", "WARNING")).upper())
        return level if isinstance(level, int) else logging.WARNING

    def history_size(self) -> int:
        """Return the number of session history lines to keep."""
        value = self.settings.get("history_size", 1000)
        try:
            size = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"history_size must be an integer, got {value!r}")
        if size < 1:
            raise ValueError(f"history_size must be at least 1, got {size}")
        return size
