"""
Configuration management for reflag.
Handles user settings stored as JSON plus environment overrides.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv, find_dotenv

from reflag.console import print_warning

# Load .env file if it exists - search from the current directory upwards
_dotenv_path = find_dotenv(usecwd=True)
if _dotenv_path:
    load_dotenv(_dotenv_path)


_TRUE_VALUES = ("1", "true", "yes", "on")

# Environment variable -> (config key, converter)
ENV_OVERRIDES = {
    "REFLAG_EXECUTE": ("execute", lambda v: v.strip().lower() in _TRUE_VALUES),
    "REFLAG_MODE": ("mode", str),
    "REFLAG_SHELL": ("init_shell", str),
}


class Config:
    """Manages reflag configuration and settings."""

    DEFAULT_CONFIG = {
        "execute": False,  # Run the translated command instead of printing it
        "highlight": True,  # Syntax-highlight printed commands on a terminal
        "mode": "",  # Opaque hint handed to every translator
        "init_shell": "bash",
        "init_translators": None,  # None -> translators flagged include_in_init
        "program": "reflag",  # Executable name written into shell aliases
    }

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config system.

        Args:
            config_dir: Override default config directory
        """
        if config_dir:
            self.config_dir = Path(config_dir).expanduser()
        elif os.getenv("REFLAG_CONFIG_DIR"):
            self.config_dir = Path(os.environ["REFLAG_CONFIG_DIR"]).expanduser()
        else:
            self.config_dir = Path.home() / ".reflag"

        self.config_file = self.config_dir / "config.json"

        self.settings = self._load_config()
        self._load_env_vars()

    def _ensure_directories(self):
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or fall back to defaults."""
        config = self.DEFAULT_CONFIG.copy()
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, 'r') as f:
                loaded = json.load(f)
        except json.JSONDecodeError:
            print_warning("[Warning] Config file corrupted, using defaults")
            return config
        if not isinstance(loaded, dict):
            print_warning("[Warning] Config file is not a JSON object, using defaults")
            return config
        # Merge with defaults (in case new keys added)
        config.update(loaded)
        return config

    def _load_env_vars(self):
        """Apply REFLAG_* environment variables on top of the file settings."""
        for var, (key, convert) in ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value is not None and value != "":
                self.settings[key] = convert(value)

    def save(self):
        """Save current configuration to file."""
        self._ensure_directories()
        with open(self.config_file, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a configuration value and save."""
        self.settings[key] = value
        self.save()
