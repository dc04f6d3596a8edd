"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from models.diff import DiffMode, DiffOptions


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1. Environment variable
            config_dir = os.environ.get("TEXT_DIFF_CONFIG_DIR")

            # 2. Home directory ~/.text_diff
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.text_diff")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # 3. Temp directory when nothing above is writable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "text_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "text_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access reloads from disk"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return self._default_config()

        if not isinstance(loaded, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return self._default_config()

        # Fill sections missing from older config files
        config = self._default_config()
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {
                "similarityThreshold": 0.6,
                "inlineGranularity": "words",
                "maxInlineUnitLength": 1000,
                "defaultMode": "lines",
            },
            "language": {"default": "plaintext"},
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        # Ensure config directory exists
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        # Write to file
        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_diff_options(self) -> DiffOptions:
        """Build reconciliation options from the stored diff settings"""
        diff_config = self.get_config().get("diff", {})
        defaults = DiffOptions()
        try:
            return DiffOptions(
                similarity_threshold=diff_config.get(
                    "similarityThreshold", defaults.similarity_threshold
                ),
                inline_granularity=diff_config.get(
                    "inlineGranularity", defaults.inline_granularity
                ),
                max_inline_unit_length=diff_config.get(
                    "maxInlineUnitLength", defaults.max_inline_unit_length
                ),
            )
        except ValidationError as e:
            print(f"[ConfigManager] Invalid diff settings, using defaults: {e}")
            return defaults

    def get_default_mode(self) -> DiffMode:
        """Segmentation mode used when a request does not name one"""
        value = self.get_config().get("diff", {}).get("defaultMode", DiffMode.LINES.value)
        try:
            return DiffMode(value)
        except ValueError:
            print(f"[ConfigManager] Unknown default mode {value!r}, using lines")
            return DiffMode.LINES
