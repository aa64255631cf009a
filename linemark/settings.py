"""User settings loaded from the platform config directory.

Settings live in a JSON object in ``settings.json`` under the user's
config directory. Every key is optional; anything missing or invalid
falls back to the built-in default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "linemark"


@dataclass
class EditorSettings:
    max_lines: int = EditorConstants.MAX_LINES
    system_clipboard: bool = False


class SettingsStore:
    """Reads editor settings from a JSON file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir) if config_dir else Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_file = self._config_dir / "settings.json"

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    @staticmethod
    def validate_setting(key: str, value: Any) -> bool:
        """Check a single setting value against its expected type and range."""
        if key == 'max_lines':
            # bool is an int subclass; reject it explicitly
            return isinstance(value, int) and not isinstance(value, bool) and value >= 2
        if key == 'system_clipboard':
            return isinstance(value, bool)
        return False

    def load(self) -> EditorSettings:
        """Return the effective settings, defaults filled in."""
        settings = EditorSettings()
        for key, value in self._read_raw().items():
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
                continue
            setattr(settings, key, value)
        return settings
