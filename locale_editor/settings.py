"""Persistent editor settings stored in _settings.json."""

import json
import logging
import os
from dataclasses import dataclass, asdict

from .resource_guard import MAX_FILE_BYTES, MAX_TOTAL_BYTES

log = logging.getLogger(__name__)

# Settings file lives next to main.py
SETTINGS_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                             "_settings.json")


def is_log_level(name: str) -> bool:
    """True for names logging knows, e.g. "debug" or "WARNING"."""
    return isinstance(logging.getLevelName(name.upper()), int)


@dataclass
class Settings:
    max_file_bytes: int = MAX_FILE_BYTES
    max_total_bytes: int = MAX_TOTAL_BYTES
    last_open_dir: str = ""
    last_export_dir: str = ""
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: str = SETTINGS_FILE) -> "Settings":
        """Load settings, falling back to defaults for anything missing."""
        settings = cls()
        try:
            with open(path, "r", encoding="utf-8") as f:
                cfg = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, OSError):
            return settings  # No saved settings, use defaults
        if not isinstance(cfg, dict):
            return settings

        for name in ("max_file_bytes", "max_total_bytes"):
            value = cfg.get(name)
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                setattr(settings, name, value)
        for name in ("last_open_dir", "last_export_dir"):
            value = cfg.get(name)
            if isinstance(value, str):
                setattr(settings, name, value)
        level = cfg.get("log_level")
        if isinstance(level, str) and is_log_level(level):
            settings.log_level = level.upper()
        return settings

    def save(self, path: str = SETTINGS_FILE):
        """Persist settings.  Failure is logged, not raised."""
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(self), f, ensure_ascii=False, indent=2)
        except OSError as e:
            log.warning("Could not save settings to %s: %s", path, e)
