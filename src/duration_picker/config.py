"""Configuration helpers for the Duration Picker application."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional


LOGGER = logging.getLogger(__name__)

APP_DIR = Path.home() / ".duration_picker"
CONFIG_FILE = APP_DIR / "config.json"
LOG_FILE_NAME = "duration_picker.log"

DEFAULT_DIALOG_DURATION = 15 * 60 * 1000
DURATION_FIELDS = ("preferred_duration", "dialog_initial_duration")


def _drop_invalid_durations(values: dict) -> dict:
    """Remove duration values that are not non-negative integers (defaults apply)."""

    cleaned = dict(values)
    for name in DURATION_FIELDS:
        if name not in cleaned:
            continue
        value = cleaned[name]
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            LOGGER.warning("Ignoring invalid %s=%r in %s, using default", name, value, CONFIG_FILE)
            del cleaned[name]
    return cleaned


@dataclass
class AppConfig:
    """Persisted configuration."""

    duration_input: str = "000000"
    preferred_duration: int = 0
    dialog_initial_duration: int = DEFAULT_DIALOG_DURATION
    log_path: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from disk, returning defaults when missing."""

        if CONFIG_FILE.exists():
            try:
                data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    allowed = {item.name for item in fields(cls)}
                    filtered = {key: value for key, value in data.items() if key in allowed}
                    return cls(**_drop_invalid_durations(filtered))
                LOGGER.warning("Ignoring %s: expected a JSON object", CONFIG_FILE)
                return cls()
            except (json.JSONDecodeError, TypeError, ValueError):
                # Fall back to defaults if the file is corrupted.
                LOGGER.warning("Config file %s is corrupted, using defaults", CONFIG_FILE)
        return cls()

    def save(self) -> None:
        """Persist configuration to disk."""

        APP_DIR.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(json.dumps(asdict(self), ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Configuration saved to %s", CONFIG_FILE)

    @property
    def log_file(self) -> Path:
        """Where the application writes its diagnostic log."""

        return APP_DIR / LOG_FILE_NAME
