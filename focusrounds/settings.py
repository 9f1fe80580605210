"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/FocusRounds/settings.json

Only preferences live here.  A running session is never written to disk.

Usage::

    settings = load_settings()
    settings.focus_minutes = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.config import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_ROUNDS,
    coerce_positive_int,
)

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "FocusRounds"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    rounds: int = DEFAULT_ROUNDS

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True

    # ── window ────────────────────────────────────────────────────────
    hide_window_on_start: bool = True
    window_x: int | None = None
    window_y: int | None = None

    def normalize(self) -> None:
        """Repair values from a hand-edited file.

        Timer fields are coerced back into range.  Flags that are not real
        booleans revert to their defaults, and a window position is kept
        only when both coordinates are plain integers.
        """
        self.focus_minutes = coerce_positive_int(
            self.focus_minutes, DEFAULT_FOCUS_MINUTES,
        )
        self.break_minutes = coerce_positive_int(
            self.break_minutes, DEFAULT_BREAK_MINUTES,
        )
        self.rounds = coerce_positive_int(self.rounds, DEFAULT_ROUNDS)

        if not isinstance(self.notifications_enabled, bool):
            self.notifications_enabled = True
        if not isinstance(self.hide_window_on_start, bool):
            self.hide_window_on_start = True

        if not (_is_plain_int(self.window_x) and _is_plain_int(self.window_y)):
            self.window_x = None
            self.window_y = None


def _is_plain_int(value: object) -> bool:
    # bool is an int subclass; JSON true/false is not a coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            settings = Settings(**filtered)
            settings.normalize()
            return settings
    except Exception:
        logger.warning("Could not read %s, using defaults", SETTINGS_PATH)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
