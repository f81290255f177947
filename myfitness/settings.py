"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/MyFitness/settings.json

Only window and audio preferences live here; timer and BMR values are
never written to disk.

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "MyFitness"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

# ints that may be null (window position before the first save)
_NULLABLE_INT_FIELDS = frozenset({"window_x", "window_y"})


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 480
    window_height: int = 900
    always_on_top: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Ignoring malformed settings at %s", SETTINGS_PATH)
        return Settings()
    return Settings(**_valid_values(data))


def _valid_values(data: dict) -> dict:
    """Keep known keys whose JSON value has the same type as the default."""
    defaults = Settings()
    valid: dict = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        default = getattr(defaults, f.name)
        if f.name in _NULLABLE_INT_FIELDS:
            ok = value is None or type(value) is int
        else:
            ok = type(value) is type(default)
        if ok:
            valid[f.name] = value
        else:
            logger.warning(
                "Ignoring setting %s=%r, expected %s", f.name, value,
                "int or null" if f.name in _NULLABLE_INT_FIELDS
                else type(default).__name__,
            )
    return valid


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
