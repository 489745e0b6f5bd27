# app/settings.py
from __future__ import annotations
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict
import json
import logging

from app.errors import SettingsError

log = logging.getLogger(__name__)

SETTINGS_FILE = Path("settings.json")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    theme: str = "Paper Dark"
    font_size: int = 22
    error_flash_ms: int = 200
    focus_delay_ms: int = 100
    log_file: str = "app.log"
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def settings_from_dict(d: Dict[str, Any]) -> Settings:
    known = {f.name: f for f in fields(Settings)}
    unknown = set(d) - set(known)
    if unknown:
        log.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))

    values: Dict[str, Any] = {}
    for name, f in known.items():
        if name not in d:
            continue
        value = d[name]
        expected = type(getattr(Settings(), name))
        if expected is int:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise SettingsError(f"{name} must be a non-negative integer, got {value!r}")
        elif not isinstance(value, expected):
            raise SettingsError(f"{name} must be {expected.__name__}, got {value!r}")
        values[name] = value

    level = str(values.get("log_level", "INFO")).upper()
    if level not in _LOG_LEVELS:
        raise SettingsError(f"Unknown log level: {level}")
    values["log_level"] = level
    return Settings(**values)


def load_settings(path: Path | str = SETTINGS_FILE) -> Settings:
    """Load settings.json (if present); fall back to defaults on any problem."""
    p = Path(path)
    if not p.exists():
        return Settings()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise SettingsError("settings file must hold a JSON object")
        return settings_from_dict(data)
    except (OSError, ValueError, SettingsError) as e:
        log.warning("Failed to load settings from %s, using defaults: %s", p, e)
        return Settings()
