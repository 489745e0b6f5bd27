# app/themes.py
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Any, List
import json
import logging

from app.errors import ThemeError

log = logging.getLogger(__name__)


@dataclass
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    typed: str = "#6b7280"
    error: str = "#ef4444"
    cursor: str = "#eab308"


# -------- Built-in themes --------
BUILTIN_THEMES: List[Theme] = [
    Theme(
        name="Paper Dark",
        background="#0f1115",
        primary="#e5e7eb",
        secondary="#6b7280",
        accent="#eab308",
        typed="#4b5563",
        error="#ef4444",
        cursor="#eab308",
    ),
    Theme(
        name="Paper Light",
        background="#fafafa",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#ca8a04",
        typed="#a3a3a3",
        error="#dc2626",
        cursor="#ca8a04",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        primary="#eceff4",
        secondary="#88c0d0",
        accent="#bf616a",
        typed="#4c566a",
        error="#bf616a",
        cursor="#ebcb8b",
    ),
]

THEMES: List[Theme] = list(BUILTIN_THEMES)
DEFAULT_THEME_INDEX = 0
_CUSTOM_FILE = Path("themes.json")


# -------- helpers --------
def theme_from_dict(d: Dict[str, Any]) -> Theme:
    required = {"name", "background", "primary", "secondary", "accent"}
    missing = required - set(d.keys())
    if missing:
        raise ThemeError(f"Missing theme keys: {', '.join(sorted(missing))}")
    allowed = {f.name for f in fields(Theme)}
    return Theme(**{k: str(v) for k, v in d.items() if k in allowed})


# -------- public API used by UI --------
def load_custom_themes(path: Path | str = _CUSTOM_FILE) -> int:
    """Append extra themes from themes.json (if present). Returns how many were added."""
    p = Path(path)
    if not p.exists():
        return 0
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable theme file %s: %s", p, e)
        return 0
    if not isinstance(data, list):
        log.warning("Theme file %s must hold a list of themes", p)
        return 0
    added = 0
    for item in data:
        try:
            theme = theme_from_dict(item)
        except (ThemeError, AttributeError) as e:
            log.warning("Skipping custom theme: %s", e)
            continue
        THEMES.append(theme)
        added += 1
    return added


def find_theme(name: str) -> int:
    """Index of the theme called `name`, or the default index."""
    for i, t in enumerate(THEMES):
        if t.name.lower() == (name or "").lower():
            return i
    return DEFAULT_THEME_INDEX
