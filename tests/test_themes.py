import json

import pytest

from app import themes
from app.errors import ThemeError
from app.themes import BUILTIN_THEMES, THEMES, find_theme, load_custom_themes, theme_from_dict


@pytest.fixture(autouse=True)
def restore_themes():
    yield
    THEMES[:] = BUILTIN_THEMES


def test_theme_from_dict_defaults_paper_colors():
    t = theme_from_dict({
        "name": "Mono", "background": "#000", "primary": "#fff",
        "secondary": "#888", "accent": "#0f0",
    })
    assert t.name == "Mono"
    assert t.error == "#ef4444"


def test_theme_from_dict_missing_keys():
    with pytest.raises(ThemeError):
        theme_from_dict({"name": "Broken"})
    with pytest.raises(ValueError):
        theme_from_dict({})


def test_find_theme():
    assert find_theme("nord") == 2
    assert find_theme("does not exist") == themes.DEFAULT_THEME_INDEX


def test_load_custom_themes(tmp_path):
    p = tmp_path / "themes.json"
    p.write_text(json.dumps([
        {"name": "Mono", "background": "#000", "primary": "#fff",
         "secondary": "#888", "accent": "#0f0", "cursor": "#f0f"},
        {"name": "Broken"},
    ]), encoding="utf-8")
    assert load_custom_themes(p) == 1
    idx = find_theme("Mono")
    assert THEMES[idx].cursor == "#f0f"


def test_load_custom_themes_missing_or_bad(tmp_path):
    assert load_custom_themes(tmp_path / "nope.json") == 0
    p = tmp_path / "themes.json"
    p.write_text("{oops", encoding="utf-8")
    assert load_custom_themes(p) == 0
    assert len(THEMES) == len(BUILTIN_THEMES)
