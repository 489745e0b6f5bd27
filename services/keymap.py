# services/keymap.py
from __future__ import annotations

from PySide6.QtCore import Qt

from app.events import BACKSPACE, ENTER, Command, Input

_LETTERS = {getattr(Qt, f"Key_{c}"): c.lower() for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}


def key_name(key: int, text: str, ctrl: bool = False) -> str | None:
    """
    Translate a Qt key press into the key name the session understands:
    "Enter", "Backspace", a printable character, or the plain letter of a
    ctrl+letter chord (Qt reports those as control characters).
    """
    if key in (Qt.Key_Return, Qt.Key_Enter):
        return ENTER
    if key == Qt.Key_Backspace:
        return BACKSPACE
    if ctrl and key in _LETTERS:
        return _LETTERS[key]
    if text and len(text) == 1 and (text >= " " or text == "\t") and text != "\x7f":
        return text
    return None


def event_for_key(state, key: str, alt: bool = False, ctrl: bool = False):
    """Finished sessions take commands (r / n); everything else is typing."""
    if state.is_complete:
        return Command(key)
    return Input(key, alt, ctrl)
