from PySide6.QtCore import Qt

from app.events import BACKSPACE, ENTER, Command, Input
from app.state import SessionState
from services.keymap import event_for_key, key_name


def test_enter_and_backspace():
    assert key_name(Qt.Key_Return, "\r") == ENTER
    assert key_name(Qt.Key_Enter, "\r") == ENTER
    assert key_name(Qt.Key_Backspace, "\x08") == BACKSPACE


def test_printable_characters():
    assert key_name(Qt.Key_A, "a") == "a"
    assert key_name(Qt.Key_A, "A") == "A"
    assert key_name(Qt.Key_Space, " ") == " "
    assert key_name(Qt.Key_Tab, "\t") == "\t"


def test_ctrl_letter_gives_plain_letter():
    assert key_name(Qt.Key_W, "\x17", ctrl=True) == "w"


def test_non_text_keys_are_ignored():
    assert key_name(Qt.Key_Shift, "") is None
    assert key_name(Qt.Key_Escape, "\x1b") is None
    assert key_name(Qt.Key_Delete, "\x7f") is None


def test_event_for_key_while_typing():
    state = SessionState("ab")
    assert event_for_key(state, "a") == Input("a", False, False)
    assert event_for_key(state, BACKSPACE, alt=True) == Input(BACKSPACE, True, False)


def test_event_for_key_when_complete():
    state = SessionState("a")
    state.process(Input("a"))
    assert state.is_complete
    assert event_for_key(state, "r") == Command("r")
