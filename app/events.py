# app/events.py
from __future__ import annotations
from dataclasses import dataclass

ENTER = "Enter"
BACKSPACE = "Backspace"


@dataclass(frozen=True)
class Input:
    key: str
    alt_pressed: bool = False
    ctrl_pressed: bool = False


@dataclass(frozen=True)
class Command:
    key: str


@dataclass(frozen=True)
class SetText:
    text: str


@dataclass(frozen=True)
class StartTimer:
    pass


@dataclass(frozen=True)
class End:
    pass


@dataclass(frozen=True)
class Redraw:
    """Carries no change of its own; processing it just triggers a render."""


Event = Input | Command | SetText | StartTimer | End | Redraw
