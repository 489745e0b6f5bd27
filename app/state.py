from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List
import logging
import time

from app.calculation import percentage, standard_wpm
from app.events import (
    BACKSPACE, ENTER, Command, End, Event, Input, Redraw, SetText, StartTimer,
)
from app.timer import SessionTimer
from app.validation import is_alphanumeric

log = logging.getLogger(__name__)

RenderHook = Callable[["SessionState"], None]


@dataclass
class AccuracyTracker:
    good_strokes: int = 0
    total_strokes: int = 0

    def update(self, good: bool):
        if good:
            self.good_strokes += 1
        self.total_strokes += 1

    @property
    def accuracy(self) -> int | None:
        return percentage(self.good_strokes, self.total_strokes)


class SessionMode(Enum):
    AWAITING_TEXT = "awaiting_text"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


ACCEPTED_EVENTS: Dict[SessionMode, frozenset] = {
    SessionMode.AWAITING_TEXT: frozenset({SetText, Command, Redraw}),
    SessionMode.IN_PROGRESS: frozenset({SetText, Input, Command, StartTimer, End, Redraw}),
    SessionMode.COMPLETED: frozenset({SetText, Command, Redraw}),
}


class SessionState:
    """
    One typing exercise. Feed it events through process(); it updates
    itself, calls the render hook after every event, and drains any
    follow-up events it produced before returning.
    """

    def __init__(self, text: str = "", render: RenderHook | None = None,
                 clock: Callable[[], float] = time.time):
        self.render = render or (lambda state: None)
        self.clock = clock
        self._handlers = {
            Input: lambda e: self.process_input(e.key, e.alt_pressed, e.ctrl_pressed),
            Command: lambda e: self.process_command(e.key),
            SetText: lambda e: self.process_set_text(e.text),
            StartTimer: lambda e: self.process_start_timer(),
            End: lambda e: self.process_end(),
            Redraw: lambda e: [],
        }
        self.reset(text)

    def reset(self, text: str):
        self.text = text or ""
        self.input = ""
        self.cursor = 0
        self.is_complete = False
        self.timer = SessionTimer()
        self.accuracy_tracker = AccuracyTracker()

    # ---------------- derived ----------------
    @property
    def mode(self) -> SessionMode:
        if self.is_complete:
            return SessionMode.COMPLETED
        if not self.text:
            return SessionMode.AWAITING_TEXT
        return SessionMode.IN_PROGRESS

    @property
    def has_errors(self) -> bool:
        return not self.text.startswith(self.input)

    @property
    def is_at_start(self) -> bool:
        return self.cursor == 0

    @property
    def is_at_end(self) -> bool:
        return self.cursor == len(self.text)

    @property
    def accuracy(self) -> int | None:
        return self.accuracy_tracker.accuracy

    @property
    def wpm(self) -> int | None:
        return standard_wpm(len(self.text), self.timer.elapsed)

    # ---------------- editing primitives ----------------
    def backspace(self):
        # callers check is_at_start first
        self.input = self.input[:-1]
        self.cursor -= 1

    def word_backspace(self):
        if self.is_at_start:
            return
        self.backspace()
        while not self.is_at_start and is_alphanumeric(self.input[self.cursor - 1]):
            self.backspace()

    def next_line(self):
        """Skip the indentation of the line we just moved on to."""
        while not self.is_at_end and self.text[self.cursor] == " ":
            self.input += self.text[self.cursor]
            self.cursor += 1

    def _type(self, ch: str):
        self.input += ch
        self.accuracy_tracker.update(ch == self.text[self.cursor])
        self.cursor += 1

    # ---------------- handlers ----------------
    def process_input(self, key: str, alt_pressed: bool = False, ctrl_pressed: bool = False) -> List[Event]:
        events: List[Event] = []
        if key == "w" and ctrl_pressed:
            self.word_backspace()
        elif len(key) == 1 and not self.is_at_end:
            self._type(key)
        elif key == ENTER and not self.is_at_end:
            self._type("\n")
            self.next_line()
        elif key == BACKSPACE and alt_pressed and not self.is_at_start:
            self.word_backspace()
        elif key == BACKSPACE and not self.is_at_start:
            self.backspace()

        if not self.timer.running and not self.is_at_start:
            events.append(StartTimer())
        if self.is_at_end:
            events.append(End())
        return events

    def process_start_timer(self) -> List[Event]:
        self.timer.begin(self.clock())
        return []

    def process_end(self) -> List[Event]:
        if self.text and self.input == self.text:
            self.is_complete = True
            self.timer.finish(self.clock())
            log.info("Session complete: %s wpm, %s%% accuracy", self.wpm, self.accuracy)
        return []

    def process_command(self, key: str) -> List[Event]:
        if key == "r":
            self.reset(self.text)
            return [Redraw()]
        if key == "n":
            self.reset("")
            return [Redraw()]
        return []

    def process_set_text(self, text: str) -> List[Event]:
        self.reset(text)
        return []

    # ---------------- dispatch ----------------
    def accepts(self, event: Event) -> bool:
        return type(event) in ACCEPTED_EVENTS[self.mode]

    def process(self, event: Event):
        queue = deque([event])
        while queue:
            current = queue.popleft()
            if not self.accepts(current):
                log.debug("Dropped %r in mode %s", current, self.mode.value)
                continue
            log.debug("Processing %r", current)
            follow_up = self._handlers[type(current)](current)
            self.render(self)
            queue.extend(follow_up)
