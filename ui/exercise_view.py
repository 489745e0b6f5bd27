from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout

from services.keymap import key_name
from services.paper import paper_glyphs, results_text, should_flash_error
from ui.widgets.paper import PaperView


class ExerciseView(QWidget):
    """Shows the paper and the results, and turns key presses into key names."""

    keyTyped = Signal(str, bool, bool)  # key, alt, ctrl

    def __init__(self, parent=None, font_size: int = 22, flash_ms: int = 200):
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)
        self._flash_ms = flash_ms

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 30, 0, 30)
        root.setSpacing(28)

        self.paper = PaperView(self, font_size=font_size)
        root.addWidget(self.paper, stretch=1)

        self.lblResults = QLabel("", self)
        self.lblResults.setObjectName("lblResults")
        self.lblResults.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.lblResults.setStyleSheet("font-family: monospace; font-size: 18px;")
        root.addWidget(self.lblResults)

        self._flash_timer = QTimer(self)
        self._flash_timer.setSingleShot(True)
        self._flash_timer.setInterval(flash_ms)
        self._flash_timer.timeout.connect(lambda: self.paper.set_flashing(False))

    def set_theme(self, theme):
        self.paper.set_theme(theme)

    def render(self, state):
        self.paper.show_glyphs(paper_glyphs(state))
        self.lblResults.setText(results_text(state))
        if should_flash_error(state):
            self.paper.set_flashing(True)
            self._flash_timer.start()

    def focusNextPrevChild(self, next):
        # Tab is a character to type here, not focus traversal
        return False

    def keyPressEvent(self, ev):
        mods = ev.modifiers()
        ctrl = bool(mods & Qt.ControlModifier)
        alt = bool(mods & Qt.AltModifier)
        nk = key_name(ev.key(), ev.text(), ctrl=ctrl)
        if nk is None:
            return super().keyPressEvent(ev)
        ev.accept()
        self.keyTyped.emit(nk, alt, ctrl)
