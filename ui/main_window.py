# ui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QMenu, QFileDialog, QMessageBox, QPlainTextEdit,
    QToolButton, QPushButton
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt, QTimer

from app.events import SetText
from app.settings import Settings
from app.state import SessionState
from app.themes import THEMES, find_theme, load_custom_themes
from app.validation import sanitize
from core.threads import TextLoadWorker, Workers
from services.keymap import event_for_key
from services.paper import INSTRUCTIONS
from ui.exercise_view import ExerciseView

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.settings = settings or Settings()
        self.setWindowTitle("Typepaper")
        self.resize(1100, 720)
        load_custom_themes()
        self.theme_idx = find_theme(self.settings.theme)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)
        root_v.setSpacing(24)
        self._build_top_bar(root_v)

        # --- awaiting text: paste box ---
        self.settingsPanel = QWidget(root)
        sp = QVBoxLayout(self.settingsPanel)
        self.textInput = QPlainTextEdit(self.settingsPanel)
        self.textInput.setObjectName("textInput")
        self.textInput.setPlaceholderText("Paste a text here")
        self.textInput.textChanged.connect(self._on_text_changed)
        self.lblInstructions = QLabel(INSTRUCTIONS, self.settingsPanel)
        self.lblInstructions.setAlignment(Qt.AlignCenter)
        sp.addWidget(self.textInput, 1)
        sp.addWidget(self.lblInstructions)
        root_v.addWidget(self.settingsPanel, 1)

        # --- exercise ---
        self.exercise = ExerciseView(
            root,
            font_size=self.settings.font_size,
            flash_ms=self.settings.error_flash_ms,
        )
        self.exercise.keyTyped.connect(self._on_key)
        root_v.addWidget(self.exercise, 1)

        self.setCentralWidget(root)
        self.menuBar().setVisible(False)
        self._apply_theme(self.theme_idx)

        # The window owns the one session and is its only renderer
        self.state = SessionState("", render=self.render)
        self.render(self.state)

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 16, 14, 16)
        h.setSpacing(10)

        self.theme_menu = QMenu(self)
        self._rebuild_theme_menu()
        theme_btn = QToolButton(bar)
        theme_btn.setText("Theme")
        theme_btn.setObjectName("TopBtn")
        theme_btn.setMenu(self.theme_menu)
        theme_btn.setPopupMode(QToolButton.InstantPopup)
        theme_btn.setFocusPolicy(Qt.NoFocus)
        h.addWidget(theme_btn)

        btn_load = QPushButton("Load text…", bar)
        btn_load.clicked.connect(self._on_load)
        btn_load.setObjectName("TopBtn")
        btn_load.setFocusPolicy(Qt.NoFocus)
        h.addWidget(btn_load)

        h.addStretch(1)
        parent_layout.addWidget(bar)

        self._topbar_qss = """
        QWidget#TopBar {
            background: rgba(255,255,255,0.04);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 14px;
        }
        QPushButton#TopBtn, QToolButton#TopBtn {
            background: transparent;
            border: 1px solid rgba(255,255,255,0.10);
            border-radius: 9px;
            padding: 6px 12px;
        }
        QPushButton#TopBtn:hover, QToolButton#TopBtn:hover {
            border-color: rgba(255,255,255,0.32);
            background: rgba(255,255,255,0.06);
        }
        QToolButton::menu-indicator { image: none; width: 0px; height: 0px; }
        """

    # ---------------- Theme ----------------
    def _rebuild_theme_menu(self):
        self.theme_menu.clear()
        for i, t in enumerate(THEMES):
            act = QAction(t.name, self)
            act.triggered.connect(lambda _, idx=i: self._apply_theme(idx))
            self.theme_menu.addAction(act)

    def _apply_theme(self, idx):
        theme = THEMES[idx]
        self.theme_idx = idx
        self.exercise.set_theme(theme)
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QLabel#lblResults {{ color: {theme.accent}; }}
            QPlainTextEdit#textInput {{ border: 1px solid {theme.secondary}; border-radius: 8px; }}
            {self._topbar_qss}
            """
        )
        if hasattr(self, "state"):
            self.render(self.state)

    # ---------------- Session wiring ----------------
    def render(self, state: SessionState):
        if state.text:
            self.settingsPanel.setVisible(False)
            self.exercise.setVisible(True)
            self.exercise.render(state)
            self.exercise.setFocus()
        else:
            self.exercise.setVisible(False)
            self.settingsPanel.setVisible(True)
            self._render_get_text()

    def _render_get_text(self):
        # clearing the box must not feed a SetText back into the session
        self.textInput.blockSignals(True)
        self.textInput.setPlainText("")
        self.textInput.blockSignals(False)
        self.lblInstructions.setText(INSTRUCTIONS)
        QTimer.singleShot(self.settings.focus_delay_ms, self.textInput.setFocus)

    def _on_key(self, key: str, alt: bool, ctrl: bool):
        self.state.process(event_for_key(self.state, key, alt, ctrl))

    def _on_text_changed(self):
        self.state.process(SetText(sanitize(self.textInput.toPlainText())))

    # ---------------- Text Loading ----------------
    def _on_load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open text", "", "Text (*.txt)")
        if not path:
            return
        worker = TextLoadWorker(path)
        worker.signals.loaded.connect(self._on_loaded_text)
        worker.signals.failed.connect(self._on_load_failed)
        Workers.pool.start(worker)

    def _on_loaded_text(self, data):
        self.state.process(SetText(sanitize(data)))

    def _on_load_failed(self, msg):
        QMessageBox.warning(self, "Load Text", msg)
