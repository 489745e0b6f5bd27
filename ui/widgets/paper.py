# ui/widgets/paper.py
from __future__ import annotations
import html
from typing import Iterable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QSizePolicy

from services.paper import Glyph, GlyphKind


def glyphs_to_html(glyphs: Iterable[Glyph], colors: dict) -> str:
    parts: list[str] = []
    for g in glyphs:
        if g.content == "\n":
            parts.append("<br>")
            continue
        txt = html.escape(g.content)
        if g.kind is GlyphKind.TYPED:
            parts.append(f'<span style="color:{colors["typed"]}">{txt}</span>')
        elif g.kind is GlyphKind.ERROR:
            parts.append(f'<span style="color:{colors["error"]}; text-decoration:underline">{txt}</span>')
        elif g.kind is GlyphKind.CURSOR:
            parts.append(f'<span style="color:{colors["background"]}; background:{colors["cursor"]}">{txt}</span>')
        elif g.kind is GlyphKind.CURSOR_ERROR:
            parts.append(f'<span style="color:{colors["background"]}; background:{colors["error"]}">{txt}</span>')
        else:
            parts.append(txt)
    return f'<div style="font-family:monospace; white-space:pre-wrap">{"".join(parts)}</div>'


class PaperView(QLabel):
    """Monospace rendering of the exercise text, coloured by typing progress."""

    def __init__(self, parent=None, font_size: int = 22):
        super().__init__(parent)
        self.setObjectName("paper")
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumWidth(700)
        self.setFocusPolicy(Qt.NoFocus)
        self._font_size = font_size
        self._colors = {
            "background": "#0f1115",
            "typed": "#4b5563",
            "error": "#ef4444",
            "cursor": "#eab308",
        }
        self._apply_style(flashing=False)

    def set_theme(self, theme):
        self._colors = {
            "background": theme.background,
            "typed": theme.typed,
            "error": theme.error,
            "cursor": theme.cursor,
        }
        self._apply_style(flashing=False)

    def show_glyphs(self, glyphs: Iterable[Glyph]):
        self.setText(glyphs_to_html(glyphs, self._colors))

    def set_flashing(self, on: bool):
        self._apply_style(flashing=on)

    def _apply_style(self, flashing: bool):
        border = self._colors["error"] if flashing else "transparent"
        self.setStyleSheet(
            f"QLabel#paper {{ font-size: {self._font_size}px; padding: 18px;"
            f" border: 2px solid {border}; border-radius: 10px; }}"
        )
