# services/paper.py
from __future__ import annotations
from enum import Enum
from typing import List, NamedTuple

INSTRUCTIONS = "[paste a text in to the box above]"
NEWLINE_MARK = "¬"
SPACE_MARK = "·"


class GlyphKind(Enum):
    PLAIN = "plain"
    TYPED = "typed"
    ERROR = "error"
    CURSOR = "cursor"
    CURSOR_ERROR = "cursor-error"


class Glyph(NamedTuple):
    content: str
    kind: GlyphKind = GlyphKind.PLAIN


def _typed_glyphs(typed: str, expected: str) -> List[Glyph]:
    if typed == expected:
        return [Glyph(typed, GlyphKind.TYPED)]
    if typed == "\n":
        return [Glyph(NEWLINE_MARK, GlyphKind.ERROR), Glyph("\n", GlyphKind.ERROR)]
    if typed.strip() == "":
        return [Glyph(SPACE_MARK, GlyphKind.ERROR)]
    return [Glyph(typed, GlyphKind.ERROR)]


def paper_glyphs(state) -> List[Glyph]:
    """
    Lay the target text out as glyphs: typed characters first (marked good
    or bad), then the cursor, then the untyped remainder.
    Wrongly typed newlines and blanks get a visible marker so they show up.
    """
    cursor_kind = GlyphKind.CURSOR_ERROR if state.has_errors else GlyphKind.CURSOR
    out: List[Glyph] = []
    for i, ch in enumerate(state.text):
        if i < state.cursor:
            out.extend(_typed_glyphs(state.input[i], ch))
        elif i == state.cursor and ch == "\n":
            out.append(Glyph(NEWLINE_MARK, cursor_kind))
            out.append(Glyph("\n"))
        elif i == state.cursor:
            out.append(Glyph(ch, cursor_kind))
        else:
            out.append(Glyph(ch))
    if should_flash_error(state):
        out.append(Glyph(" ", GlyphKind.CURSOR_ERROR))
    return out


def should_flash_error(state) -> bool:
    return bool(state.text) and state.is_at_end and state.has_errors


def results_text(state) -> str:
    if not state.is_complete:
        return ""
    return (
        f"Accuracy: {state.accuracy}%\n"
        f"   Speed: {state.wpm}wpm\n\n"
        "[hit r to retry, or n for a new text]"
    )
