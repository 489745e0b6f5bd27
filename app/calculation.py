from __future__ import annotations
import math

CHARS_PER_WORD = 5.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int | None:
    if whole <= 0:
        return None
    return round_half_up(100.0 * part / whole)


def standard_wpm(chars: int, seconds: float | None) -> int | None:
    """
    WPM = (chars / 5) / (seconds / 60), rounded.
    Returns None when there is no positive duration to divide by.
    """
    if seconds is None or seconds <= 0:
        return None
    return round_half_up((chars / CHARS_PER_WORD) / (seconds / 60.0))
