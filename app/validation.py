# app/validation.py
_SUBSTITUTIONS = {
    "‘": "'",   # left single quote
    "’": "'",   # right single quote
    "“": '"',
    "”": '"',
    "–": "-",   # en dash
    "—": "-",   # em dash
    "…": "...",
}


def sanitize(text: str) -> str:
    """Replace hard to type characters with keyboard friendly alternatives."""
    return "".join(_SUBSTITUTIONS.get(ch, ch) for ch in text or "")


def is_alphanumeric(ch: str | None) -> bool:
    if not ch or len(ch) != 1:
        return False
    return "0" <= ch <= "9" or "A" <= ch <= "Z" or "a" <= ch <= "z"
