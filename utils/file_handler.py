from pathlib import Path

from app.errors import TextLoadError


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_text_file(path) -> str:
    """Read a practice text, normalising line endings and trailing blank lines."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TextLoadError(f"Could not read {path}: {e}") from e
    return normalize_newlines(text).rstrip("\n")
