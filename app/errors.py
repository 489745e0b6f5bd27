# app/errors.py
class TypepaperError(Exception):
    """Base class for host-side errors."""


class SettingsError(TypepaperError):
    pass


class ThemeError(TypepaperError, ValueError):
    pass


class TextLoadError(TypepaperError):
    """A practice text could not be read from disk."""
