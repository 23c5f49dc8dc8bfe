"""Exception types raised by the autoloader.

Not finding a source unit is a normal outcome and is reported as ``None``;
the exceptions here cover caller misuse and broken source units.
"""


class AutoloadError(Exception):
    """Base class for autoloader errors."""


class RegistrationError(AutoloadError, ValueError):
    """Invalid namespace registration (empty prefix or base directory)."""


class SettingsError(AutoloadError):
    """A settings file could not be read or failed validation."""


class UnitLoadError(AutoloadError, ImportError):
    """A source unit exists on disk but failed to load."""

    def __init__(self, message: str, *, name: str | None = None, path: str | None = None):
        super().__init__(message, name=name, path=path)
