"""Exceptions raised by localefmt.

Formatting never raises for unrenderable numbers (they become an empty
string); exceptions are reserved for invalid dates and broken locale data.
"""

from __future__ import annotations

from typing import Any


class LocaleFormatError(Exception):
    """Base exception for all localefmt errors."""

    pass


class InvalidDateError(LocaleFormatError, ValueError):
    """Raised when a value cannot be interpreted as a date."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidPatternError(LocaleFormatError, ValueError):
    """Raised when a numeric pattern or a locale table is inconsistent."""

    pass


class LocaleNotFoundError(LocaleFormatError, LookupError):
    """Raised when a locale tag has no registered descriptor."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Locale not found: {tag}")


class LocaleLoadError(LocaleFormatError):
    """Raised when a locale file cannot be read or is malformed."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Failed to load locale from {source}: {message}")
