"""Process-wide formatting settings.

Environment variables:
    LOCALEFMT_LOCALE: Default locale tag (default: en-us)
    LOCALEFMT_DEFAULT_OFFSET: Display offset in minutes east of UTC used for
        epoch inputs and wall-clock strings (default: system local time)
    LOCALEFMT_INVALID_DATE: What ``filters.date`` does with unparseable
        input (raise, passthrough; default: raise)
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class InvalidDatePolicy(str, Enum):
    """How unparseable date input is surfaced to the caller."""

    RAISE = "raise"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class FormatSettings:
    """Settings shared by the filter functions.

    Attributes:
        locale: Default locale tag
        default_offset: Offset in minutes used as "local time", or None for
            the system timezone
        invalid_date: Invalid date policy
    """

    locale: str = "en-us"
    default_offset: int | None = None
    invalid_date: InvalidDatePolicy = InvalidDatePolicy.RAISE


def load_settings_from_env() -> FormatSettings:
    """Build settings from ``LOCALEFMT_*`` environment variables."""

    def get_int(key: str) -> int | None:
        raw = os.environ.get(key)
        if raw is None or not raw.strip():
            return None
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", key, raw)
            return None
        if abs(value) >= 24 * 60:
            logger.warning("Ignoring out-of-range %s=%r", key, raw)
            return None
        return value

    policy_str = os.environ.get("LOCALEFMT_INVALID_DATE", "raise")
    try:
        policy = InvalidDatePolicy(policy_str.lower())
    except ValueError:
        policy = InvalidDatePolicy.RAISE

    return FormatSettings(
        locale=os.environ.get("LOCALEFMT_LOCALE", "en-us"),
        default_offset=get_int("LOCALEFMT_DEFAULT_OFFSET"),
        invalid_date=policy,
    )


_settings: FormatSettings | None = None


def get_settings() -> FormatSettings:
    """Get the active settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = load_settings_from_env()
    return _settings


def set_settings(settings: FormatSettings) -> None:
    """Replace the active settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the active settings so the next access re-reads the environment."""
    global _settings
    _settings = None


@contextmanager
def settings_override(**changes: Any) -> Iterator[FormatSettings]:
    """Temporarily override individual settings.

    Example:
        with settings_override(default_offset=0):
            date("2003-09-10", "HH:mm Z")  # "00:00 +0000"
    """
    previous = get_settings()
    if "invalid_date" in changes:
        changes["invalid_date"] = InvalidDatePolicy(changes["invalid_date"])
    current = replace(previous, **changes)
    set_settings(current)
    try:
        yield current
    finally:
        set_settings(previous)
