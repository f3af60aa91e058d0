"""Canonical date value shared by the date parser and the date formatter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

from localefmt.config import get_settings

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MILLISECOND = timedelta(milliseconds=1)
MINUTE = timedelta(minutes=1)

# Offsets are strictly less than a day in either direction.
MAX_OFFSET_MINUTES = 24 * 60


def local_offset(moment: datetime) -> int:
    """Get the "local time" offset in minutes at a moment.

    Uses the configured default offset when set, otherwise the system
    timezone. Naive datetimes are read as system wall-clock time.
    """
    configured = get_settings().default_offset
    if configured is not None:
        return configured

    try:
        offset = moment.astimezone().utcoffset()
    except (OverflowError, OSError, ValueError):
        logger.debug("System timezone has no offset for %s, using UTC", moment)
        return 0
    if offset is None:
        return 0
    return offset // MINUTE


@dataclass(frozen=True)
class DateValue:
    """An instant plus the offset its calendar fields are read in.

    Attributes:
        timestamp: Milliseconds since the Unix epoch (UTC)
        offset: Display offset in minutes east of UTC

    Example:
        value = DateValue(timestamp=1283533508000, offset=-300)
        value.to_datetime()  # 2010-09-03 12:05:08-05:00
    """
    timestamp: int
    offset: int = 0

    def __post_init__(self) -> None:
        if not -MAX_OFFSET_MINUTES < self.offset < MAX_OFFSET_MINUTES:
            raise ValueError(f"Offset out of range: {self.offset} minutes")

    @property
    def tzinfo(self) -> timezone:
        return timezone(timedelta(minutes=self.offset))

    def to_datetime(self) -> datetime:
        """Get an aware datetime carrying this value's offset."""
        return (EPOCH + self.timestamp * MILLISECOND).astimezone(self.tzinfo)

    def with_offset(self, offset: int) -> "DateValue":
        """Same instant, read in another offset."""
        return replace(self, offset=offset)

    def isoformat(self) -> str:
        return self.to_datetime().isoformat(timespec="milliseconds")

    @classmethod
    def from_timestamp(cls, timestamp: int, offset: int | None = None) -> "DateValue":
        """Create a value from epoch milliseconds.

        Without an explicit offset the local offset at that instant is used.
        """
        timestamp = int(timestamp)
        if offset is None:
            offset = local_offset(EPOCH + timestamp * MILLISECOND)
        return cls(timestamp=timestamp, offset=offset)

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateValue":
        """Create a value from a datetime.

        Naive datetimes are wall-clock time in the local offset; their
        fields are kept as written.
        """
        utcoffset = value.utcoffset()
        if utcoffset is None:
            offset = local_offset(value)
            value = value.replace(tzinfo=timezone(timedelta(minutes=offset)))
        else:
            offset = utcoffset // MINUTE
        return cls(timestamp=(value - EPOCH) // MILLISECOND, offset=offset)
