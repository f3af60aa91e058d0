"""Date input parsing.

Accepted inputs:
- DateValue (returned unchanged) and datetime/date objects
- Epoch milliseconds as numbers or strings of digits
- ISO 8601 strings, delimited or compact, with optional time, fraction
  and timezone: ``YYYY[-MM[-DD]][THH[:MM[:SS[.fff...]]]][Z|+HH:MM|+HHMM]``

Strings without a timezone are wall-clock time in the local offset; their
fields are kept as written. Fractions are truncated to milliseconds.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from localefmt.dates import MAX_OFFSET_MINUTES, DateValue
from localefmt.errors import InvalidDateError

logger = logging.getLogger(__name__)

NUMBER_STRING = re.compile(r"^-?\d+$")

ISO_8601 = re.compile(
    r"^(\d{4})(?:-?(\d\d)(?:-?(\d\d))?)?"
    r"(?:[Tt](\d\d)(?::?(\d\d)(?::?(\d\d)(?:[.,](\d+))?)?)?)?"
    r"([Zz]|([+-])(\d\d):?(\d\d))?$"
)


class DateParser:
    """Converts heterogeneous date inputs into DateValue.

    Example:
        parser = DateParser()
        parser.parse("2003-09-10T13:02:03.000Z")
        # -> DateValue(timestamp=1063198923000, offset=0)
        parser.parse("20030910T033203-0930").offset  # -570
    """

    def parse(self, value: Any) -> DateValue:
        """Parse a date input.

        Raises:
            InvalidDateError: If the value cannot be read as a date
        """
        if isinstance(value, DateValue):
            return value
        try:
            parsed = self._convert(value)
            # Calendar fields must be readable in the value's own offset
            parsed.to_datetime()
        except OverflowError as e:
            raise InvalidDateError(value, "outside the supported date range") from e
        return parsed

    def _convert(self, value: Any) -> DateValue:
        if isinstance(value, datetime):
            return DateValue.from_datetime(value)
        if isinstance(value, date):
            return DateValue.from_datetime(datetime.combine(value, time.min))
        if isinstance(value, bool):
            raise InvalidDateError(value, "booleans are not dates")

        if isinstance(value, numbers.Integral):
            return DateValue.from_timestamp(int(value))
        if isinstance(value, numbers.Real):
            as_float = float(value)
            if not math.isfinite(as_float):
                raise InvalidDateError(value, "not a finite timestamp")
            return DateValue.from_timestamp(int(as_float))

        if isinstance(value, str):
            text = value.strip()
            if NUMBER_STRING.match(text):
                return DateValue.from_timestamp(int(text))
            return self.parse_iso(text)

        raise InvalidDateError(value, f"unsupported type {type(value).__name__}")

    def parse_iso(self, text: str) -> DateValue:
        """Parse an ISO 8601 date or date-time string."""
        match = ISO_8601.match(text)
        if match is None:
            logger.debug("Rejected date string %r", text)
            raise InvalidDateError(text, "not an ISO 8601 date")

        (year, month, day, hour, minute, second, fraction,
         zone, sign, zone_hours, zone_minutes) = match.groups()

        millisecond = int((fraction or "0")[:3].ljust(3, "0"))
        try:
            wall = datetime(
                int(year),
                int(month or 1),
                int(day or 1),
                int(hour or 0),
                int(minute or 0),
                int(second or 0),
                millisecond * 1000,
            )
        except ValueError as e:
            raise InvalidDateError(text, str(e)) from e

        if zone is None:
            return DateValue.from_datetime(wall)

        offset = 0
        if sign is not None:
            if int(zone_minutes) >= 60:
                raise InvalidDateError(text, "timezone minutes out of range")
            offset = int(zone_hours) * 60 + int(zone_minutes)
            if offset >= MAX_OFFSET_MINUTES:
                raise InvalidDateError(text, "timezone offset out of range")
            if sign == "-":
                offset = -offset

        return DateValue.from_datetime(
            wall.replace(tzinfo=timezone(timedelta(minutes=offset)))
        )


_parser = DateParser()


def parse_date(value: Any) -> DateValue:
    """Parse a date input with a default parser."""
    return _parser.parse(value)
