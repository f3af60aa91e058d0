"""Date formatting with token patterns.

Pattern syntax:
    yyyy/yy/y      Year (4-digit padded, last two digits, unpadded)
    MMMM/MMM/MM/M  Month (wide name, abbreviated name, padded, unpadded)
    dd/d           Day of month
    EEEE/EEE       Weekday (wide, abbreviated)
    HH/H           Hour 0-23
    hh/h           Hour 1-12
    mm/m           Minute
    ss/s           Second
    sss            Millisecond
    a              AM/PM marker
    Z              UTC offset as +HHMM/-HHMM
    '...'          Literal text; '' is a single quote

Runs of a field letter that are not in the table, and any other
characters, are copied to the output unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Callable

from localefmt.date_parser import DateParser
from localefmt.dates import DateValue
from localefmt.locales import DatePreset, DateTimeFormats, LocaleDescriptor


# ==============================================================================
# Tokenizer
# ==============================================================================

class TokenKind(str, Enum):
    """Kinds of pattern tokens."""
    YEAR_FULL = "yyyy"
    YEAR_SHORT = "yy"
    YEAR = "y"
    MONTH_WIDE = "MMMM"
    MONTH_ABBREVIATED = "MMM"
    MONTH_PADDED = "MM"
    MONTH = "M"
    DAY_PADDED = "dd"
    DAY = "d"
    WEEKDAY_WIDE = "EEEE"
    WEEKDAY_ABBREVIATED = "EEE"
    HOUR24_PADDED = "HH"
    HOUR24 = "H"
    HOUR12_PADDED = "hh"
    HOUR12 = "h"
    MINUTE_PADDED = "mm"
    MINUTE = "m"
    SECOND_PADDED = "ss"
    SECOND = "s"
    MILLISECOND = "sss"
    AMPM = "a"
    ZONE = "Z"
    LITERAL = "literal"


_FIELD_TOKENS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.LITERAL}

# Letters that start a run looked up as a whole.
_RUN_LETTERS = frozenset("yMdEHhms")
# Letters that are always a token on their own.
_SINGLE_LETTERS = frozenset("aZ")

QUOTE = "'"


@dataclass(frozen=True)
class Token:
    """A field token or a literal run."""
    kind: TokenKind
    text: str


@lru_cache(maxsize=256)
def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split a date pattern into tokens.

    Example:
        tokenize("yy/xxx")
        # -> (Token(YEAR_SHORT, "yy"), Token(LITERAL, "/xxx"))
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
            literal.clear()

    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]

        if char == QUOTE:
            if pattern.startswith("''", i):
                literal.append(QUOTE)
                i += 2
                continue
            # Quoted run; an unterminated quote runs to the end of the pattern
            i += 1
            while i < length:
                if pattern[i] == QUOTE:
                    if pattern.startswith("''", i):
                        literal.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char in _SINGLE_LETTERS:
            flush()
            tokens.append(Token(_FIELD_TOKENS[char], char))
            i += 1
            continue

        if char in _RUN_LETTERS:
            end = i
            while end < length and pattern[end] == char:
                end += 1
            run = pattern[i:end]
            kind = _FIELD_TOKENS.get(run)
            if kind is None:
                literal.append(run)
            else:
                flush()
                tokens.append(Token(kind, run))
            i = end
            continue

        literal.append(char)
        i += 1

    flush()
    return tuple(tokens)


# ==============================================================================
# Field Rendering
# ==============================================================================

def _pad(value: int, digits: int) -> str:
    return str(value).zfill(digits)


def _weekday(moment: datetime) -> int:
    # Python counts from Monday, locale tables from Sunday
    return (moment.weekday() + 1) % 7


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _zone(offset: int) -> str:
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


FieldRenderer = Callable[[datetime, DateValue, DateTimeFormats], str]

_RENDERERS: dict[TokenKind, FieldRenderer] = {
    TokenKind.YEAR_FULL: lambda m, v, f: _pad(m.year, 4),
    TokenKind.YEAR_SHORT: lambda m, v, f: _pad(m.year % 100, 2),
    TokenKind.YEAR: lambda m, v, f: str(m.year),
    TokenKind.MONTH_WIDE: lambda m, v, f: f.months_wide[m.month - 1],
    TokenKind.MONTH_ABBREVIATED: lambda m, v, f: f.months_abbreviated[m.month - 1],
    TokenKind.MONTH_PADDED: lambda m, v, f: _pad(m.month, 2),
    TokenKind.MONTH: lambda m, v, f: str(m.month),
    TokenKind.DAY_PADDED: lambda m, v, f: _pad(m.day, 2),
    TokenKind.DAY: lambda m, v, f: str(m.day),
    TokenKind.WEEKDAY_WIDE: lambda m, v, f: f.days_wide[_weekday(m)],
    TokenKind.WEEKDAY_ABBREVIATED: lambda m, v, f: f.days_abbreviated[_weekday(m)],
    TokenKind.HOUR24_PADDED: lambda m, v, f: _pad(m.hour, 2),
    TokenKind.HOUR24: lambda m, v, f: str(m.hour),
    TokenKind.HOUR12_PADDED: lambda m, v, f: _pad(_hour12(m), 2),
    TokenKind.HOUR12: lambda m, v, f: str(_hour12(m)),
    TokenKind.MINUTE_PADDED: lambda m, v, f: _pad(m.minute, 2),
    TokenKind.MINUTE: lambda m, v, f: str(m.minute),
    TokenKind.SECOND_PADDED: lambda m, v, f: _pad(m.second, 2),
    TokenKind.SECOND: lambda m, v, f: str(m.second),
    TokenKind.MILLISECOND: lambda m, v, f: _pad(m.microsecond // 1000, 3),
    TokenKind.AMPM: lambda m, v, f: f.am if m.hour < 12 else f.pm,
    TokenKind.ZONE: lambda m, v, f: _zone(v.offset),
}


# ==============================================================================
# Date Formatter
# ==============================================================================

class DateFormatter:
    """Formats dates with a locale's tables and presets.

    Example:
        formatter = DateFormatter(get_locale("en-us"))
        noon = DateValue(timestamp=1283533508000, offset=-300)
        formatter.format(noon, "EEE, MMM d, yyyy")  # "Fri, Sep 3, 2010"
        formatter.format(noon, "shortTime")         # "12:05 PM"
        formatter.format(None)                      # None
    """

    def __init__(self, locale: LocaleDescriptor, parser: DateParser | None = None) -> None:
        self.locale = locale
        self.parser = parser or DateParser()

    def resolve_pattern(self, pattern: str | None) -> str:
        """Turn a preset name into its literal pattern.

        Empty patterns mean ``mediumDate``; anything that is not a preset
        name is returned unchanged.
        """
        formats = self.locale.datetime
        if not pattern:
            pattern = DatePreset.MEDIUM_DATE.value
        resolved = formats.preset(pattern)
        return pattern if resolved is None else resolved

    def format(self, value: Any, pattern: str | None = None) -> str | None:
        """Format a date.

        Args:
            value: DateValue, datetime, epoch milliseconds or an ISO 8601
                string; None and "" are returned unchanged
            pattern: Preset name or token pattern

        Returns:
            Formatted string

        Raises:
            InvalidDateError: If the value cannot be parsed
        """
        if value is None:
            return None
        if isinstance(value, str) and value == "":
            return ""

        date_value = self.parser.parse(value)
        moment = date_value.to_datetime()
        formats = self.locale.datetime

        parts = []
        for token in tokenize(self.resolve_pattern(pattern)):
            if token.kind is TokenKind.LITERAL:
                parts.append(token.text)
            else:
                parts.append(_RENDERERS[token.kind](moment, date_value, formats))
        return "".join(parts)
