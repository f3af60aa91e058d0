"""Locale descriptors and the locale registry.

A locale descriptor bundles everything the formatters read from a locale:
separators, numeric patterns, the currency symbol, month/day name tables,
AM/PM markers and the date presets. Descriptors are immutable and passed
explicitly to the formatters; the registry only maps tags to descriptors.

Usage:
    from localefmt.locales import get_locale, NumericPattern

    en = get_locale("en-US")
    en.number.decimal_pattern.g_size  # 3
    en.datetime.preset("shortDate")   # "M/d/yy"
"""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

from localefmt.config import get_settings
from localefmt.errors import InvalidPatternError, LocaleNotFoundError

logger = logging.getLogger(__name__)

# Placeholder replaced by the currency symbol in currency patterns.
CURRENCY_PLACEHOLDER = "¤"

DEFAULT_LOCALE = "en-us"


# ==============================================================================
# Locale Tags
# ==============================================================================

@dataclass(frozen=True)
class LocaleInfo:
    """Parsed locale tag.

    Attributes:
        language: ISO 639-1 language code (e.g., "en", "ko")
        region: ISO 3166-1 region code (e.g., "US", "GB")
        script: ISO 15924 script code (e.g., "Latn", "Hans")
    """
    language: str
    region: str | None = None
    script: str | None = None

    @property
    def key(self) -> str:
        """Registry key, e.g. "en-us"."""
        if self.region:
            return f"{self.language}-{self.region.lower()}"
        return self.language

    @classmethod
    def parse(cls, tag: str) -> "LocaleInfo":
        """Parse a locale tag.

        Supports "en", "en-US", "en_US", "zh-Hans" and "zh-Hans-CN".
        """
        parts = tag.strip().replace("_", "-").split("-")

        language = parts[0].lower()
        region = None
        script = None

        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                script = part.capitalize()
            elif len(part) == 2 and part.isalpha():
                region = part.upper()
            elif len(part) == 3 and part.isdigit():
                # UN M.49 region code
                region = part

        return cls(language=language, region=region, script=script)


# ==============================================================================
# Number Formats
# ==============================================================================

# camelCase keys used by externally supplied locale descriptors
_PATTERN_KEYS = {
    "minInt": "min_int",
    "minFrac": "min_frac",
    "maxFrac": "max_frac",
    "posPre": "pos_pre",
    "posSuf": "pos_suf",
    "negPre": "neg_pre",
    "negSuf": "neg_suf",
    "gSize": "g_size",
    "lgSize": "lg_size",
}


@dataclass(frozen=True)
class NumericPattern:
    """Rules for rendering a number.

    Attributes:
        min_int: Minimum number of integer digits
        min_frac: Minimum number of fraction digits
        max_frac: Maximum number of fraction digits
        pos_pre: Prefix for non-negative values
        pos_suf: Suffix for non-negative values
        neg_pre: Prefix for negative values
        neg_suf: Suffix for negative values
        g_size: Width of the groups further from the decimal point
        lg_size: Width of the group nearest the decimal point
    """
    min_int: int = 1
    min_frac: int = 0
    max_frac: int = 3
    pos_pre: str = ""
    pos_suf: str = ""
    neg_pre: str = "-"
    neg_suf: str = ""
    g_size: int = 3
    lg_size: int = 3

    def __post_init__(self) -> None:
        if self.min_int < 1:
            raise InvalidPatternError(f"min_int must be at least 1, got {self.min_int}")
        if self.min_frac < 0:
            raise InvalidPatternError(f"min_frac must not be negative, got {self.min_frac}")
        if self.max_frac < self.min_frac:
            raise InvalidPatternError(
                f"max_frac ({self.max_frac}) is smaller than min_frac ({self.min_frac})"
            )
        if self.g_size < 1 or self.lg_size < 1:
            raise InvalidPatternError(
                f"Group sizes must be positive, got g_size={self.g_size}, lg_size={self.lg_size}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NumericPattern":
        """Build a pattern from snake_case or camelCase keys."""
        names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _PATTERN_KEYS.get(key, key)
            if name not in names:
                raise InvalidPatternError(f"Unknown numeric pattern key: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NumberSymbols:
    """Group and decimal separators."""
    decimal: str = "."
    group: str = ","


@dataclass(frozen=True)
class NumberFormats:
    """Number-related part of a locale descriptor."""
    symbols: NumberSymbols = field(default_factory=NumberSymbols)
    currency_symbol: str = "$"
    decimal_pattern: NumericPattern = field(default_factory=NumericPattern)
    currency_pattern: NumericPattern = field(default_factory=lambda: NumericPattern(
        min_frac=2,
        max_frac=2,
        pos_pre=CURRENCY_PLACEHOLDER,
        neg_pre=f"({CURRENCY_PLACEHOLDER}",
        neg_suf=")",
    ))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NumberFormats":
        return cls(
            symbols=NumberSymbols(**data.get("symbols", {})),
            currency_symbol=data.get("currency_symbol", "$"),
            decimal_pattern=NumericPattern.from_dict(data.get("decimal_pattern", {})),
            currency_pattern=NumericPattern.from_dict(data["currency_pattern"])
            if "currency_pattern" in data
            else cls().currency_pattern,
        )


# ==============================================================================
# Date/Time Formats
# ==============================================================================

class DatePreset(str, Enum):
    """Named date formats resolved through the locale."""
    MEDIUM = "medium"
    SHORT = "short"
    FULL_DATE = "fullDate"
    LONG_DATE = "longDate"
    MEDIUM_DATE = "mediumDate"
    SHORT_DATE = "shortDate"
    MEDIUM_TIME = "mediumTime"
    SHORT_TIME = "shortTime"


_PRESET_FIELDS = {
    DatePreset.MEDIUM: "medium",
    DatePreset.SHORT: "short",
    DatePreset.FULL_DATE: "full_date",
    DatePreset.LONG_DATE: "long_date",
    DatePreset.MEDIUM_DATE: "medium_date",
    DatePreset.SHORT_DATE: "short_date",
    DatePreset.MEDIUM_TIME: "medium_time",
    DatePreset.SHORT_TIME: "short_time",
}


@dataclass(frozen=True)
class DateTimeFormats:
    """Locale-specific date/time tables and presets.

    Day tables start with Sunday.
    """
    months_wide: tuple[str, ...] = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    months_abbreviated: tuple[str, ...] = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )
    days_wide: tuple[str, ...] = (
        "Sunday", "Monday", "Tuesday", "Wednesday",
        "Thursday", "Friday", "Saturday",
    )
    days_abbreviated: tuple[str, ...] = (
        "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
    )
    am: str = "AM"
    pm: str = "PM"

    medium: str = "MMM d, y h:mm:ss a"
    short: str = "M/d/yy h:mm a"
    full_date: str = "EEEE, MMMM d, y"
    long_date: str = "MMMM d, y"
    medium_date: str = "MMM d, y"
    short_date: str = "M/d/yy"
    medium_time: str = "h:mm:ss a"
    short_time: str = "h:mm a"

    def __post_init__(self) -> None:
        for name, expected in (
            ("months_wide", 12),
            ("months_abbreviated", 12),
            ("days_wide", 7),
            ("days_abbreviated", 7),
        ):
            table = getattr(self, name)
            if len(table) != expected:
                raise InvalidPatternError(
                    f"{name} needs {expected} entries, got {len(table)}"
                )
            object.__setattr__(self, name, tuple(table))

    def preset(self, name: str) -> str | None:
        """Get the literal pattern for a preset name, or None."""
        try:
            preset = DatePreset(name)
        except ValueError:
            return None
        return getattr(self, _PRESET_FIELDS[preset])

    @property
    def presets(self) -> dict[str, str]:
        return {preset.value: getattr(self, attr) for preset, attr in _PRESET_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DateTimeFormats":
        names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            # preset names are accepted in their camelCase spelling too
            name = key
            if key not in names:
                try:
                    name = _PRESET_FIELDS[DatePreset(key)]
                except ValueError:
                    raise InvalidPatternError(f"Unknown date/time key: {key}") from None
            kwargs[name] = value
        return cls(**kwargs)


# ==============================================================================
# Locale Descriptor
# ==============================================================================

@dataclass(frozen=True)
class LocaleDescriptor:
    """Complete locale data consumed by the formatters.

    Attributes:
        id: Registry key (e.g., "en-us")
        number: Separators, numeric patterns and currency symbol
        datetime: Month/day tables, AM/PM markers and presets
        name: Human-readable name
    """
    id: str
    number: NumberFormats = field(default_factory=NumberFormats)
    datetime: DateTimeFormats = field(default_factory=DateTimeFormats)
    name: str = ""

    @property
    def info(self) -> LocaleInfo:
        return LocaleInfo.parse(self.id)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("months_wide", "months_abbreviated", "days_wide", "days_abbreviated"):
            data["datetime"][key] = list(data["datetime"][key])
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocaleDescriptor":
        return cls(
            id=LocaleInfo.parse(data["id"]).key,
            number=NumberFormats.from_dict(data.get("number", {})),
            datetime=DateTimeFormats.from_dict(data.get("datetime", {})),
            name=data.get("name", ""),
        )


# ==============================================================================
# Built-in Locales
# ==============================================================================

_EURO_PATTERN = NumericPattern(
    min_frac=2,
    max_frac=2,
    pos_suf=f" {CURRENCY_PLACEHOLDER}",
    neg_suf=f" {CURRENCY_PLACEHOLDER}",
)

_BUILTIN_LOCALES: tuple[LocaleDescriptor, ...] = (
    LocaleDescriptor(id="en-us", name="English (United States)"),

    LocaleDescriptor(
        id="en-gb",
        name="English (United Kingdom)",
        number=NumberFormats(
            currency_symbol="£",
            currency_pattern=NumericPattern(
                min_frac=2, max_frac=2,
                pos_pre=CURRENCY_PLACEHOLDER,
                neg_pre=f"-{CURRENCY_PLACEHOLDER}",
            ),
        ),
        datetime=DateTimeFormats(
            medium="d MMM y HH:mm:ss",
            short="dd/MM/yyyy HH:mm",
            full_date="EEEE, d MMMM y",
            long_date="d MMMM y",
            medium_date="d MMM y",
            short_date="dd/MM/yyyy",
            medium_time="HH:mm:ss",
            short_time="HH:mm",
        ),
    ),

    # Indian numbering: 12,34,567
    LocaleDescriptor(
        id="en-in",
        name="English (India)",
        number=NumberFormats(
            currency_symbol="₹",
            decimal_pattern=NumericPattern(g_size=2, lg_size=3),
            currency_pattern=NumericPattern(
                min_frac=2, max_frac=2,
                pos_pre=f"{CURRENCY_PLACEHOLDER} ",
                neg_pre=f"{CURRENCY_PLACEHOLDER} -",
                g_size=2, lg_size=3,
            ),
        ),
        datetime=DateTimeFormats(
            am="am",
            pm="pm",
            medium="dd-MMM-y h:mm:ss a",
            short="dd/MM/yy h:mm a",
            full_date="EEEE d MMMM y",
            long_date="d MMMM y",
            medium_date="dd-MMM-y",
            short_date="dd/MM/yy",
        ),
    ),

    LocaleDescriptor(
        id="de-de",
        name="Deutsch (Deutschland)",
        number=NumberFormats(
            symbols=NumberSymbols(decimal=",", group="."),
            currency_symbol="€",
            currency_pattern=_EURO_PATTERN,
        ),
        datetime=DateTimeFormats(
            months_wide=(
                "Januar", "Februar", "März", "April", "Mai", "Juni",
                "Juli", "August", "September", "Oktober", "November", "Dezember",
            ),
            months_abbreviated=(
                "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
                "Juli", "Aug.", "Sep.", "Okt.", "Nov.", "Dez.",
            ),
            days_wide=(
                "Sonntag", "Montag", "Dienstag", "Mittwoch",
                "Donnerstag", "Freitag", "Samstag",
            ),
            days_abbreviated=("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."),
            am="vorm.",
            pm="nachm.",
            medium="dd.MM.yyyy HH:mm:ss",
            short="dd.MM.yy HH:mm",
            full_date="EEEE, d. MMMM y",
            long_date="d. MMMM y",
            medium_date="dd.MM.yyyy",
            short_date="dd.MM.yy",
            medium_time="HH:mm:ss",
            short_time="HH:mm",
        ),
    ),

    LocaleDescriptor(
        id="fr-fr",
        name="Français (France)",
        number=NumberFormats(
            symbols=NumberSymbols(decimal=",", group=" "),
            currency_symbol="€",
            currency_pattern=_EURO_PATTERN,
        ),
        datetime=DateTimeFormats(
            months_wide=(
                "janvier", "février", "mars", "avril", "mai", "juin",
                "juillet", "août", "septembre", "octobre", "novembre", "décembre",
            ),
            months_abbreviated=(
                "janv.", "févr.", "mars", "avr.", "mai", "juin",
                "juil.", "août", "sept.", "oct.", "nov.", "déc.",
            ),
            days_wide=(
                "dimanche", "lundi", "mardi", "mercredi",
                "jeudi", "vendredi", "samedi",
            ),
            days_abbreviated=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
            medium="d MMM y HH:mm:ss",
            short="dd/MM/yy HH:mm",
            full_date="EEEE d MMMM y",
            long_date="d MMMM y",
            medium_date="d MMM y",
            short_date="dd/MM/yy",
            medium_time="HH:mm:ss",
            short_time="HH:mm",
        ),
    ),

    LocaleDescriptor(
        id="es-es",
        name="Español (España)",
        number=NumberFormats(
            symbols=NumberSymbols(decimal=",", group="."),
            currency_symbol="€",
            currency_pattern=_EURO_PATTERN,
        ),
        datetime=DateTimeFormats(
            months_wide=(
                "enero", "febrero", "marzo", "abril", "mayo", "junio",
                "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
            ),
            months_abbreviated=(
                "ene.", "feb.", "mar.", "abr.", "may.", "jun.",
                "jul.", "ago.", "sept.", "oct.", "nov.", "dic.",
            ),
            days_wide=(
                "domingo", "lunes", "martes", "miércoles",
                "jueves", "viernes", "sábado",
            ),
            days_abbreviated=("dom.", "lun.", "mar.", "mié.", "jue.", "vie.", "sáb."),
            am="a. m.",
            pm="p. m.",
            medium="dd/MM/yyyy HH:mm:ss",
            short="dd/MM/yy HH:mm",
            full_date="EEEE, d 'de' MMMM 'de' y",
            long_date="d 'de' MMMM 'de' y",
            medium_date="dd/MM/yyyy",
            short_date="dd/MM/yy",
            medium_time="H:mm:ss",
            short_time="H:mm",
        ),
    ),

    LocaleDescriptor(
        id="ja-jp",
        name="日本語 (日本)",
        number=NumberFormats(
            currency_symbol="¥",
            currency_pattern=NumericPattern(
                min_frac=2, max_frac=2,
                pos_pre=CURRENCY_PLACEHOLDER,
                neg_pre=f"{CURRENCY_PLACEHOLDER}-",
            ),
        ),
        datetime=DateTimeFormats(
            months_wide=(
                "1月", "2月", "3月", "4月", "5月", "6月",
                "7月", "8月", "9月", "10月", "11月", "12月",
            ),
            months_abbreviated=(
                "1月", "2月", "3月", "4月", "5月", "6月",
                "7月", "8月", "9月", "10月", "11月", "12月",
            ),
            days_wide=(
                "日曜日", "月曜日", "火曜日", "水曜日",
                "木曜日", "金曜日", "土曜日",
            ),
            days_abbreviated=("日", "月", "火", "水", "木", "金", "土"),
            am="午前",
            pm="午後",
            medium="yyyy/MM/dd H:mm:ss",
            short="yy/MM/dd H:mm",
            full_date="y年M月d日EEEE",
            long_date="y年M月d日",
            medium_date="yyyy/MM/dd",
            short_date="yy/MM/dd",
            medium_time="H:mm:ss",
            short_time="H:mm",
        ),
    ),

    LocaleDescriptor(
        id="ko-kr",
        name="한국어 (대한민국)",
        number=NumberFormats(
            currency_symbol="₩",
            currency_pattern=NumericPattern(
                min_frac=2, max_frac=2,
                pos_pre=CURRENCY_PLACEHOLDER,
                neg_pre=f"-{CURRENCY_PLACEHOLDER}",
            ),
        ),
        datetime=DateTimeFormats(
            months_wide=(
                "1월", "2월", "3월", "4월", "5월", "6월",
                "7월", "8월", "9월", "10월", "11월", "12월",
            ),
            months_abbreviated=(
                "1월", "2월", "3월", "4월", "5월", "6월",
                "7월", "8월", "9월", "10월", "11월", "12월",
            ),
            days_wide=(
                "일요일", "월요일", "화요일", "수요일",
                "목요일", "금요일", "토요일",
            ),
            days_abbreviated=("일", "월", "화", "수", "목", "금", "토"),
            am="오전",
            pm="오후",
            medium="yyyy. M. d. a h:mm:ss",
            short="yy. M. d. a h:mm",
            full_date="y년 M월 d일 EEEE",
            long_date="y년 M월 d일",
            medium_date="yyyy. M. d.",
            short_date="yy. M. d.",
            medium_time="a h:mm:ss",
            short_time="a h:mm",
        ),
    ),
)


# ==============================================================================
# Registry
# ==============================================================================

_registry: dict[str, LocaleDescriptor] = {locale.id: locale for locale in _BUILTIN_LOCALES}
_registry_lock = threading.RLock()


def register_locale(descriptor: LocaleDescriptor) -> None:
    """Register (or replace) a locale descriptor under its id."""
    with _registry_lock:
        replaced = descriptor.id in _registry
        _registry[descriptor.id] = descriptor
    logger.debug("%s locale %s", "Replaced" if replaced else "Registered", descriptor.id)


def unregister_locale(locale_id: str) -> None:
    """Remove a locale. Built-in locales can be removed too."""
    with _registry_lock:
        _registry.pop(LocaleInfo.parse(locale_id).key, None)


def available_locales() -> list[str]:
    """Get the ids of all registered locales."""
    with _registry_lock:
        return sorted(_registry)


def get_locale(
    locale: str | LocaleDescriptor | None = None,
    strict: bool = False,
) -> LocaleDescriptor:
    """Resolve a locale tag to a descriptor.

    Tries the full tag first, then any locale with the same language.
    Unknown tags fall back to the default locale unless ``strict`` is set.

    Args:
        locale: Tag, descriptor (returned as is) or None for the
            configured default
        strict: Raise instead of falling back

    Returns:
        The resolved LocaleDescriptor

    Raises:
        LocaleNotFoundError: If strict and no locale matches
    """
    if isinstance(locale, LocaleDescriptor):
        return locale

    tag = locale if locale is not None else get_settings().locale
    info = LocaleInfo.parse(tag)

    with _registry_lock:
        if info.key in _registry:
            return _registry[info.key]

        same_language = [
            descriptor for key, descriptor in sorted(_registry.items())
            if descriptor.info.language == info.language
        ]
        if same_language:
            # Prefer the default locale, then the "primary" region (de -> de-de)
            same_language.sort(key=lambda d: (
                d.id != DEFAULT_LOCALE,
                (d.info.region or "").lower() != info.language,
            ))
            return same_language[0]

        if strict:
            raise LocaleNotFoundError(tag)

        logger.warning("Locale %r is not registered, falling back to %s", tag, DEFAULT_LOCALE)
        return _registry.get(DEFAULT_LOCALE) or _BUILTIN_LOCALES[0]
