"""localefmt - Locale-Aware Number, Currency and Date Formatting.

Formatting engines:
- Numbers: grouping, half-up rounding on the decimal representation,
  sign prefixes/suffixes, exponential notation for huge magnitudes
- Currency: two fraction digits and a currency symbol
- Dates: token patterns with quoting, named presets, UTC offsets
- Date parsing: epoch milliseconds, datetimes and ISO 8601 variants

Example:
    from localefmt import currency, date, number

    number(1234567.891)                  # "1,234,567.891"
    number(1234.567, 0)                  # "1,235"
    currency(1234.5678, "USD$")          # "USD$1,234.57"
    date("2003-09-10T13:02:03Z", "yyyy-MM-dd ss")  # "2003-09-10 03"
    date(1283533508000, "fullDate", locale="de-de")
"""

from localefmt.config import (
    FormatSettings,
    InvalidDatePolicy,
    get_settings,
    load_settings_from_env,
    reset_settings,
    set_settings,
    settings_override,
)
from localefmt.currency_format import CurrencyFormatter
from localefmt.date_format import DateFormatter, Token, TokenKind, tokenize
from localefmt.date_parser import DateParser, parse_date
from localefmt.dates import DateValue
from localefmt.errors import (
    InvalidDateError,
    InvalidPatternError,
    LocaleFormatError,
    LocaleLoadError,
    LocaleNotFoundError,
)
from localefmt.filters import currency, date, number
from localefmt.loader import (
    load_locale_file,
    locale_from_dict,
    register_locale_file,
    save_locale_file,
)
from localefmt.locales import (
    CURRENCY_PLACEHOLDER,
    DatePreset,
    DateTimeFormats,
    LocaleDescriptor,
    LocaleInfo,
    NumberFormats,
    NumberSymbols,
    NumericPattern,
    available_locales,
    get_locale,
    register_locale,
    unregister_locale,
)
from localefmt.number_format import NumberFormatter, format_number

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("localefmt")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Filters
    "number",
    "currency",
    "date",

    # Engines
    "NumberFormatter",
    "CurrencyFormatter",
    "DateFormatter",
    "DateParser",
    "format_number",
    "parse_date",
    "tokenize",
    "Token",
    "TokenKind",
    "DateValue",

    # Locales
    "LocaleDescriptor",
    "LocaleInfo",
    "NumberFormats",
    "NumberSymbols",
    "NumericPattern",
    "DateTimeFormats",
    "DatePreset",
    "CURRENCY_PLACEHOLDER",
    "get_locale",
    "register_locale",
    "unregister_locale",
    "available_locales",
    "load_locale_file",
    "locale_from_dict",
    "register_locale_file",
    "save_locale_file",

    # Settings
    "FormatSettings",
    "InvalidDatePolicy",
    "get_settings",
    "set_settings",
    "reset_settings",
    "load_settings_from_env",
    "settings_override",

    # Errors
    "LocaleFormatError",
    "InvalidDateError",
    "InvalidPatternError",
    "LocaleNotFoundError",
    "LocaleLoadError",
]
