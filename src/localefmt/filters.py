"""Filter functions for templates.

These are the plain call-and-return functions a template layer binds to its
``number``, ``currency`` and ``date`` filters. Each takes an optional locale
(tag or descriptor); without one the configured default locale is used.

Example:
    from localefmt.filters import currency, date, number

    number(1234.5678)                 # "1,234.568"
    number(1234.5678, 1, locale="de")  # "1.234,6"
    currency(-999)                    # "($999.00)"
    date("2003-09-10T13:02:03Z", "yyyy-MM-dd HH:mm Z")
"""

from __future__ import annotations

import logging
from typing import Any

from localefmt.config import InvalidDatePolicy, get_settings
from localefmt.currency_format import CurrencyFormatter
from localefmt.date_format import DateFormatter
from localefmt.errors import InvalidDateError
from localefmt.locales import LocaleDescriptor, get_locale
from localefmt.number_format import NumberFormatter

logger = logging.getLogger(__name__)

LocaleArg = str | LocaleDescriptor | None


def number(value: Any, fraction_size: int | None = None, *, locale: LocaleArg = None) -> str:
    """Format a number with the locale's decimal pattern.

    Returns "" for values that are not finite numbers.
    """
    return NumberFormatter(get_locale(locale)).format(value, fraction_size)


def currency(value: Any, symbol: str | None = None, *, locale: LocaleArg = None) -> str:
    """Format an amount with two fraction digits and a currency symbol.

    Returns "" for values that are not finite numbers.
    """
    return CurrencyFormatter(get_locale(locale)).format(value, symbol)


def date(value: Any, pattern: str | None = None, *, locale: LocaleArg = None) -> Any:
    """Format a date with a preset name or a token pattern.

    None and "" are returned unchanged. Unparseable input raises
    InvalidDateError, or is returned unchanged under the passthrough
    policy.
    """
    formatter = DateFormatter(get_locale(locale))
    try:
        return formatter.format(value, pattern)
    except InvalidDateError:
        if get_settings().invalid_date is InvalidDatePolicy.PASSTHROUGH:
            logger.debug("Passing through invalid date %r", value)
            return value
        raise


FILTERS = {
    "number": number,
    "currency": currency,
    "date": date,
}
