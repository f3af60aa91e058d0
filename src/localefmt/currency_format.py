"""Currency formatting on top of the number formatter."""

from __future__ import annotations

from typing import Any

from localefmt.locales import CURRENCY_PLACEHOLDER, LocaleDescriptor
from localefmt.number_format import format_number

CURRENCY_FRACTION_SIZE = 2


class CurrencyFormatter:
    """Formats amounts with the locale's currency pattern.

    The fraction size is always two digits; the pattern's currency
    placeholder is replaced by the symbol.

    Example:
        formatter = CurrencyFormatter(get_locale("en-us"))
        formatter.format(-999)              # "($999.00)"
        formatter.format(1234.5678, "USD$")  # "USD$1,234.57"
    """

    def __init__(self, locale: LocaleDescriptor) -> None:
        self.locale = locale

    def format(self, value: Any, symbol: str | None = None) -> str:
        number_formats = self.locale.number
        if symbol is None:
            symbol = number_formats.currency_symbol

        formatted = format_number(
            value,
            number_formats.currency_pattern,
            number_formats.symbols.group,
            number_formats.symbols.decimal,
            CURRENCY_FRACTION_SIZE,
        )
        return formatted.replace(CURRENCY_PLACEHOLDER, symbol)
