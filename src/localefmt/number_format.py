"""Locale-aware number formatting.

Numbers are rounded on their shortest decimal representation rather than on
the binary float, so ``0.008`` rounds to ``0.01`` and float noise such as
``1.07 + 1 - 2.07`` (4.44e-16) renders as zero at two fraction digits.

Magnitudes of 1e21 and above, and nonzero magnitudes below 1e-6, are shown
in exponential notation (``1e+50``, ``1e-7``). A tiny value whose exponent
exceeds the requested fraction size plus one collapses to zero instead.

Usage:
    from localefmt.number_format import NumberFormatter, format_number
    from localefmt.locales import NumericPattern, get_locale

    format_number(1234567.89, NumericPattern(g_size=2), ",", ".")
    # -> "12,34,567.89"

    NumberFormatter(get_locale("de-de")).format(1234567.1, 2)
    # -> "1.234.567,10"
"""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any

from localefmt.locales import LocaleDescriptor, NumericPattern

# Magnitude from which numbers are shown in exponential notation.
EXPONENT_THRESHOLD = 21
# Magnitude below which nonzero numbers are shown in exponential notation.
SMALL_EXPONENT_THRESHOLD = -7


def to_decimal(value: Any) -> Decimal | None:
    """Convert a number or numeric string to a finite Decimal.

    Floats become their shortest round-trip decimal string. Returns None
    for anything that is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, numbers.Integral):
        number = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            return None
        number = Decimal(repr(as_float))
    elif isinstance(value, str):
        text = value.strip()
        # Decimal also accepts digit separators such as "1_000"
        if not text or "_" in text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite():
        return None
    return number


def _exponential(number: Decimal) -> str:
    """Render a huge or tiny magnitude as ``<mantissa>e+<exp>``/``e-<exp>``."""
    as_float = float(number)
    if as_float and math.isfinite(as_float):
        number = Decimal(repr(as_float))
    _, digits, _ = number.as_tuple()
    exponent = number.adjusted()
    text = "".join(map(str, digits)).rstrip("0") or "0"
    mantissa = text[0] if len(text) == 1 else f"{text[0]}.{text[1:]}"
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _coerce_fraction_size(fraction_size: Any) -> int | None:
    """Clamp an explicit fraction size to >= 0; non-integers mean "use the default"."""
    if fraction_size is None:
        return None
    try:
        return max(0, int(fraction_size))
    except (TypeError, ValueError, OverflowError):
        return None


def group_digits(whole: str, group_sep: str, g_size: int, lg_size: int) -> str:
    """Insert group separators into a string of integer digits."""
    if len(whole) <= lg_size:
        return whole

    groups = [whole[-lg_size:]]
    remaining = whole[:-lg_size]
    while len(remaining) > g_size:
        groups.insert(0, remaining[-g_size:])
        remaining = remaining[:-g_size]
    groups.insert(0, remaining)
    return group_sep.join(groups)


def format_number(
    value: Any,
    pattern: NumericPattern,
    group_sep: str,
    decimal_sep: str,
    fraction_size: int | None = None,
) -> str:
    """Format a number according to a numeric pattern.

    Args:
        value: Number, Decimal or numeric string
        pattern: Grouping, fraction and sign rules
        group_sep: Group separator
        decimal_sep: Decimal separator
        fraction_size: Exact number of fraction digits; when omitted (or not
            an integer) the value's own digits are used, clamped to the
            pattern bounds

    Returns:
        Formatted string, or "" when the value is not a finite number
    """
    number = to_decimal(value)
    if number is None:
        return ""

    is_negative = number < 0
    number = abs(number)
    fraction_size = _coerce_fraction_size(fraction_size)

    is_tiny = bool(number) and number.adjusted() <= SMALL_EXPONENT_THRESHOLD
    if is_tiny and fraction_size is not None and -number.adjusted() > fraction_size + 1:
        # Too small to show at the requested precision
        number = Decimal(0)
        is_negative = is_tiny = False

    if is_tiny or (number and number.adjusted() >= EXPONENT_THRESHOLD):
        formatted = _exponential(number)
    else:
        if fraction_size is None:
            fraction_len = max(0, -number.as_tuple().exponent)
            fraction_size = min(max(pattern.min_frac, fraction_len), pattern.max_frac)

        context = Context(prec=max(28, number.adjusted() + fraction_size + 2))
        rounded = number.quantize(
            Decimal(1).scaleb(-fraction_size), rounding=ROUND_HALF_UP, context=context
        )
        whole, _, fraction = format(rounded, "f").partition(".")

        formatted = group_digits(
            whole.zfill(pattern.min_int), group_sep, pattern.g_size, pattern.lg_size
        )
        if fraction_size:
            formatted += decimal_sep + fraction.ljust(fraction_size, "0")

    if is_negative:
        return f"{pattern.neg_pre}{formatted}{pattern.neg_suf}"
    return f"{pattern.pos_pre}{formatted}{pattern.pos_suf}"


class NumberFormatter:
    """Number formatter bound to a locale's decimal pattern.

    Example:
        formatter = NumberFormatter(get_locale("en-us"))
        formatter.format(1234.5678)     # "1,234.568"
        formatter.format(1234.567, 0)   # "1,235"
        formatter.format(float("nan"))  # ""
    """

    def __init__(self, locale: LocaleDescriptor) -> None:
        self.locale = locale

    def format(self, value: Any, fraction_size: int | None = None) -> str:
        number_formats = self.locale.number
        return format_number(
            value,
            number_formats.decimal_pattern,
            number_formats.symbols.group,
            number_formats.symbols.decimal,
            fraction_size,
        )
