"""Polars integration.

Applies the filters to Series and DataFrame columns, producing String
columns ready for display or export.

Usage:
    import polars as pl
    from localefmt.frames import format_frame, format_series

    df = pl.DataFrame({"price": [1234.5, -2.0], "sold": ["2003-09-10", None]})
    format_frame(df, {"price": "currency", "sold": ("date", {"pattern": "longDate"})})
"""

from __future__ import annotations

from typing import Any, Mapping

import polars as pl

from localefmt.filters import FILTERS


def format_series(series: pl.Series, kind: str = "number", **options: Any) -> pl.Series:
    """Format every element of a Series.

    Args:
        series: Input series
        kind: Filter name ("number", "currency" or "date")
        **options: Filter arguments (fraction_size, symbol, pattern, locale)

    Returns:
        String series with the same name
    """
    try:
        apply = FILTERS[kind]
    except KeyError:
        raise ValueError(f"Unknown filter {kind!r}, expected one of {sorted(FILTERS)}") from None

    values = [_as_text(apply(value, **options)) for value in series.to_list()]
    return pl.Series(series.name, values, dtype=pl.String)


def _as_text(result: Any) -> str | None:
    # Passed-through invalid dates keep their original type
    if result is None or isinstance(result, str):
        return result
    return str(result)


def format_frame(
    df: pl.DataFrame,
    columns: Mapping[str, str | tuple[str, Mapping[str, Any]]],
) -> pl.DataFrame:
    """Format selected DataFrame columns in place of the originals.

    Args:
        df: Input frame
        columns: Column name to filter name, or to (filter name, options)

    Returns:
        New DataFrame with the formatted columns replaced
    """
    formatted = []
    for name, target in columns.items():
        if isinstance(target, str):
            kind, options = target, {}
        else:
            kind, options = target
        formatted.append(format_series(df[name], kind, **options))
    return df.with_columns(formatted)
