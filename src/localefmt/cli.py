"""Command-line interface for localefmt."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from localefmt.date_parser import parse_date
from localefmt.errors import LocaleFormatError
from localefmt.filters import currency, date, number
from localefmt.loader import register_locale_file
from localefmt.locales import available_locales, get_locale

app = typer.Typer(
    name="localefmt",
    help="Locale-aware number, currency and date formatting",
    add_completion=False,
)

LocaleOption = Annotated[
    Optional[str],
    typer.Option("--locale", "-l", help="Locale tag (e.g. en-us, de-de)"),
]

# Sample instant used by the locales listing: 2010-09-03 17:05:08 UTC
_SAMPLE_TIMESTAMP = 1283533508000


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.callback()
def main(
    locale_file: Annotated[
        Optional[list[Path]],
        typer.Option("--locale-file", help="YAML/JSON locale file to register (repeatable)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Format numbers, currency and dates for a locale."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    for path in locale_file or []:
        try:
            register_locale_file(path)
        except LocaleFormatError as e:
            _fail(e)


@app.command(name="number")
def number_cmd(
    value: Annotated[str, typer.Argument(help="Number to format")],
    fraction_size: Annotated[
        Optional[int],
        typer.Option("--fraction", "-f", help="Exact number of fraction digits"),
    ] = None,
    locale: LocaleOption = None,
) -> None:
    """Format a number."""
    result = number(value, fraction_size, locale=locale)
    if result == "":
        _fail(ValueError(f"Not a finite number: {value!r}"))
    typer.echo(result)


@app.command(name="currency")
def currency_cmd(
    value: Annotated[str, typer.Argument(help="Amount to format")],
    symbol: Annotated[
        Optional[str],
        typer.Option("--symbol", "-s", help="Currency symbol (default: the locale's)"),
    ] = None,
    locale: LocaleOption = None,
) -> None:
    """Format a currency amount."""
    result = currency(value, symbol, locale=locale)
    if result == "":
        _fail(ValueError(f"Not a finite number: {value!r}"))
    typer.echo(result)


@app.command(name="date")
def date_cmd(
    value: Annotated[str, typer.Argument(help="ISO 8601 date or epoch milliseconds")],
    pattern: Annotated[
        Optional[str],
        typer.Option("--pattern", "-p", help="Preset name or token pattern"),
    ] = None,
    locale: LocaleOption = None,
) -> None:
    """Format a date."""
    try:
        typer.echo(date(value, pattern, locale=locale))
    except LocaleFormatError as e:
        _fail(e)


@app.command(name="parse")
def parse_cmd(
    value: Annotated[str, typer.Argument(help="ISO 8601 date or epoch milliseconds")],
) -> None:
    """Show how a date input is interpreted."""
    try:
        parsed = parse_date(value)
    except LocaleFormatError as e:
        _fail(e)
    typer.echo(parsed.isoformat())
    typer.echo(f"  Timestamp: {parsed.timestamp} ms")
    typer.echo(f"  Offset: {parsed.offset:+d} min")


@app.command(name="locales")
def locales_cmd() -> None:
    """List registered locales with sample output."""
    console = Console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan")
    table.add_column("Name")
    table.add_column("Number", justify="right")
    table.add_column("Currency", justify="right")
    table.add_column("Date")

    for locale_id in available_locales():
        descriptor = get_locale(locale_id)
        table.add_row(
            descriptor.id,
            descriptor.name,
            number(1234567.891, locale=descriptor),
            currency(-1234.5, locale=descriptor),
            date(_SAMPLE_TIMESTAMP, "fullDate", locale=descriptor),
        )

    console.print(table)


if __name__ == "__main__":
    app()
