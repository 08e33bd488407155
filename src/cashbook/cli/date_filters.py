"""CLI helpers for parsing dates, times and amounts from options."""

from datetime import date, time
from decimal import Decimal

import click

from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date, parse_time


def resolve_cli_date(ctx, value: str | None, label: str, default: date | None = None) -> date | None:
    """Parse a date option, exiting with an error message if it is invalid."""
    if not value:
        return default
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_cli_time(ctx, value: str | None) -> time | None:
    """Parse a time option, exiting with an error message if it is invalid."""
    if not value:
        return None
    try:
        return parse_time(value)
    except ValueError as e:
        click.echo(f"Error: Invalid time: {e}", err=True)
        ctx.exit(1)


def resolve_cli_amount(ctx, value: str | None) -> Decimal | None:
    """Parse an amount option, exiting with an error message if it is invalid."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from explicit dates or a default range."""
    start = resolve_cli_date(ctx, start_date, "start date")
    end = resolve_cli_date(ctx, end_date, "end date")

    if start is None and end is None and default_range is not None:
        start, end = default_range

    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)

    return start, end
