"""Analytics command: expense categories and monthly overview."""

from datetime import date

import click
from cashbook.cli.date_filters import resolve_cli_date
from cashbook.cli.formatting import format_amount
from cashbook.domain.cashbook import CashBookService


@click.command("analytics")
@click.option(
    "--today",
    help="Reference date selecting the month (YYYY-MM-DD or relative like 'last month')",
)
@click.option(
    "--months",
    type=click.IntRange(min=1),
    help="Only show this many most recent months in the monthly overview",
)
@click.option("--categories-only", is_flag=True, help="Only show the category breakdown")
@click.option("--monthly-only", is_flag=True, help="Only show the monthly overview")
@click.pass_context
def show_analytics(
    ctx,
    today: str | None,
    months: int | None,
    categories_only: bool,
    monthly_only: bool,
):
    """Show the top expense categories of the month and the monthly overview."""
    if categories_only and monthly_only:
        click.echo("Error: --categories-only and --monthly-only cannot be combined.", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    reference = resolve_cli_date(ctx, today, "date", default=date.today())
    result = CashBookService(db).get_cash_book(today=reference, months=months)

    if not monthly_only:
        click.echo(f"\nTop Expense Categories: {result.first_day.strftime('%B %Y')}")
        click.echo("-" * 60)
        if not result.category_summary:
            click.echo("No expenses this month.")
        for entry in result.category_summary:
            click.echo(f"{entry.category:<40} {format_amount(entry.total):>19}")

    if not categories_only:
        click.echo("\nMonthly Overview")
        click.echo("-" * 80)
        click.echo(f"{'Month':<12} {'Income':>16} {'Expense':>16} {'Pending':>16} {'Net':>16}")
        click.echo("-" * 80)
        if not result.monthly_summary:
            click.echo("No transactions found.")
        for month in result.monthly_summary:
            click.echo(
                f"{month.month_label:<12} {format_amount(month.income):>16} "
                f"{format_amount(month.expense):>16} {format_amount(month.pending):>16} "
                f"{format_amount(month.net):>16}"
            )


def register_commands(cli):
    """Register analytics command with main CLI."""
    cli.add_command(show_analytics)
