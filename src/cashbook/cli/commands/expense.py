"""Expense commands."""

from datetime import date

import click
from cashbook.cli.date_filters import resolve_cli_amount, resolve_cli_date, resolve_cli_date_range
from cashbook.cli.error_handling import handle_domain_error
from cashbook.cli.formatting import format_amount
from cashbook.domain.expense import ExpenseService
from cashbook.utils.date_parser import month_bounds


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.argument("expense_type", metavar="EXPENSE_TYPE")
@click.option("--amount", required=True, help="Amount paid (e.g., 500 or ₹500.00)")
@click.option("--date", "date_str", help="Expense date (YYYY-MM-DD or 'today'); defaults to today")
@click.option("--paid-to", help="Who was paid")
@click.option("--pay-mode", help="Payment mode (Cash, UPI, ...)")
@click.option("--remarks", help="Remarks")
@click.pass_context
def add_expense(
    ctx,
    expense_type: str,
    amount: str,
    date_str: str | None,
    paid_to: str | None,
    pay_mode: str | None,
    remarks: str | None,
):
    """Add an expense.

    EXPENSE_TYPE is the category the expense is reported under.

    Examples:
        cashbook expense add Rent --amount 5000 --paid-to Landlord
        cashbook expense add Tea --amount 40 --date yesterday
    """
    db = ctx.obj["db"]
    service = ExpenseService(db)

    expense_date = resolve_cli_date(ctx, date_str, "date", default=date.today())
    expense_amount = resolve_cli_amount(ctx, amount)

    try:
        expense_id = service.create_expense(
            date=expense_date,
            expense_type=expense_type,
            amount=expense_amount,
            paid_to=paid_to,
            pay_mode=pay_mode,
            remarks=remarks,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Type: {expense_type}")
    click.echo(f"  Date: {expense_date}")
    click.echo(f"  Amount: {format_amount(expense_amount)}")
    if paid_to:
        click.echo(f"  Paid to: {paid_to}")


@expense_group.command("list")
@click.option("--start-date", help="Start date (defaults to the first day of this month)")
@click.option("--end-date", help="End date (defaults to the last day of this month)")
@click.pass_context
def list_expenses(ctx, start_date: str | None, end_date: str | None):
    """List expenses."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=month_bounds(date.today()),
    )
    expenses = service.list_expenses(start_date=start, end_date=end)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 80)
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<20} {'Paid To':<24} {'Amount':>14}")
    click.echo("-" * 80)
    for e in expenses:
        click.echo(
            f"{e.id:<6} {str(e.date):<12} {e.expense_type[:20]:<20} "
            f"{(e.paid_to or 'N/A')[:24]:<24} {format_amount(e.amount):>14}"
        )


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
