"""Token management commands."""

from datetime import date

import click
from cashbook.cli.date_filters import (
    resolve_cli_amount,
    resolve_cli_date,
    resolve_cli_date_range,
    resolve_cli_time,
)
from cashbook.cli.error_handling import handle_domain_error
from cashbook.cli.formatting import format_amount
from cashbook.domain.token import TokenService
from cashbook.utils.date_parser import month_bounds


@click.group()
def token_group():
    """Manage sales tokens."""
    pass


@token_group.command("add")
@click.argument("token_no", metavar="TOKEN_NO")
@click.option("--amount", required=True, help="Amount charged (e.g., 150 or ₹150.00)")
@click.option("--date", "date_str", help="Token date (YYYY-MM-DD or 'today'); defaults to today")
@click.option("--time", "time_str", help="Time of day (HH:MM or HH:MM:SS)")
@click.option("--name", help="Customer name")
@click.option("--test", help="Test performed")
@click.option("--paid/--unpaid", default=False, help="Whether the customer has paid (default: unpaid)")
@click.pass_context
def add_token(
    ctx,
    token_no: str,
    amount: str,
    date_str: str | None,
    time_str: str | None,
    name: str | None,
    test: str | None,
    paid: bool,
):
    """Add a sales token.

    Unpaid tokens show up as pending in the cash book until marked paid.

    Examples:
        cashbook token add T-101 --amount 150 --name "Ravi" --test "Gold" --paid
        cashbook token add T-102 --amount 200 --date yesterday
    """
    db = ctx.obj["db"]
    service = TokenService(db)

    token_date = resolve_cli_date(ctx, date_str, "date", default=date.today())
    token_time = resolve_cli_time(ctx, time_str)
    token_amount = resolve_cli_amount(ctx, amount)

    try:
        token_id = service.create_token(
            token_no=token_no,
            date=token_date,
            amount=token_amount,
            time=token_time,
            name=name,
            test=test,
            is_paid=paid,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created token {token_id}")
    click.echo(f"  Token No: {token_no}")
    click.echo(f"  Date: {token_date}")
    click.echo(f"  Amount: {format_amount(token_amount)}")
    click.echo(f"  Status: {'Paid' if paid else 'Pending'}")


@token_group.command("list")
@click.option("--start-date", help="Start date (defaults to the first day of this month)")
@click.option("--end-date", help="End date (defaults to the last day of this month)")
@click.option("--pending", "pending_only", is_flag=True, help="Only show unpaid tokens")
@click.pass_context
def list_tokens(ctx, start_date: str | None, end_date: str | None, pending_only: bool):
    """List tokens."""
    db = ctx.obj["db"]
    service = TokenService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=month_bounds(date.today()),
    )
    tokens = service.list_tokens(start_date=start, end_date=end)
    if pending_only:
        tokens = [t for t in tokens if not t.is_paid]

    if not tokens:
        click.echo("No tokens found.")
        return

    click.echo(f"\nFound {len(tokens)} token(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Token No':<12} {'Name':<20} {'Test':<16} {'Amount':>12} {'Status':<8}")
    click.echo("-" * 90)
    for t in tokens:
        click.echo(
            f"{t.id:<6} {str(t.date):<12} {t.token_no:<12} {(t.name or '')[:20]:<20} "
            f"{(t.test or '')[:16]:<16} {format_amount(t.amount):>12} "
            f"{'Paid' if t.is_paid else 'Pending':<8}"
        )


@token_group.command("pay")
@click.argument("token_id", type=int)
@click.option("--undo", is_flag=True, help="Mark the token unpaid again")
@click.pass_context
def pay_token(ctx, token_id: int, undo: bool):
    """Mark a token paid, moving its amount from pending into income."""
    db = ctx.obj["db"]
    service = TokenService(db)

    try:
        token = service.set_paid(token_id, is_paid=not undo)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    status = "paid" if token.is_paid else "unpaid"
    click.echo(f"Token {token.token_no} marked {status} ({format_amount(token.amount)})")


def register_commands(cli):
    """Register token commands with main CLI."""
    cli.add_command(token_group, name="token")
