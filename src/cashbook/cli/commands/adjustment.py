"""Cash adjustment commands."""

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
from cashbook.domain.adjustment import CashAdjustmentService
from cashbook.domain.entities import CashAdjustmentRecord
from cashbook.utils.date_parser import month_bounds

ADJUSTMENT_TYPES = click.Choice(["addition", "deduction"], case_sensitive=False)


def _describe(adjustment: CashAdjustmentRecord) -> None:
    click.echo(f"Cash adjustment {adjustment.id}")
    click.echo(f"  Date: {adjustment.date}")
    if adjustment.time is not None:
        click.echo(f"  Time: {adjustment.time.strftime('%H:%M:%S')}")
    click.echo(f"  Type: {adjustment.adjustment_type}")
    click.echo(f"  Amount: {format_amount(adjustment.amount)}")
    click.echo(f"  Reason: {adjustment.reason}")
    if adjustment.reference_number:
        click.echo(f"  Reference: {adjustment.reference_number}")
    if adjustment.entered_by:
        click.echo(f"  Entered by: {adjustment.entered_by}")
    if adjustment.remarks:
        click.echo(f"  Remarks: {adjustment.remarks}")


@click.group()
def adjustment_group():
    """Manage manual cash adjustments."""
    pass


@adjustment_group.command("add")
@click.argument("adjustment_type", type=ADJUSTMENT_TYPES)
@click.option("--amount", required=True, help="Amount added to or removed from cash")
@click.option("--reason", required=True, help="Why the cash balance is corrected")
@click.option("--date", "date_str", help="Adjustment date; defaults to today")
@click.option("--time", "time_str", help="Time of day (HH:MM or HH:MM:SS)")
@click.option("--reference", help="Reference number")
@click.option("--entered-by", help="Who recorded the adjustment")
@click.option("--remarks", help="Remarks")
@click.pass_context
def add_adjustment(
    ctx,
    adjustment_type: str,
    amount: str,
    reason: str,
    date_str: str | None,
    time_str: str | None,
    reference: str | None,
    entered_by: str | None,
    remarks: str | None,
):
    """Record a cash addition or deduction.

    Examples:
        cashbook adjustment add addition --amount 100 --reason "Counted excess"
        cashbook adjustment add deduction --amount 50 --reason "Short" --reference V-12
    """
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    adjustment_date = resolve_cli_date(ctx, date_str, "date", default=date.today())
    adjustment_time = resolve_cli_time(ctx, time_str)
    adjustment_amount = resolve_cli_amount(ctx, amount)

    try:
        adjustment_id = service.create_adjustment(
            date=adjustment_date,
            amount=adjustment_amount,
            adjustment_type=adjustment_type,
            reason=reason,
            time=adjustment_time,
            reference_number=reference,
            entered_by=entered_by,
            remarks=remarks,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created cash adjustment {adjustment_id}")
    click.echo(f"  {adjustment_type.capitalize()} of {format_amount(adjustment_amount)} on {adjustment_date}")


@adjustment_group.command("list")
@click.option("--start-date", help="Start date (defaults to the first day of this month)")
@click.option("--end-date", help="End date (defaults to the last day of this month)")
@click.option("--type", "adjustment_type", type=ADJUSTMENT_TYPES, help="Only show this type")
@click.option("--limit", type=click.IntRange(min=1), help="Show at most this many adjustments")
@click.pass_context
def list_adjustments(
    ctx,
    start_date: str | None,
    end_date: str | None,
    adjustment_type: str | None,
    limit: int | None,
):
    """List cash adjustments, most recent first."""
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=month_bounds(date.today()),
    )
    adjustments = service.list_adjustments(
        start_date=start, end_date=end, adjustment_type=adjustment_type, limit=limit
    )

    if not adjustments:
        click.echo("No cash adjustments found.")
        return

    click.echo(f"\nFound {len(adjustments)} cash adjustment(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Time':<9} {'Type':<10} {'Amount':>12}  {'Reason':<36}")
    click.echo("-" * 90)
    for adj in adjustments:
        adj_time = adj.time.strftime("%H:%M:%S") if adj.time is not None else ""
        click.echo(
            f"{adj.id:<6} {str(adj.date):<12} {adj_time:<9} {adj.adjustment_type:<10} "
            f"{format_amount(adj.amount):>12}  {adj.reason[:36]:<36}"
        )


@adjustment_group.command("show")
@click.argument("adjustment_id", type=int)
@click.pass_context
def show_adjustment(ctx, adjustment_id: int):
    """Show one cash adjustment."""
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    try:
        adjustment = service.require_adjustment(adjustment_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _describe(adjustment)


@adjustment_group.command("update")
@click.argument("adjustment_id", type=int)
@click.option("--type", "adjustment_type", type=ADJUSTMENT_TYPES, help="New type")
@click.option("--amount", help="New amount")
@click.option("--reason", help="New reason")
@click.option("--date", "date_str", help="New date")
@click.option("--time", "time_str", help="New time of day")
@click.option("--reference", help="New reference number")
@click.option("--entered-by", help="New recorder name")
@click.option("--remarks", help="New remarks")
@click.pass_context
def update_adjustment(
    ctx,
    adjustment_id: int,
    adjustment_type: str | None,
    amount: str | None,
    reason: str | None,
    date_str: str | None,
    time_str: str | None,
    reference: str | None,
    entered_by: str | None,
    remarks: str | None,
):
    """Update a cash adjustment."""
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    try:
        adjustment = service.update_adjustment(
            adjustment_id,
            date=resolve_cli_date(ctx, date_str, "date"),
            time=resolve_cli_time(ctx, time_str),
            amount=resolve_cli_amount(ctx, amount),
            adjustment_type=adjustment_type,
            reason=reason,
            reference_number=reference,
            entered_by=entered_by,
            remarks=remarks,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Updated:")
    _describe(adjustment)


@adjustment_group.command("delete")
@click.argument("adjustment_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_adjustment(ctx, adjustment_id: int, yes: bool):
    """Delete a cash adjustment."""
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    try:
        adjustment = service.require_adjustment(adjustment_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not yes and not click.confirm(
        f"Delete {adjustment.adjustment_type} of {format_amount(adjustment.amount)} "
        f"on {adjustment.date}?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete_adjustment(adjustment_id)
    click.echo(f"Deleted cash adjustment {adjustment_id}")


@adjustment_group.command("summary")
@click.option("--start-date", help="Start date (defaults to the first day of this month)")
@click.option("--end-date", help="End date (defaults to the last day of this month)")
@click.pass_context
def adjustment_summary(ctx, start_date: str | None, end_date: str | None):
    """Total additions and deductions over a date range."""
    db = ctx.obj["db"]
    service = CashAdjustmentService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=month_bounds(date.today()),
    )
    if start is None or end is None:
        click.echo("Error: Both --start-date and --end-date are required when one is given.", err=True)
        ctx.exit(1)

    try:
        summary = service.get_summary(start, end)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nCash adjustments {summary.start_date} to {summary.end_date}")
    click.echo("-" * 50)
    click.echo(f"{'Additions':<20} {summary.addition_count:>5} {format_amount(summary.additions):>20}")
    click.echo(f"{'Deductions':<20} {summary.deduction_count:>5} {format_amount(summary.deductions):>20}")
    click.echo(f"{'Net adjustment':<26} {format_amount(summary.net_adjustment):>20}")


def register_commands(cli):
    """Register cash adjustment commands with main CLI."""
    cli.add_command(adjustment_group, name="adjustment")
