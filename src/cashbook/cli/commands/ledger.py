"""Cash book ledger command."""

import threading
from datetime import date

import click
from cashbook.cli.date_filters import resolve_cli_date
from cashbook.cli.formatting import format_amount, truncate
from cashbook.domain.cashbook import CashBookService
from cashbook.domain.entities import ReconciliationResult, TransactionType
from cashbook.domain.refresh import DEFAULT_POLL_INTERVAL

WIDTH = 112


def _row(txn_date: str, particulars: str, txn_type: str, debit: str, credit: str, balance: str, pending: str) -> str:
    return (
        f"{txn_date:<12} {particulars:<38} {txn_type:<8} {debit:>12} {credit:>12} "
        f"{balance:>13} {pending:>12}"
    )


def _display_ledger(result: ReconciliationResult, verbose: bool) -> None:
    """Print the month's cash book with opening and closing rows."""
    info = result.cash_info
    click.echo(
        f"\nCash Book: {result.first_day.strftime('%B %Y')} "
        f"({result.first_day} to {result.last_day})"
    )
    click.echo("=" * WIDTH)
    click.echo(_row("Date", "Particulars", "Type", "Debit", "Credit", "Balance", "Pending"))
    click.echo("-" * WIDTH)
    click.echo(
        _row(
            str(result.first_day),
            "Opening Balance",
            "",
            "",
            "",
            format_amount(info.opening_balance),
            format_amount(info.opening_pending, blank_zero=True),
        )
    )

    for txn in result.transactions:
        particulars = str(txn.particulars)
        if txn.flagged:
            particulars = f"[!] {particulars}"
        txn_date = str(txn.date)
        if verbose and txn.time is not None:
            txn_date = f"{txn.date} {txn.time.strftime('%H:%M')}"
        click.echo(
            _row(
                txn_date,
                truncate(particulars, 38),
                txn.type.value if isinstance(txn.type, TransactionType) else str(txn.type),
                format_amount(txn.debit, blank_zero=True),
                format_amount(txn.credit, blank_zero=True),
                format_amount(txn.running_balance),
                format_amount(txn.pending_balance, blank_zero=True),
            )
        )
        if verbose:
            click.echo(f"{'':<12} id={txn.id} source={txn.source.value}")
            if txn.remarks:
                click.echo(f"{'':<12} remarks: {txn.remarks}")

    click.echo(
        _row(
            str(result.last_day),
            "Closing Balance",
            "",
            "",
            "",
            format_amount(info.closing_balance),
            format_amount(info.total_pending, blank_zero=True),
        )
    )
    click.echo("=" * WIDTH)
    click.echo(f"{'Opening Balance:':<20} {format_amount(info.opening_balance):>16}")
    click.echo(f"{'Total Income:':<20} {format_amount(info.total_income):>16}")
    click.echo(f"{'Total Expense:':<20} {format_amount(info.total_expense):>16}")
    click.echo(f"{'Net Change:':<20} {format_amount(info.net_change):>16}")
    click.echo(f"{'Closing Balance:':<20} {format_amount(info.closing_balance):>16}")
    click.echo(f"{'Total Pending:':<20} {format_amount(info.total_pending):>16}")
    if verbose:
        click.echo(f"{'  Token income:':<20} {format_amount(info.token_income):>16}")
        click.echo(f"{'  Adjustments in:':<20} {format_amount(info.adjustment_income):>16}")
        click.echo(f"{'  Adjustments out:':<20} {format_amount(info.adjustment_expense):>16}")
    if not result.transactions:
        click.echo("\nNo transactions this month.")


@click.command("ledger")
@click.option(
    "--today",
    help="Reference date selecting the month (YYYY-MM-DD or relative like 'last month')",
)
@click.option("--verbose", "-v", is_flag=True, help="Show times, ids, remarks and income breakdown")
@click.option("--watch", is_flag=True, help="Keep polling and redraw the ledger on every refresh")
@click.option(
    "--interval",
    type=float,
    default=DEFAULT_POLL_INTERVAL,
    show_default=True,
    envvar="CASHBOOK_POLL_INTERVAL",
    help="Seconds between refreshes with --watch",
)
@click.pass_context
def show_ledger(ctx, today: str | None, verbose: bool, watch: bool, interval: float):
    """Show the cash book for the current month.

    Tokens, expenses and cash adjustments are merged into one ledger with a
    running balance, starting from the balance carried over from all
    earlier months.

    Examples:
        cashbook ledger
        cashbook ledger --today "last month"
        cashbook ledger --watch --interval 60
    """
    db = ctx.obj["db"]
    service = CashBookService(db)
    reference = resolve_cli_date(ctx, today, "date", default=date.today())

    if not watch:
        _display_ledger(service.get_cash_book(today=reference), verbose)
        return

    def redraw(result: ReconciliationResult) -> None:
        click.clear()
        _display_ledger(result, verbose)

    refresher = service.refresher(
        on_result=redraw,
        today=(lambda: reference) if today else None,
    )
    stop_event = threading.Event()
    try:
        refresher.poll(stop_event, interval=interval)
    except KeyboardInterrupt:
        stop_event.set()
        click.echo("\nStopped.")


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(show_ledger)
