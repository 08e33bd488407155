"""CLI tests for token, expense and cash adjustment commands."""

from datetime import date
from decimal import Decimal

from cashbook.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_token_add_and_list(cli_runner, temp_db):
    """Test adding a token and listing it."""
    result = _invoke(
        cli_runner,
        temp_db,
        "token",
        "add",
        "T-101",
        "--amount",
        "₹1,500",
        "--date",
        "2024-03-05",
        "--name",
        "Ravi",
        "--test",
        "Gold",
    )

    assert result.exit_code == 0
    assert "Created token 1" in result.output
    assert "Amount: ₹1,500.00" in result.output
    assert "Status: Pending" in result.output

    result = _invoke(
        cli_runner, temp_db, "token", "list", "--start-date", "2024-03-01", "--end-date", "2024-03-31"
    )
    assert result.exit_code == 0
    assert "Found 1 token(s)" in result.output
    assert "T-101" in result.output


def test_token_add_duplicate(cli_runner, temp_db, token_service):
    """Test that duplicate token numbers are reported."""
    token_service.create_token(token_no="T-1", date=date(2024, 3, 1), amount=Decimal("10"))

    result = _invoke(cli_runner, temp_db, "token", "add", "T-1", "--amount", "10")

    assert result.exit_code == 1
    assert "Error: Token number 'T-1' already exists" in result.output


def test_token_add_invalid_amount(cli_runner, temp_db):
    """Test an unparseable amount."""
    result = _invoke(cli_runner, temp_db, "token", "add", "T-1", "--amount", "lots")

    assert result.exit_code == 1
    assert "Error: Invalid amount format" in result.output


def test_token_pay_and_pending_filter(cli_runner, temp_db, token_service):
    """Test settling a token and filtering pending tokens."""
    paid_id = token_service.create_token(token_no="A", date=date(2024, 3, 1), amount=Decimal("10"))
    token_service.create_token(token_no="B", date=date(2024, 3, 2), amount=Decimal("20"))

    result = _invoke(cli_runner, temp_db, "token", "pay", str(paid_id))
    assert result.exit_code == 0
    assert "Token A marked paid (₹10.00)" in result.output

    result = _invoke(
        cli_runner,
        temp_db,
        "token",
        "list",
        "--start-date",
        "2024-03-01",
        "--end-date",
        "2024-03-31",
        "--pending",
    )
    assert "Found 1 token(s)" in result.output
    assert " B " in result.output


def test_token_pay_missing(cli_runner, temp_db):
    """Test paying an unknown token."""
    result = _invoke(cli_runner, temp_db, "token", "pay", "99")

    assert result.exit_code == 1
    assert "Error: Token 99 not found" in result.output


def test_token_list_empty(cli_runner, temp_db):
    """Test listing with no tokens."""
    result = _invoke(cli_runner, temp_db, "token", "list")

    assert result.exit_code == 0
    assert "No tokens found." in result.output


def test_expense_add_and_list(cli_runner, temp_db):
    """Test adding and listing expenses."""
    result = _invoke(
        cli_runner,
        temp_db,
        "expense",
        "add",
        "Rent",
        "--amount",
        "5000",
        "--paid-to",
        "Landlord",
        "--date",
        "2024-03-02",
    )
    assert result.exit_code == 0
    assert "Created expense 1" in result.output
    assert "Paid to: Landlord" in result.output

    result = _invoke(
        cli_runner, temp_db, "expense", "list", "--start-date", "2024-03-01", "--end-date", "2024-03-31"
    )
    assert "Found 1 expense(s)" in result.output
    assert "₹5,000.00" in result.output


def test_expense_list_rejects_inverted_range(cli_runner, temp_db):
    """Test that a start date after the end date is rejected."""
    result = _invoke(
        cli_runner, temp_db, "expense", "list", "--start-date", "2024-03-31", "--end-date", "2024-03-01"
    )

    assert result.exit_code == 1
    assert "Start date must not be after end date" in result.output


def test_adjustment_lifecycle(cli_runner, temp_db):
    """Test add, show, update, summary and delete of a cash adjustment."""
    result = _invoke(
        cli_runner,
        temp_db,
        "adjustment",
        "add",
        "ADDITION",
        "--amount",
        "100",
        "--reason",
        "Counted excess",
        "--date",
        "2024-03-05",
        "--time",
        "18:30",
        "--reference",
        "V-12",
    )
    assert result.exit_code == 0
    assert "Created cash adjustment 1" in result.output
    assert "Addition of ₹100.00 on 2024-03-05" in result.output

    result = _invoke(cli_runner, temp_db, "adjustment", "show", "1")
    assert result.exit_code == 0
    assert "Time: 18:30:00" in result.output
    assert "Reference: V-12" in result.output

    result = _invoke(
        cli_runner, temp_db, "adjustment", "update", "1", "--type", "deduction", "--amount", "40"
    )
    assert result.exit_code == 0
    assert "Updated:" in result.output
    assert "Type: deduction" in result.output
    assert "Amount: ₹40.00" in result.output

    result = _invoke(
        cli_runner,
        temp_db,
        "adjustment",
        "summary",
        "--start-date",
        "2024-03-01",
        "--end-date",
        "2024-03-31",
    )
    assert result.exit_code == 0
    assert "Net adjustment" in result.output
    assert "-₹40.00" in result.output

    result = _invoke(cli_runner, temp_db, "adjustment", "delete", "1", input="n\n")
    assert "Deletion cancelled." in result.output

    result = _invoke(cli_runner, temp_db, "adjustment", "delete", "1", "--yes")
    assert result.exit_code == 0
    assert "Deleted cash adjustment 1" in result.output

    result = _invoke(cli_runner, temp_db, "adjustment", "show", "1")
    assert result.exit_code == 1
    assert "Error: Cash adjustment 1 not found" in result.output


def test_adjustment_list_filters(cli_runner, temp_db, adjustment_service):
    """Test listing adjustments by type."""
    adjustment_service.create_adjustment(
        date=date(2024, 3, 1), amount=Decimal("10"), adjustment_type="addition", reason="Excess"
    )
    adjustment_service.create_adjustment(
        date=date(2024, 3, 2), amount=Decimal("20"), adjustment_type="deduction", reason="Lost"
    )

    result = _invoke(
        cli_runner,
        temp_db,
        "adjustment",
        "list",
        "--start-date",
        "2024-03-01",
        "--end-date",
        "2024-03-31",
        "--type",
        "deduction",
    )

    assert result.exit_code == 0
    assert "Found 1 cash adjustment(s)" in result.output
    assert "Lost" in result.output
    assert "Excess" not in result.output


def test_adjustment_add_requires_reason(cli_runner, temp_db):
    """Test that --reason is required."""
    result = _invoke(cli_runner, temp_db, "adjustment", "add", "addition", "--amount", "5")

    assert result.exit_code == 2
    assert "--reason" in result.output


def test_adjustment_add_rejects_unknown_type(cli_runner, temp_db):
    """Test that only addition and deduction are accepted."""
    result = _invoke(
        cli_runner, temp_db, "adjustment", "add", "transfer", "--amount", "5", "--reason", "x"
    )

    assert result.exit_code == 2
