"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def token_not_found(token_id: int) -> str:
    """Return message for missing token."""
    return f"Token {token_id} not found"


def adjustment_not_found(adjustment_id: int) -> str:
    """Return message for missing cash adjustment."""
    return f"Cash adjustment {adjustment_id} not found"


def duplicate_token_number(token_no: str) -> str:
    """Return message for a token number that is already taken."""
    return f"Token number '{token_no}' already exists"


def invalid_adjustment_type(adjustment_type: str) -> str:
    """Return message for an adjustment type other than addition/deduction."""
    return (
        f"Invalid adjustment type '{adjustment_type}'. "
        "Expected 'addition' or 'deduction'"
    )


def non_positive_amount(amount) -> str:
    """Return message for an amount that must be greater than zero."""
    return f"Amount must be greater than zero, got {amount}"


def missing_field(field_name: str) -> str:
    """Return message for a required field left empty."""
    return f"{field_name} is required"
