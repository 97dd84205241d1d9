"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested entry does not exist."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry '{entry_id}' not found"


def negative_amount(amount: Decimal) -> str:
    """Return message for an amount below zero."""
    return f"Amount must not be negative, got {amount}"


def too_many_decimal_places(amount: Decimal) -> str:
    """Return message for an amount finer than whole cents."""
    return f"Amount must have at most two decimal places, got {amount}"


def empty_category() -> str:
    """Return message for a missing category label."""
    return "Category must not be empty"


def unknown_entry_type(value: str) -> str:
    """Return message for a type outside the closed enumeration."""
    return f"Unknown entry type '{value}'. Supported types: expense, income, investment"
