"""Text formatting helpers shared by CLI commands."""

from decimal import Decimal

import click

from weekledger.domain.entities import Entry, Totals

RULE_WIDTH = 80


def format_money(amount: Decimal) -> str:
    """Format an amount as e.g. '$1,234.50'; negatives as '-$12.00'."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def echo_totals(totals: Totals) -> None:
    """Print the four totals lines."""
    click.echo(f"{'Income':<50} {format_money(totals.income):>20}")
    click.echo(f"{'Expense':<50} {format_money(totals.expense):>20}")
    click.echo(f"{'Investment':<50} {format_money(totals.investment):>20}")
    click.echo("-" * RULE_WIDTH)
    click.echo(f"{'Balance (income - investment)':<50} {format_money(totals.balance):>20}")


def echo_entry_row(entry: Entry) -> None:
    """Print an entry as one compact table row."""
    description = (entry.description or "")[:24]
    click.echo(
        f"{entry.id[:8]:<10} {str(entry.date):<12} {entry.type.value:<11} "
        f"{entry.category[:20]:<20} {format_money(entry.amount):>14} {description}"
    )


def echo_entry_header() -> None:
    """Print the header matching echo_entry_row."""
    click.echo(
        f"{'ID':<10} {'Date':<12} {'Type':<11} {'Category':<20} {'Amount':>14} Description"
    )
    click.echo("-" * RULE_WIDTH)
