"""Entry management commands."""

import click
from weekledger.domain.entry import EntryService
from weekledger.cli.commands.add import ENTRY_TYPE_CHOICE
from weekledger.cli.error_handling import handle_bad_option, handle_domain_error
from weekledger.cli.formatting import (
    echo_entry_header,
    echo_entry_row,
    format_money,
)
from weekledger.utils.date_parser import parse_date
from weekledger.utils.amount_parser import parse_amount


@click.group("entry")
def entry_group():
    """Manage entries."""
    pass


@entry_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Only entries of this type")
@click.pass_context
def list_entries(ctx, start_date: str | None, end_date: str | None, entry_type: str | None):
    """List entries, most recent first."""
    service = EntryService(ctx.obj["store"])

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            handle_bad_option(ctx, "start date", e)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            handle_bad_option(ctx, "end date", e)

    entries = service.list_entries(start_date=start, end_date=end, entry_type=entry_type)
    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    echo_entry_header()
    for entry in entries:
        echo_entry_row(entry)


@entry_group.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str):
    """Show one entry in full."""
    service = EntryService(ctx.obj["store"])
    try:
        entry = service.require_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Entry ID: {entry.id}")
    click.echo(f"  Type: {entry.type.value}")
    click.echo(f"  Category: {entry.category}")
    click.echo(f"  Amount: {format_money(entry.amount)}")
    click.echo(f"  Date: {entry.date}")
    if entry.description:
        click.echo(f"  Description: {entry.description}")


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Entry type")
@click.option("--category", help="Category label")
@click.option("--amount", help="Amount, never negative")
@click.option("--date", "entry_date", help="Entry date (YYYY-MM-DD or relative like 'today')")
@click.option("--description", help="Description, empty to clear")
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    entry_type: str | None,
    category: str | None,
    amount: str | None,
    entry_date: str | None,
    description: str | None,
):
    """Update an entry.

    Updates only the fields that are provided.

    Examples:
        weekledger entry update 3f2a... --amount 45.00
        weekledger entry update 3f2a... --type income --category Ventas
        weekledger entry update 3f2a... --description ""
    """
    service = EntryService(ctx.obj["store"])

    parsed_date = None
    if entry_date is not None:
        try:
            parsed_date = parse_date(entry_date)
        except ValueError as e:
            handle_bad_option(ctx, "date format", e)

    parsed_amount = None
    if amount is not None:
        try:
            parsed_amount = parse_amount(amount)
        except ValueError as e:
            handle_bad_option(ctx, "amount format", e)

    try:
        service.update_entry(
            entry_id,
            entry_type=entry_type,
            category=category,
            amount=parsed_amount,
            date=parsed_date,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.confirmation_option(prompt="Are you sure you want to delete this entry?")
@click.pass_context
def delete_entry(ctx, entry_id: str):
    """Delete an entry."""
    service = EntryService(ctx.obj["store"])
    try:
        service.delete_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group)
