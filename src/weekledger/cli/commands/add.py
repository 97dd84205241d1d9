"""Add entry command."""

import click
from weekledger.domain.entities import EntryType
from weekledger.domain.entry import EntryService
from weekledger.domain.categories import is_suggested_category
from weekledger.cli.error_handling import handle_bad_option, handle_domain_error
from weekledger.cli.formatting import format_money
from weekledger.utils.date_parser import parse_date
from weekledger.utils.amount_parser import parse_amount

ENTRY_TYPE_CHOICE = click.Choice([t.value for t in EntryType], case_sensitive=False)


@click.command("add")
@click.option("--type", "entry_type", required=True, type=ENTRY_TYPE_CHOICE, help="Entry type")
@click.option("--category", required=True, help="Category label (e.g., 'Gas', 'Ventas')")
@click.option("--amount", required=True, help="Amount, never negative (e.g., 123.45)")
@click.option(
    "--date",
    "entry_date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", help="Optional description")
@click.pass_context
def add_entry(
    ctx,
    entry_type: str,
    category: str,
    amount: str,
    entry_date: str,
    description: str | None,
):
    """Add an entry.

    Examples:
        weekledger add --type expense --category Gas --amount 30 --date 2024-05-02
        weekledger add --type income --category Ventas --amount 1200.50
    """
    service = EntryService(ctx.obj["store"])

    try:
        parsed_date = parse_date(entry_date)
    except ValueError as e:
        handle_bad_option(ctx, "date format", e)

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        handle_bad_option(ctx, "amount format", e)

    try:
        entry_id = service.create_entry(
            entry_type=entry_type,
            category=category,
            amount=parsed_amount,
            date=parsed_date,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    parsed_type = EntryType.parse(entry_type)
    click.echo(f"Created entry {entry_id}")
    click.echo(f"  Type: {parsed_type.value}")
    click.echo(f"  Category: {category.strip()}")
    click.echo(f"  Amount: {format_money(parsed_amount)}")
    click.echo(f"  Date: {parsed_date}")
    if description:
        click.echo(f"  Description: {description}")
    if not is_suggested_category(parsed_type, category.strip()):
        click.echo(
            f"Note: '{category.strip()}' is not a suggested {parsed_type.value} category "
            "(see 'weekledger suggested')."
        )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
