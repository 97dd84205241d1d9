"""Summary commands: totals, work weeks, months and categories."""

from datetime import date

import click
from weekledger.domain.aggregation import category_shares
from weekledger.domain.categories import suggested_categories
from weekledger.domain.entities import EntryType
from weekledger.domain.periods import format_week_period
from weekledger.domain.series import DEFAULT_WEEK_LIMIT, category_series, weekly_series
from weekledger.domain.summary import SummaryService
from weekledger.cli.commands.add import ENTRY_TYPE_CHOICE
from weekledger.cli.error_handling import handle_bad_option
from weekledger.cli.formatting import (
    RULE_WIDTH,
    echo_entry_row,
    echo_totals,
    format_money,
)
from weekledger.utils.date_parser import parse_date


def _resolve_types(entry_type: str | None) -> list[EntryType]:
    if entry_type is None:
        return list(EntryType)
    return [EntryType.parse(entry_type)]


@click.command("summary")
@click.option(
    "--date",
    "reference_date",
    help="Reference date for the current work week (defaults to today)",
)
@click.pass_context
def summary(ctx, reference_date: str | None):
    """Show overall totals and the current work week (Thu-Sun)."""
    now = date.today()
    if reference_date:
        try:
            now = parse_date(reference_date)
        except ValueError as e:
            handle_bad_option(ctx, "date", e)

    report = SummaryService(ctx.obj["store"]).build_summary_report(now=now)

    click.echo("\nOverall Totals:")
    click.echo("-" * RULE_WIDTH)
    echo_totals(report.totals)
    click.echo("=" * RULE_WIDTH)

    click.echo(f"\nCurrent Work Week ({report.current_week.period}):")
    click.echo("-" * RULE_WIDTH)
    echo_totals(report.current_week)
    click.echo("=" * RULE_WIDTH)


@click.command("weeks")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    help="Only show the most recent N work weeks",
)
@click.option("--chart", is_flag=True, help=f"Show the chart series (last {DEFAULT_WEEK_LIMIT} weeks by default)")
@click.pass_context
def weeks(ctx, limit: int | None, chart: bool):
    """Show entries grouped by work week (Thu-Sun), most recent first.

    Entries dated Monday to Wednesday fall outside every work week and are
    only counted in the overall totals.
    """
    buckets = SummaryService(ctx.obj["store"]).get_weekly_buckets()

    if not buckets:
        click.echo("No entries found.")
        return

    if chart:
        points = weekly_series(buckets, limit or DEFAULT_WEEK_LIMIT)
        click.echo(f"\n{'Week':<10} {'Income':>20} {'Expense':>20} {'Investment':>20}")
        click.echo("-" * RULE_WIDTH)
        for point in points:
            click.echo(
                f"{point.label:<10} {format_money(point.income):>20} "
                f"{format_money(point.expense):>20} {format_money(point.investment):>20}"
            )
        return

    if limit is not None:
        buckets = buckets[:limit]

    for bucket in buckets:
        count = len(bucket.entries)
        click.echo(
            f"\n{format_week_period(bucket.week_start, bucket.week_end)} {bucket.week_end.year} "
            f"(Thu-Sun) - {count} entr{'y' if count == 1 else 'ies'}"
        )
        click.echo("-" * RULE_WIDTH)
        for entry in bucket.entries:
            echo_entry_row(entry)
        click.echo("-" * RULE_WIDTH)
        click.echo(
            f"Income {format_money(bucket.income)}  Expense {format_money(bucket.expense)}  "
            f"Investment {format_money(bucket.investment)}  Balance {format_money(bucket.balance)}"
        )


@click.command("months")
@click.option("--year", type=int, help="Calendar year (defaults to the current year)")
@click.pass_context
def months(ctx, year: int | None):
    """Show monthly totals for every month of a year."""
    if year is None:
        year = date.today().year

    buckets = SummaryService(ctx.obj["store"]).get_monthly_buckets(year)

    click.echo(f"\nMonthly Totals {year}:")
    click.echo("-" * RULE_WIDTH)
    click.echo(f"{'Month':<14} {'Income':>20} {'Expense':>20} {'Investment':>20}")
    click.echo("-" * RULE_WIDTH)
    for bucket in buckets:
        click.echo(
            f"{bucket.label:<14} {format_money(bucket.income):>20} "
            f"{format_money(bucket.expense):>20} {format_money(bucket.investment):>20}"
        )


@click.command("categories")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Only this entry type")
@click.pass_context
def categories(ctx, entry_type: str | None):
    """Show totals per category with their share of the type total."""
    report = SummaryService(ctx.obj["store"]).build_summary_report()

    for current_type in _resolve_types(entry_type):
        mapping = report.category_totals.for_type(current_type)
        type_total = report.totals.for_type(current_type)
        shares = category_shares(mapping, type_total)

        click.echo(f"\n{current_type.value.capitalize()} by Category:")
        click.echo("-" * RULE_WIDTH)
        if not mapping:
            click.echo("No entries.")
            continue

        for point in category_series(mapping):
            click.echo(
                f"    {point.label:<40} {format_money(point.value):>20} "
                f"{shares[point.label]:>10.1f}%"
            )
        click.echo("-" * RULE_WIDTH)
        click.echo(f"{'Subtotal':<44} {format_money(type_total):>20}")


@click.command("suggested")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Only this entry type")
def suggested(entry_type: str | None):
    """List suggested category labels per entry type."""
    for current_type in _resolve_types(entry_type):
        click.echo(f"{current_type.value}: {', '.join(suggested_categories(current_type))}")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(weeks)
    cli.add_command(months)
    cli.add_command(categories)
    cli.add_command(suggested)
