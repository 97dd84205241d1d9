"""Export command."""

from datetime import date
from pathlib import Path

import click
from weekledger.domain.entry import EntryService
from weekledger.domain.export import export_filename, write_export


@click.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (defaults to gastos-ingresos-YYYY-MM-DD.json in the current directory)",
)
@click.pass_context
def export_entries(ctx, output: Path | None):
    """Export all entries as a JSON backup file."""
    entries = EntryService(ctx.obj["store"]).list_entries()

    if output is None:
        output = Path(export_filename(date.today()))

    write_export(entries, output)
    click.echo(f"Exported {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} to {output}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_entries)
