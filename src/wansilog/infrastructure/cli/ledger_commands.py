"""CLI commands for the transaction ledger."""

from __future__ import annotations

import click

from wansilog.infrastructure.bootstrap import ledger


@click.command("next-id")
@click.pass_obj
def ledger_next_id(obj: dict) -> None:
    """Print the ID the next sale will get."""
    click.echo(ledger(obj["data_dir"]).next_id)


@click.command("show")
@click.option("--last", "last", default=5, show_default=True, type=click.IntRange(min=1),
              help="Number of most recent records to print.")
@click.pass_obj
def ledger_show(obj: dict, last: int) -> None:
    """Print the most recent records from the primary log."""
    try:
        blocks = ledger(obj["data_dir"]).read_blocks()
    except OSError as exc:
        raise click.ClickException(f"Cannot read transaction log: {exc}")

    if not blocks:
        click.echo("No transactions recorded yet.")
        return
    for block in blocks[-last:]:
        click.echo(block)
