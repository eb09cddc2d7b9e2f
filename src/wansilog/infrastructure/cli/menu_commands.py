"""CLI commands for the menu catalog."""

from __future__ import annotations

import click

from wansilog.application.dto import CatalogEntryDTO
from wansilog.application.show_menu import ShowMenuHandler
from wansilog.infrastructure.bootstrap import catalog


def echo_entries(entries: list[CatalogEntryDTO]) -> None:
    """Shared formatting for numbered menu and addon lists."""
    for entry in entries:
        click.echo(f"[{entry.number}] {entry.name} - {entry.price}")


@click.command("menu")
def menu_show() -> None:
    """List the menu items and addons."""
    dto = ShowMenuHandler(catalog()).handle()

    click.echo("Menu:")
    echo_entries(dto.items)
    click.echo()
    click.echo("Addons:")
    echo_entries(dto.addons)
