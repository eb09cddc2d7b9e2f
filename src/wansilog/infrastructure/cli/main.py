from pathlib import Path

import click

from wansilog.infrastructure.bootstrap import (
    DATA_DIR_ENVVAR,
    DEFAULT_DATA_DIR,
    LOG_LEVEL_ENVVAR,
)
from wansilog.infrastructure.cli.ledger_commands import ledger_next_id, ledger_show
from wansilog.infrastructure.cli.menu_commands import menu_show
from wansilog.infrastructure.cli.register_commands import register_run
from wansilog.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar=DATA_DIR_ENVVAR,
    show_default=True,
    help="Directory holding the transaction logs.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar=LOG_LEVEL_ENVVAR,
    show_default=True,
    help="Logging verbosity (logs go to stderr).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Wansilog: cash register for a silog stall"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def ledger() -> None:
    """Inspect the transaction ledger."""


# Register subcommands
cli.add_command(menu_show)
cli.add_command(register_run)
ledger.add_command(ledger_next_id)
ledger.add_command(ledger_show)
