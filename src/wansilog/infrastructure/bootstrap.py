"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from wansilog.domain.model.cashier import Cashier
from wansilog.domain.model.catalog import DEFAULT_CATALOG, Catalog
from wansilog.infrastructure.persistence.in_memory_cashier_repository import (
    InMemoryCashierRepository,
)
from wansilog.infrastructure.persistence.text_ledger import TextFileLedger

DATA_DIR_ENVVAR = "WANSILOG_DATA_DIR"
LOG_LEVEL_ENVVAR = "WANSILOG_LOG_LEVEL"
DEFAULT_DATA_DIR = Path("data")

PRIMARY_LOG_NAME = "transactions.txt"
BACKUP_LOG_NAME = "transactions_backup.txt"

# Accounts every fresh register starts with. Sign-ups last until exit.
DEFAULT_CASHIERS = (
    ("karl", "Lonely123"),
    ("cashier", "Cashier123"),
)


def catalog() -> Catalog:
    return DEFAULT_CATALOG


def ledger(data_dir: Path) -> TextFileLedger:
    """Build the process-wide ledger; recovers the next ID from disk."""
    return TextFileLedger(data_dir / PRIMARY_LOG_NAME, data_dir / BACKUP_LOG_NAME)


def cashier_repository() -> InMemoryCashierRepository:
    return InMemoryCashierRepository(
        [Cashier(username=name, password=password) for name, password in DEFAULT_CASHIERS]
    )
