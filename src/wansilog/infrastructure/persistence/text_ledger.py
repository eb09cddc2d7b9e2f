"""Text-file implementation of the Ledger (primary log + backup log)."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from wansilog.domain.exceptions import PersistenceError
from wansilog.domain.model.order import LineItem
from wansilog.domain.model.transaction import TransactionRecord
from wansilog.domain.model.value_objects import Money
from wansilog.domain.repository.ledger import AppendOutcome, Ledger

logger = logging.getLogger(__name__)

ID_PREFIX = "Transaction ID:"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
RECORD_SEPARATOR = "=" * 45
ID_PATTERN = re.compile(r"[0-9]+")


def format_record(record: TransactionRecord) -> str:
    """Render a record as the block appended to both logs."""
    rows = [
        f"{ID_PREFIX} {record.id}",
        f"Date & Time: {record.timestamp.strftime(TIMESTAMP_FORMAT)}",
        f"Cashier: {record.cashier_name}",
        "Items Purchased:",
    ]
    for line in record.lines:
        rows.append(f"  - {line.describe()}")
    rows.append(f"Total Amount: {record.total_amount}")
    rows.append(RECORD_SEPARATOR)
    return "\n".join(rows) + "\n"


def parse_transaction_id(line: str) -> int | None:
    """Return the ID on a ``Transaction ID:`` line, None for any other line.

    Raises ValueError when the line has the prefix but no usable integer.
    """
    if not line.startswith(ID_PREFIX):
        return None
    text = line[len(ID_PREFIX):].strip()
    if not ID_PATTERN.fullmatch(text):
        raise ValueError(f"not a transaction ID: {text!r}")
    value = int(text)
    if value < 1:
        raise ValueError(f"transaction ID must be positive, got {value}")
    return value


class TextFileLedger(Ledger):

    def __init__(self, primary_path: Path, backup_path: Path) -> None:
        self._primary_path = primary_path
        self._backup_path = backup_path
        self._next_id = 1
        self.recover_next_id()

    # --- Ledger interface -----------------------------------------------------

    @property
    def next_id(self) -> int:
        return self._next_id

    def recover_next_id(self) -> int:
        """Set the counter to one past the highest ID in either log.

        Takes the maximum rather than the last ID so out-of-order or
        partially written blocks cannot move the counter backwards.
        """
        highest = max(
            self._highest_id(self._primary_path),
            self._highest_id(self._backup_path),
        )
        self._next_id = highest + 1
        logger.info("Ledger recovered; next transaction ID is %d", self._next_id)
        return self._next_id

    def append(
        self,
        cashier_name: str,
        lines: tuple[LineItem, ...] | list[LineItem],
        total_amount: Money,
        timestamp: datetime | None = None,
    ) -> AppendOutcome:
        record = TransactionRecord.create(
            transaction_id=self._next_id,
            timestamp=timestamp or datetime.now(),
            cashier_name=cashier_name,
            lines=lines,
            total_amount=total_amount,
        )
        # The ID is consumed even if both writes fail.
        self._next_id += 1

        block = format_record(record)
        failures: list[PersistenceError] = []
        for label, path in (("primary", self._primary_path), ("backup", self._backup_path)):
            try:
                self._append_text(path, block)
            except OSError as exc:
                error = PersistenceError(
                    f"Problem writing transaction {record.id} to {label} log {path}: {exc}"
                )
                logger.error("%s", error)
                failures.append(error)

        if not failures:
            logger.info("Transaction %d recorded (%s)", record.id, record.total_amount)
        return AppendOutcome(record=record, failures=tuple(failures))

    # --- File helpers ---------------------------------------------------------

    def read_blocks(self) -> list[str]:
        """Return the primary log split into record blocks, oldest first."""
        if not self._primary_path.exists():
            return []
        blocks: list[str] = []
        current: list[str] = []
        with self._primary_path.open(encoding="utf-8", errors="replace") as handle:
            for line in handle:
                current.append(line.rstrip("\n"))
                if line.rstrip("\n") == RECORD_SEPARATOR:
                    blocks.append("\n".join(current))
                    current = []
        # trailing fragment from an interrupted write
        if any(row.strip() for row in current):
            blocks.append("\n".join(current))
        return blocks

    @staticmethod
    def _append_text(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(text)

    @staticmethod
    def _highest_id(path: Path) -> int:
        if not path.exists():
            return 0

        highest = 0
        try:
            with path.open(encoding="utf-8", errors="replace") as handle:
                for line_number, line in enumerate(handle, start=1):
                    try:
                        found = parse_transaction_id(line)
                    except ValueError:
                        logger.warning(
                            "Skipping unreadable transaction ID at %s:%d: %r",
                            path, line_number, line.rstrip("\n"),
                        )
                        continue
                    if found is not None and found > highest:
                        highest = found
        except OSError as exc:
            logger.error("Error loading transaction counter from %s: %s", path, exc)
        return highest
