"""Completed-sale record as written to the ledger."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from wansilog.domain.exceptions import ValidationError
from wansilog.domain.model.order import LineItem
from wansilog.domain.model.value_objects import Money


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable once created; the ledger never rewrites or deletes one."""

    id: int
    timestamp: datetime
    cashier_name: str
    lines: tuple[LineItem, ...]
    total_amount: Money

    def __post_init__(self) -> None:
        if self.id < 1:
            raise ValidationError(f"Transaction ID must be at least 1, got {self.id}")

    @staticmethod
    def create(
        transaction_id: int,
        timestamp: datetime,
        cashier_name: str,
        lines: tuple[LineItem, ...] | list[LineItem],
        total_amount: Money,
    ) -> TransactionRecord:
        """Build a record holding copies of the lines, not the order's own objects."""
        return TransactionRecord(
            id=transaction_id,
            timestamp=timestamp,
            cashier_name=cashier_name,
            lines=tuple(replace(line) for line in lines),
            total_amount=total_amount,
        )
