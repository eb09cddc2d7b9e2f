"""Abstract transaction ledger.

Defined in the domain layer so the checkout never depends on how
records are stored. The concrete text-file ledger lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from wansilog.domain.exceptions import PersistenceError
from wansilog.domain.model.order import LineItem
from wansilog.domain.model.transaction import TransactionRecord
from wansilog.domain.model.value_objects import Money


@dataclass(frozen=True)
class AppendOutcome:
    """Result of one append: the record plus any write that failed.

    A record with failures is still a completed sale; the failures are
    reported, not retried.
    """

    record: TransactionRecord
    failures: tuple[PersistenceError, ...] = ()

    @property
    def fully_persisted(self) -> bool:
        return not self.failures


class Ledger(ABC):
    """Append-only store of completed sales owning the transaction ID counter.

    One instance per process. Not safe for concurrent checkouts: ID
    allocation and the write would need a lock or transaction boundary.
    """

    @property
    @abstractmethod
    def next_id(self) -> int:
        """The ID the next append will assign."""

    @abstractmethod
    def recover_next_id(self) -> int:
        """Rebuild the counter from what is already stored and return it."""

    @abstractmethod
    def append(
        self,
        cashier_name: str,
        lines: tuple[LineItem, ...] | list[LineItem],
        total_amount: Money,
        timestamp: datetime | None = None,
    ) -> AppendOutcome:
        """Assign the next ID and store one record. Not idempotent."""
