"""Application service: Checkout use case.

Takes cash for a non-empty order, one tendered amount at a time:

    AWAITING_PAYMENT --"0"--------------> CANCELLED
    AWAITING_PAYMENT --bad text---------> AWAITING_PAYMENT  (RETRY, FormatError)
    AWAITING_PAYMENT --amount < total---> AWAITING_PAYMENT  (RETRY, InsufficientPaymentError)
    AWAITING_PAYMENT --amount >= total--> COMMITTED         (ledger append, order cleared)

Bad input comes back as a RETRY result rather than an exception so the
prompt loop can simply ask again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from wansilog.domain.exceptions import (
    DomainException,
    InsufficientPaymentError,
    PersistenceError,
    ValidationError,
)
from wansilog.domain.model.order import Order
from wansilog.domain.model.transaction import TransactionRecord
from wansilog.domain.model.value_objects import Money
from wansilog.domain.repository.ledger import Ledger

logger = logging.getLogger(__name__)

CANCEL_SENTINEL = "0"


class CheckoutState(Enum):
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    CANCELLED = "CANCELLED"
    COMMITTED = "COMMITTED"


class CheckoutStatus(Enum):
    COMMITTED = "COMMITTED"
    CANCELLED = "CANCELLED"
    RETRY = "RETRY"


@dataclass(frozen=True)
class CheckoutResult:
    status: CheckoutStatus
    change: Money | None = None
    record: TransactionRecord | None = None
    error: DomainException | None = None  # why a RETRY happened
    failures: tuple[PersistenceError, ...] = ()  # ledger writes that did not land


class CheckoutHandler:

    def __init__(
        self,
        order: Order,
        ledger: Ledger,
        cashier_name: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if order.is_empty:
            raise ValidationError("Your order is empty.")
        self._order = order
        self._ledger = ledger
        self._cashier_name = cashier_name
        self._clock = clock
        self._total = order.total
        self._state = CheckoutState.AWAITING_PAYMENT

    @property
    def total(self) -> Money:
        return self._total

    @property
    def state(self) -> CheckoutState:
        return self._state

    def tender(self, raw: str | Decimal) -> CheckoutResult:
        """Handle one tendered amount (or the cancel sentinel)."""
        if self._state is not CheckoutState.AWAITING_PAYMENT:
            raise ValidationError(
                f"Checkout already finished (state={self._state.value})"
            )

        text = str(raw).strip()
        if text == CANCEL_SENTINEL:
            self._state = CheckoutState.CANCELLED
            logger.info("Checkout cancelled by %s", self._cashier_name)
            return CheckoutResult(status=CheckoutStatus.CANCELLED)

        try:
            tendered = Money.parse(text)
            if tendered < self._total:
                raise InsufficientPaymentError(
                    f"Insufficient payment: {tendered} tendered, {self._total} due."
                )
        except DomainException as exc:
            return CheckoutResult(status=CheckoutStatus.RETRY, error=exc)

        return self._commit(tendered)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, tendered: Money) -> CheckoutResult:
        change = tendered - self._total
        outcome = self._ledger.append(
            cashier_name=self._cashier_name,
            lines=self._order.lines,
            total_amount=self._total,
            timestamp=self._clock(),
        )
        # The sale is complete once attempted, whatever the ledger reported.
        self._order.clear()
        self._state = CheckoutState.COMMITTED
        if not outcome.fully_persisted:
            logger.warning(
                "Transaction %d completed with %d failed ledger write(s)",
                outcome.record.id, len(outcome.failures),
            )
        return CheckoutResult(
            status=CheckoutStatus.COMMITTED,
            change=change,
            record=outcome.record,
            failures=outcome.failures,
        )
