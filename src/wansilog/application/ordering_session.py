"""Application service: one cashier's ordering session.

Holds everything a session mutates (the in-progress Order) next to
what it only borrows (the Catalog and the process-wide Ledger). The
register creates one per logged-in cashier; nothing here is global.

Numbers taken and returned here are 1-based, as shown on screen.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from wansilog.application.checkout import CheckoutHandler
from wansilog.application.dto import LineItemDTO, MenuDTO, OrderDTO
from wansilog.application.show_menu import ShowMenuHandler
from wansilog.domain.model.catalog import Catalog
from wansilog.domain.model.order import LineItem, Order
from wansilog.domain.repository.ledger import Ledger


class OrderingSession:

    def __init__(
        self,
        cashier_name: str,
        catalog: Catalog,
        ledger: Ledger,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._cashier_name = cashier_name
        self._catalog = catalog
        self._ledger = ledger
        self._clock = clock
        self._order = Order(catalog)

    @property
    def order(self) -> Order:
        return self._order

    # --- Commands -------------------------------------------------------------

    def add_item(self, item_number: int, addon_number: int, quantity: int) -> int:
        """Add a line and return its 1-based order number."""
        return self._order.add_line(item_number - 1, addon_number - 1, quantity) + 1

    def update_quantity(self, line_number: int, quantity: int) -> None:
        self._order.update_quantity(line_number - 1, quantity)

    def remove_item(self, line_number: int) -> LineItem:
        return self._order.remove_line(line_number - 1)

    def cancel_order(self) -> None:
        self._order.clear()

    def begin_checkout(self) -> CheckoutHandler:
        """Start taking payment. Raises ValidationError on an empty order."""
        return CheckoutHandler(
            order=self._order,
            ledger=self._ledger,
            cashier_name=self._cashier_name,
            clock=self._clock,
        )

    # --- Queries --------------------------------------------------------------

    def show_order(self) -> OrderDTO:
        return OrderDTO(
            lines=[
                LineItemDTO(
                    number=number,
                    item_name=line.item_name,
                    addon_name=line.addon_name,
                    quantity=line.quantity.value,
                    line_total=str(line.line_total),
                )
                for number, line in enumerate(self._order.lines, start=1)
            ],
            total=str(self._order.total),
        )

    def menu(self) -> MenuDTO:
        return ShowMenuHandler(self._catalog).handle()
