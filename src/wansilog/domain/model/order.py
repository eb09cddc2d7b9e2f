"""Order aggregate: the in-progress transaction at the register.

The Order owns its line items and enforces every invariant on them.
Positions are 0-based here; the session layer translates the 1-based
numbers the cashier types.
"""

from __future__ import annotations

from dataclasses import dataclass

from wansilog.domain.exceptions import EntityNotFoundError
from wansilog.domain.model.catalog import Catalog
from wansilog.domain.model.value_objects import Money, Quantity


@dataclass
class LineItem:
    """One plate + addon at a given quantity.

    ``unit_price`` is a snapshot of item base price plus addon extra
    taken when the line was added. Quantity updates keep it, so the
    line total is always ``unit_price * quantity``.
    """

    item_name: str
    addon_name: str
    quantity: Quantity
    unit_price: Money  # locked at add time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def describe(self) -> str:
        return f"{self.item_name} x{self.quantity} ({self.addon_name}) - {self.line_total}"


class Order:
    """Ordered, mutable collection of line items in insertion order."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._lines: list[LineItem] = []

    # --- Mutations ------------------------------------------------------------

    def add_line(self, item_index: int, addon_index: int, quantity: int) -> int:
        """Append a line for catalog entries and return its position.

        Raises ValidationError for out-of-range indexes or quantity < 1.
        """
        item = self._catalog.item(item_index)
        addon = self._catalog.addon(addon_index)
        qty = Quantity(quantity)

        self._lines.append(
            LineItem(
                item_name=item.name,
                addon_name=addon.name,
                quantity=qty,
                unit_price=item.base_price + addon.extra_price,
            )
        )
        return len(self._lines) - 1

    def update_quantity(self, position: int, new_quantity: int) -> None:
        line = self._line_at(position)
        line.quantity = Quantity(new_quantity)

    def remove_line(self, position: int) -> LineItem:
        """Remove and return the line; later lines shift down by one."""
        self._line_at(position)
        return self._lines.pop(position)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[LineItem, ...]:
        return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _line_at(self, position: int) -> LineItem:
        if not 0 <= position < len(self._lines):
            raise EntityNotFoundError("Invalid order number.")
        return self._lines[position]
