"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntryDTO:
    """Output: one numbered menu or addon entry."""

    number: int  # 1-based, as typed by the cashier
    name: str
    price: str  # formatted, e.g. "$80.00"


@dataclass(frozen=True)
class MenuDTO:
    items: list[CatalogEntryDTO]
    addons: list[CatalogEntryDTO]


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single order line as displayed to the cashier."""

    number: int
    item_name: str
    addon_name: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: the in-progress order."""

    lines: list[LineItemDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines
