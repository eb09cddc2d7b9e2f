"""Menu catalog: the fixed list of silog plates and addons.

The catalog is read-only input to the order. Lines snapshot prices at
add time, so nothing here can change what an existing order costs.
"""

from __future__ import annotations

from dataclasses import dataclass

from wansilog.domain.exceptions import ValidationError
from wansilog.domain.model.value_objects import Money


@dataclass(frozen=True)
class MenuItem:
    name: str
    base_price: Money


@dataclass(frozen=True)
class Addon:
    name: str
    extra_price: Money


@dataclass(frozen=True)
class Catalog:
    """Index-addressable menu. Indexes are 0-based here."""

    items: tuple[MenuItem, ...]
    addons: tuple[Addon, ...]

    def item(self, index: int) -> MenuItem:
        if not 0 <= index < len(self.items):
            raise ValidationError("Invalid item number.")
        return self.items[index]

    def addon(self, index: int) -> Addon:
        if not 0 <= index < len(self.addons):
            raise ValidationError("Invalid addon number.")
        return self.addons[index]


DEFAULT_CATALOG = Catalog(
    items=(
        MenuItem("Tapsilog", Money.of("80.00")),
        MenuItem("Tosilog", Money.of("80.00")),
        MenuItem("Spamsilog", Money.of("80.00")),
        MenuItem("Hungariansilog", Money.of("95.00")),
    ),
    addons=(
        Addon("Rice", Money.of("10.00")),
        Addon("Half Rice", Money.of("7.00")),
        Addon("Java Rice", Money.of("12.00")),
        Addon("None", Money.of("0.00")),
    ),
)
