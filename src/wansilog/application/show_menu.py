"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from wansilog.application.dto import CatalogEntryDTO, MenuDTO
from wansilog.domain.model.catalog import Catalog


class ShowMenuHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> MenuDTO:
        return MenuDTO(
            items=[
                CatalogEntryDTO(number, item.name, str(item.base_price))
                for number, item in enumerate(self._catalog.items, start=1)
            ],
            addons=[
                CatalogEntryDTO(number, addon.name, str(addon.extra_price))
                for number, addon in enumerate(self._catalog.addons, start=1)
            ],
        )
