"""Unit tests for the menu catalog."""

import pytest

from wansilog.domain.exceptions import ValidationError
from wansilog.domain.model.catalog import DEFAULT_CATALOG
from wansilog.domain.model.value_objects import Money


class TestDefaultCatalog:

    def test_four_items_priced_80_to_95(self):
        prices = [item.base_price for item in DEFAULT_CATALOG.items]
        assert len(prices) == 4
        assert min(prices) == Money.of("80.00")
        assert max(prices) == Money.of("95.00")

    def test_four_addons_priced_0_to_12(self):
        prices = [addon.extra_price for addon in DEFAULT_CATALOG.addons]
        assert len(prices) == 4
        assert min(prices) == Money.of("0.00")
        assert max(prices) == Money.of("12.00")

    def test_lookup_by_index(self):
        assert DEFAULT_CATALOG.item(0).name == "Tapsilog"
        assert DEFAULT_CATALOG.addon(2).name == "Java Rice"

    def test_item_out_of_range(self):
        with pytest.raises(ValidationError, match="Invalid item number"):
            DEFAULT_CATALOG.item(4)

    def test_addon_out_of_range(self):
        with pytest.raises(ValidationError, match="Invalid addon number"):
            DEFAULT_CATALOG.addon(-1)
