"""Tests for the ShowInventory query handler."""

import pytest

from invtrack.application.show_inventory import ShowInventoryHandler
from invtrack.domain.exceptions import InvalidArgumentError
from invtrack.domain.repository.product_repository import ProductRepository


def _handler(default_threshold: int = 5) -> ShowInventoryHandler:
    repo = ProductRepository()
    for i, qty in enumerate([0, 3, 5, 6, 10]):
        repo.create(f"Item {i}", "2.00", qty, "Misc" if i % 2 else "Parts")
    return ShowInventoryHandler(repo, default_threshold=default_threshold)


class TestShowInventory:

    def test_lists_everything(self):
        assert [p.id for p in _handler().handle()] == [1, 2, 3, 4, 5]

    def test_low_stock_explicit_threshold(self):
        assert [p.stock_quantity for p in _handler().low_stock(5)] == [0, 3, 5]

    def test_low_stock_default_threshold(self):
        assert [p.stock_quantity for p in _handler(default_threshold=3).low_stock()] == [0, 3]

    def test_zero_threshold_is_not_the_default(self):
        assert [p.stock_quantity for p in _handler().low_stock(0)] == [0]

    def test_negative_threshold_rejected(self):
        with pytest.raises(InvalidArgumentError):
            _handler().low_stock(-1)

    def test_report(self):
        report = _handler().report()
        assert report.product_count == 5
        assert report.total_units == 24
        assert report.total_value == "$48.00"
        assert report.low_stock_count == 3
        assert report.low_stock_threshold == 5

    def test_categories(self):
        assert _handler().categories() == ["Misc", "Parts"]
