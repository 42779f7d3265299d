"""Application tests for multi-line stock reservation."""

import pytest
from factories import make_item, reload_item

from pos.errors import InsufficientStock, ItemNotFound, LowStockLimitExceeded
from pos.inventory.reservation import StockReservation
from pos.ordering.pricing import CartLine


def _line(item=None, quantity=1, price=2.0, name="Line"):
    return CartLine(name=name, item_id=str(item.id) if item else None, quantity=quantity, price=price)


class TestStockReservation:
    def test_reserve_decrements_each_item(self):
        latte = make_item(name="Latte", stock=10)
        bagel = make_item(name="Bagel", stock=8)

        StockReservation().reserve([_line(latte, 3), _line(bagel, 2)])

        assert reload_item(latte).stock == 7
        assert reload_item(bagel).stock == 6

    def test_ad_hoc_lines_skip_stock(self):
        latte = make_item(stock=10)
        resolved = StockReservation().reserve([_line(None, 4, name="Service charge"), _line(latte, 1)])
        assert resolved[0] is None
        assert reload_item(latte).stock == 9

    def test_unknown_item(self):
        line = CartLine(name="Ghost", item_id="missing", quantity=1, price=1.0)
        with pytest.raises(ItemNotFound):
            StockReservation().reserve([line])

    def test_repeated_lines_see_running_stock(self):
        latte = make_item(stock=7)
        # 7 -> 6 leaves the item in the low band, so the second line may take only one
        with pytest.raises(LowStockLimitExceeded):
            StockReservation().reserve([_line(latte, 1), _line(latte, 2)])
        assert reload_item(latte).stock == 7

    def test_repeated_lines_within_stock(self):
        latte = make_item(stock=12)
        StockReservation().reserve([_line(latte, 3), _line(latte, 4)])
        assert reload_item(latte).stock == 5

    def test_failure_on_later_line_leaves_earlier_items_untouched(self):
        latte = make_item(name="Latte", stock=10)
        bagel = make_item(name="Bagel", stock=0)

        with pytest.raises(InsufficientStock):
            StockReservation().reserve([_line(latte, 2), _line(bagel, 1)])

        assert reload_item(latte).stock == 10
        assert reload_item(bagel).stock == 0

    def test_check_does_not_write(self):
        latte = make_item(stock=10)
        StockReservation().check([_line(latte, 4)])
        assert reload_item(latte).stock == 10
