"""Application tests for deleting orders."""

import pytest
from factories import make_item, reload_item
from protean import current_domain

from pos.errors import OrderNotFound
from pos.ordering.checkout import place_order
from pos.ordering.order.deletion import DeleteOrder, load_order
from pos.ordering.order.order import Order, OrderLineItem


def _line_count():
    return current_domain.repository_for(OrderLineItem)._dao.query.all().total


class TestDeleteOrder:
    def test_delete_removes_order_and_lines(self):
        latte = make_item(stock=10)
        order = place_order([{"name": "Latte", "item_id": str(latte.id), "quantity": 2, "price": 3.5}])
        assert _line_count() == 1

        current_domain.process(DeleteOrder(order_id=order.order_id), asynchronous=False)

        assert current_domain.repository_for(Order)._dao.query.all().total == 0
        assert _line_count() == 0
        with pytest.raises(OrderNotFound):
            load_order(order.order_id)

    def test_stock_not_restored(self):
        latte = make_item(stock=10)
        order = place_order([{"name": "Latte", "item_id": str(latte.id), "quantity": 2, "price": 3.5}])

        current_domain.process(DeleteOrder(order_id=order.order_id), asynchronous=False)

        assert reload_item(latte).stock == 8

    def test_other_orders_untouched(self):
        keep = place_order([{"name": "Tip", "quantity": 1, "price": 1.0}])
        drop = place_order([{"name": "Tip", "quantity": 1, "price": 2.0}])

        current_domain.process(DeleteOrder(order_id=drop.order_id), asynchronous=False)

        assert current_domain.repository_for(Order).get(keep.order_id)
        assert _line_count() == 1

    def test_unknown_order(self):
        with pytest.raises(OrderNotFound) as exc_info:
            current_domain.process(DeleteOrder(order_id="ORD0-MISSING"), asynchronous=False)
        assert exc_info.value.order_id == "ORD0-MISSING"
