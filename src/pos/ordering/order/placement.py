"""Order placement: validate the cart, reserve stock and persist the order.

Stock decrements and the order are written in the handler's unit of work, so
a failure on any line leaves stock and orders untouched.
"""

import json

from protean import handle
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from pos.domain import pos
from pos.errors import InvalidRequest
from pos.inventory.reservation import StockReservation
from pos.ordering.order.order import Order
from pos.ordering.pricing import CartLine, parse_cart, parse_payment_method, quote
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@pos.command(part_of="Order")
class PlaceOrder:
    customer_name = String(max_length=255)
    phone_number = String(max_length=50)
    cart_items = Text()  # JSON list of {name, item_id, quantity, price}
    subtotal = Float()
    tax = Float()
    grand_total = Float()
    payment_method = String(max_length=50)


def _load_cart(raw):
    if not raw:
        return []
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        raise InvalidRequest("cart_items", "Cart items must be a JSON list") from None


@pos.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = parse_cart(_load_cart(command.cart_items))
        method = parse_payment_method(command.payment_method)
        totals = quote(lines, command.subtotal, command.tax, command.grand_total)

        items = StockReservation().reserve(lines)

        # Lines sent with only an item id take the catalogue name
        lines = [
            CartLine(item.name, line.item_id, line.quantity, line.price) if item and not line.name else line
            for line, item in zip(lines, items)
        ]

        order = Order.place(
            lines,
            totals,
            method,
            customer_name=command.customer_name,
            phone_number=command.phone_number,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=order.order_id,
            grand_total=totals.grand_total,
            payment_method=method.value,
            payment_status=order.payment_status,
        )
        return order.order_id
