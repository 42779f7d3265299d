"""Checkout entry point used by the HTTP layer and the payment flow.

The item locks are taken here, outside ``current_domain.process``, so they
stay held until the placement handler's unit of work has committed.
"""

import json

from protean.utils.globals import current_domain

from pos.inventory.locks import item_locks
from pos.ordering.order.order import Order
from pos.ordering.order.placement import PlaceOrder


def _item_ids(cart_items):
    for line in cart_items or []:
        if isinstance(line, dict):
            yield line.get("item_id") or line.get("itemId")


def place_order(
    cart_items,
    customer_name=None,
    phone_number=None,
    subtotal=None,
    tax=None,
    grand_total=None,
    payment_method=None,
) -> Order:
    command = PlaceOrder(
        customer_name=customer_name,
        phone_number=phone_number,
        cart_items=json.dumps(cart_items or []),
        subtotal=subtotal,
        tax=tax,
        grand_total=grand_total,
        payment_method=payment_method,
    )
    with item_locks.hold(_item_ids(cart_items)):
        order_id = current_domain.process(command, asynchronous=False)
    return current_domain.repository_for(Order).get(order_id)
