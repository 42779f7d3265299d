"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from pos.domain import pos


@pos.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out and its stock reserved."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String()
    grand_total = Float(required=True)
    payment_method = String(required=True)
    payment_status = String(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@pos.event(part_of="Order")
class PaymentConfirmed:
    """The gateway reported a pending payment as completed."""

    __version__ = 1

    order_id = Identifier(required=True)
    payment_method = String(required=True)
    transaction_id = String()
    confirmed_at = DateTime(required=True)


@pos.event(part_of="Order")
class OrderDeleted:
    __version__ = 1

    order_id = Identifier(required=True)
    grand_total = Float()
    deleted_at = DateTime(required=True)
