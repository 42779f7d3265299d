"""Order aggregate: a completed checkout with its line items and totals.

Orders are written once at checkout. Afterwards the only changes are payment
confirmation for gateway orders and deletion.

Payment state:
    CASH             -> COMPLETED at placement
    any other method -> PENDING until the gateway confirms it
"""

import secrets
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from pos.domain import pos
from pos.ordering.order.events import OrderDeleted, OrderPlaced, PaymentConfirmed


class PaymentMethod(Enum):
    CASH = "CASH"
    KHALTI = "KHALTI"
    CARD = "CARD"
    UPI = "UPI"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


def classify_payment(method: PaymentMethod) -> PaymentStatus:
    if method == PaymentMethod.CASH:
        return PaymentStatus.COMPLETED
    return PaymentStatus.PENDING


def generate_order_number(now: datetime | None = None) -> str:
    """``ORD<epoch millis>-<8 hex chars>``, unique even within one millisecond."""
    now = now or datetime.now(UTC)
    millis = int(now.timestamp() * 1000)
    return f"ORD{millis}-{secrets.token_hex(4).upper()}"


@pos.value_object(part_of="Order")
class OrderTotals:
    subtotal = Float(required=True, min_value=0.0)
    tax = Float(default=0.0)
    grand_total = Float(required=True)


@pos.entity(part_of="Order")
class OrderLineItem:
    """One cart line as it was sold. Name and price are copied from the cart."""

    name = String(required=True, max_length=255)
    item_id = Identifier()
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


@pos.aggregate
class Order:
    order_id = Identifier(identifier=True)
    customer_name = String(max_length=255)
    phone_number = String(max_length=50)
    totals = ValueObject(OrderTotals)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.CASH.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    items = HasMany(OrderLineItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, lines, quote, payment_method: PaymentMethod, customer_name=None, phone_number=None):
        """Build an order from validated cart lines and a price quote."""
        now = datetime.now(UTC)
        status = classify_payment(payment_method)

        order = cls(
            order_id=generate_order_number(now),
            customer_name=customer_name,
            phone_number=phone_number,
            totals=OrderTotals(
                subtotal=quote.subtotal,
                tax=quote.tax,
                grand_total=quote.grand_total,
            ),
            payment_method=payment_method.value,
            payment_status=status.value,
            created_at=now,
            updated_at=now,
        )
        for line in lines:
            order.add_items(
                OrderLineItem(
                    name=line.name,
                    item_id=line.item_id,
                    quantity=line.quantity,
                    unit_price=line.price,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=order.order_id,
                customer_name=customer_name,
                grand_total=quote.grand_total,
                payment_method=payment_method.value,
                payment_status=status.value,
                item_count=len(lines),
                placed_at=now,
            )
        )
        return order

    @property
    def grand_total(self) -> float:
        return self.totals.grand_total if self.totals else 0.0

    def confirm_payment(self, transaction_id=None):
        """Mark a pending gateway payment as completed. Already-completed orders are left alone."""
        if self.payment_status == PaymentStatus.COMPLETED.value:
            return False

        now = datetime.now(UTC)
        self.payment_status = PaymentStatus.COMPLETED.value
        self.updated_at = now
        self.raise_(
            PaymentConfirmed(
                order_id=self.order_id,
                payment_method=self.payment_method,
                transaction_id=transaction_id,
                confirmed_at=now,
            )
        )
        return True

    def discard(self):
        """Drop every line item ahead of deleting the order. Stock is not restored."""
        for line in list(self.items):
            self.remove_items(line)
        self.raise_(
            OrderDeleted(
                order_id=self.order_id,
                grand_total=self.grand_total,
                deleted_at=datetime.now(UTC),
            )
        )
