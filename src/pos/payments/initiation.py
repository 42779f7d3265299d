"""Gateway checkout: place the order, then open a payment with the provider.

The order is committed before the provider is called. If the provider fails,
the order stays PENDING and the caller gets a gateway error; the stock it
reserved is not released.
"""

from decimal import ROUND_HALF_UP, Decimal

from protean.utils.globals import current_domain

from pos.errors import InvalidRequest
from pos.ordering.checkout import place_order
from pos.ordering.order.order import Order, PaymentMethod
from pos.ordering.order.payment import ConfirmPayment
from pos.payments.gateway import get_gateway
from pos.payments.gateway.port import InitiationRequest
from pos.utils.logging import get_logger

logger = get_logger(__name__)

COMPLETED_STATUS = "Completed"


def to_minor_units(amount: float) -> int:
    """Rupees to paisa, rounding half away from zero."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def initiate_payment(order_details: dict | None, return_url: str | None, website_url: str | None) -> dict:
    """Place the order described by ``order_details`` and initiate its payment.

    Returns ``{"order": Order, "khalti": <provider response>}``.
    """
    if not order_details:
        raise InvalidRequest("order", "Order details are required")
    if not return_url:
        raise InvalidRequest("return_url", "Return URL is required")
    if not website_url:
        raise InvalidRequest("website_url", "Website URL is required")

    order = place_order(
        cart_items=order_details.get("cart_items"),
        customer_name=order_details.get("customer_name"),
        phone_number=order_details.get("phone_number"),
        subtotal=order_details.get("subtotal"),
        tax=order_details.get("tax"),
        grand_total=order_details.get("grand_total"),
        payment_method=order_details.get("payment_method") or PaymentMethod.KHALTI.value,
    )

    request = InitiationRequest(
        return_url=return_url,
        website_url=website_url,
        amount=to_minor_units(order.grand_total),
        purchase_order_id=order.order_id,
        purchase_order_name=f"Order {order.order_id}",
        customer_info={
            "name": order.customer_name,
            "phone": order.phone_number,
        },
    )
    response = get_gateway().initiate(request)
    logger.info(
        "payment_initiated",
        order_id=order.order_id,
        amount=request.amount,
        pidx=response.get("pidx"),
    )
    return {"order": order, "khalti": response}


def lookup_payment(pidx: str | None, order_id: str | None = None) -> dict:
    """Ask the provider about ``pidx`` and settle ``order_id`` once it has completed.

    The order is confirmed only when the provider reports ``Completed`` for the
    order's full amount in paisa.
    """
    if not pidx or not str(pidx).strip():
        raise InvalidRequest("pidx", "pidx is required")

    pidx = str(pidx).strip()
    response = get_gateway().lookup(pidx)

    if response.get("status") != COMPLETED_STATUS or not order_id:
        return response

    matches = current_domain.repository_for(Order)._dao.query.filter(order_id=order_id).all().items
    if not matches:
        logger.warning("payment_lookup_unknown_order", pidx=pidx, order_id=order_id)
        return response

    expected = to_minor_units(matches[0].grand_total)
    if response.get("total_amount") != expected:
        logger.warning(
            "payment_amount_mismatch",
            pidx=pidx,
            order_id=order_id,
            expected=expected,
            paid=response.get("total_amount"),
        )
        return response

    current_domain.process(
        ConfirmPayment(order_id=order_id, transaction_id=response.get("transaction_id")),
        asynchronous=False,
    )
    return response
