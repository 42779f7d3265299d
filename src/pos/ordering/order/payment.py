"""Payment confirmation for orders paid through a gateway."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pos.domain import pos
from pos.ordering.order.deletion import load_order
from pos.ordering.order.order import Order
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@pos.command(part_of="Order")
class ConfirmPayment:
    order_id = Identifier(required=True)
    transaction_id = String(max_length=255)


@pos.command_handler(part_of=Order)
class ConfirmPaymentHandler:
    @handle(ConfirmPayment)
    def confirm_payment(self, command):
        order = load_order(command.order_id)
        changed = order.confirm_payment(transaction_id=command.transaction_id)
        if changed:
            current_domain.repository_for(Order).add(order)
            logger.info("payment_confirmed", order_id=order.order_id, transaction_id=command.transaction_id)
        return changed
