"""Order deletion. Line items go with the order; stock is not given back."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from pos.domain import pos
from pos.errors import OrderNotFound
from pos.ordering.order.order import Order, OrderLineItem
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@pos.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


def load_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None


@pos.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order = load_order(command.order_id)
        lines = list(order.items)
        order.discard()

        line_dao = current_domain.repository_for(OrderLineItem)._dao
        for line in lines:
            line_dao.delete(line)
        current_domain.repository_for(Order)._dao.delete(order)

        logger.info("order_deleted", order_id=order.order_id, line_items=len(lines))
