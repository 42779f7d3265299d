"""Direct purchase of a single item outside of an order."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from pos.catalogue.item.item import Item
from pos.domain import pos
from pos.inventory.locks import item_locks
from pos.inventory.reservation import StockReservation
from pos.ordering.pricing import CartLine


@pos.command(part_of="Item")
class PurchaseItem:
    item_id = Identifier(required=True)
    quantity = Integer(default=1)


@pos.command_handler(part_of=Item)
class PurchaseItemHandler:
    @handle(PurchaseItem)
    def purchase_item(self, command):
        quantity = command.quantity if command.quantity is not None else 1
        line = CartLine(name="", item_id=str(command.item_id), quantity=quantity, price=0.0)
        StockReservation().reserve([line])
        return str(command.item_id)


def purchase_item(item_id, quantity=1) -> Item:
    """Take ``quantity`` units of an item under its lock and return the updated item."""
    with item_locks.hold([item_id]):
        current_domain.process(PurchaseItem(item_id=item_id, quantity=quantity), asynchronous=False)
    return current_domain.repository_for(Item).get(item_id)
