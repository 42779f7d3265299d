"""Domain events for the Item aggregate."""

from protean.fields import Float, Identifier, Integer, String

from pos.domain import pos


@pos.event(part_of="Item")
class ItemCreated:
    """A new item was added to a category."""

    __version__ = 1

    item_id: Identifier(required=True)
    name: String(required=True)
    category_id: Identifier(required=True)
    price: Float(required=True)
    stock: Integer(required=True)


@pos.event(part_of="Item")
class ItemDetailsUpdated:
    __version__ = 1

    item_id: Identifier(required=True)
    name: String(required=True)
    category_id: Identifier(required=True)
    price: Float(required=True)


@pos.event(part_of="Item")
class StockAdjusted:
    """Stock was set directly by an administrator."""

    __version__ = 1

    item_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@pos.event(part_of="Item")
class StockReserved:
    """Units were taken from stock for a purchase or an order line."""

    __version__ = 1

    item_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@pos.event(part_of="Item")
class LowStockDetected:
    """Stock dropped into the low-stock band after a reservation."""

    __version__ = 1

    item_id: Identifier(required=True)
    name: String(required=True)
    current_stock: Integer(required=True)
    threshold: Integer(required=True)
