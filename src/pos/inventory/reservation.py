"""Stock reservation across a whole cart.

Every line is checked against a running, in-memory stock figure before any
item is changed. A cart either reserves all of its lines or none of them, and
two lines for the same item see each other's decrements.

Lines without an ``item_id`` are ad-hoc charges and never touch stock.
"""

from protean.utils.globals import current_domain

from pos.catalogue.item.item import Item
from pos.catalogue.item.management import load_item
from pos.utils.logging import get_logger

logger = get_logger(__name__)


class StockReservation:
    def __init__(self):
        self._items: dict[str, Item] = {}
        self._requested: dict[str, int] = {}

    def _item(self, item_id) -> Item:
        key = str(item_id)
        if key not in self._items:
            self._items[key] = load_item(key)
        return self._items[key]

    def check(self, lines):
        """Validate ``lines`` against current stock without changing anything.

        Returns the loaded item for each stocked line, in line order (``None``
        for ad-hoc lines).
        """
        resolved = []
        for line in lines:
            if not line.item_id:
                resolved.append(None)
                continue

            item = self._item(line.item_id)
            key = str(item.id)
            running = item.stock - self._requested.get(key, 0)
            item.check_reservable(line.quantity, current_stock=running)
            self._requested[key] = self._requested.get(key, 0) + line.quantity
            resolved.append(item)
        return resolved

    def reserve(self, lines):
        """Check every line, then decrement stock and persist the touched items."""
        resolved = self.check(lines)

        repo = current_domain.repository_for(Item)
        for line, item in zip(lines, resolved):
            if item is not None:
                item.reserve(line.quantity)

        for item in self._items.values():
            repo.add(item)
            logger.info("stock_reserved", item_id=str(item.id), remaining=item.stock)
        return resolved
