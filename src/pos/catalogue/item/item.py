"""Item aggregate root: a sellable menu item with its stock on hand.

Stock is a plain counter on the item. It is only ever lowered through
``reserve()``, which applies the low-stock rule:

    stock <= LOW_STOCK_THRESHOLD  ->  at most LOW_STOCK_MAX_UNITS per request
    stock <  quantity             ->  refused

Callers are expected to hold the item's lock (see ``pos.inventory.locks``)
between loading the item and committing the decrement.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from pos.catalogue.item.events import (
    ItemCreated,
    ItemDetailsUpdated,
    LowStockDetected,
    StockAdjusted,
    StockReserved,
)
from pos.domain import pos
from pos.errors import InsufficientStock, InvalidRequest, LowStockLimitExceeded

LOW_STOCK_THRESHOLD = 5
LOW_STOCK_MAX_UNITS = 1


@pos.aggregate
class Item:
    name: String(required=True, max_length=100)
    description: Text()
    price: Float(required=True)
    category_id: Identifier(required=True)
    stock: Integer(default=0)
    img_url: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be greater than 0"]})

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @classmethod
    def create(cls, name, price, category_id, description=None, stock=None, img_url=None):
        now = datetime.now(UTC)
        item = cls(
            name=name,
            description=description,
            price=price,
            category_id=category_id,
            stock=stock if stock is not None else 0,
            img_url=img_url,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            ItemCreated(
                item_id=item.id,
                name=item.name,
                category_id=item.category_id,
                price=item.price,
                stock=item.stock,
            )
        )
        return item

    def update_details(self, name=None, description=None, price=None, category_id=None, stock=None, img_url=None):
        """Apply the supplied fields; ``None`` leaves a field unchanged."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if category_id is not None:
            self.category_id = category_id
        if img_url is not None:
            self.img_url = img_url
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ItemDetailsUpdated(
                item_id=self.id,
                name=self.name,
                category_id=self.category_id,
                price=self.price,
            )
        )

        if stock is not None and stock != self.stock:
            self.set_stock(stock)

    def set_stock(self, stock):
        previous = self.stock
        self.stock = stock
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockAdjusted(
                item_id=self.id,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    def check_reservable(self, quantity, current_stock=None):
        """Raise if ``quantity`` units cannot be taken from ``current_stock``.

        ``current_stock`` defaults to the item's own stock. Multi-line
        reservations pass the running figure so repeated lines for the same
        item see each other's decrements.
        """
        current = self.stock if current_stock is None else current_stock

        if quantity is None or quantity <= 0:
            raise InvalidRequest("quantity", f"Invalid quantity for item: {self.name}")
        if current <= LOW_STOCK_THRESHOLD and quantity > LOW_STOCK_MAX_UNITS:
            raise LowStockLimitExceeded(str(self.id), self.name, current, LOW_STOCK_MAX_UNITS)
        if current < quantity:
            raise InsufficientStock(str(self.id), self.name, current, quantity)

    def reserve(self, quantity):
        self.check_reservable(quantity)

        previous = self.stock
        self.stock = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockReserved(
                item_id=self.id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )
        if self.stock <= LOW_STOCK_THRESHOLD:
            self.raise_(
                LowStockDetected(
                    item_id=self.id,
                    name=self.name,
                    current_stock=self.stock,
                    threshold=LOW_STOCK_THRESHOLD,
                )
            )
        return self.stock
