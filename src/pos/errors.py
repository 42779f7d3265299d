"""Error taxonomy for the POS domain.

Client errors build on Protean's ``ValidationError`` (400) and
``ObjectNotFoundError`` (404) so that the FastAPI integration maps them without
extra wiring. Collaborator failures derive from ``PosError`` and are translated
to server errors at the HTTP boundary.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class PosError(Exception):
    """Base for failures that are not the caller's fault."""

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context


class InvalidRequest(ValidationError):
    """Malformed or missing cart, item or category fields."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__({field: [message]})


class UnsupportedPaymentMethod(InvalidRequest):
    def __init__(self, raw_value: str):
        self.raw_value = raw_value
        super().__init__("payment_method", f"Unsupported payment method: {raw_value}")


class InsufficientStock(InvalidRequest):
    def __init__(self, item_id: str, name: str, current_stock: int, requested: int):
        self.item_id = item_id
        self.current_stock = current_stock
        self.requested = requested
        super().__init__(
            "quantity",
            f"Insufficient stock for item '{name}': {current_stock} available, {requested} requested",
        )


class LowStockLimitExceeded(InvalidRequest):
    def __init__(self, item_id: str, name: str, current_stock: int, limit: int = 1):
        self.item_id = item_id
        self.current_stock = current_stock
        self.limit = limit
        super().__init__(
            "quantity",
            f"Item '{name}' is low in stock ({current_stock}) - max {limit} unit allowed",
        )


class ItemNotFound(ObjectNotFoundError):
    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")


class CategoryNotFound(ObjectNotFoundError):
    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


class OrderNotFound(ObjectNotFoundError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


class GatewayFailure(PosError):
    """The payment provider was unreachable or rejected the request."""


class BlobStoreFailure(PosError):
    """The blob store could not store or remove an object."""


class AuthenticationError(PosError):
    """The caller could not be authenticated."""


class TokenExpired(AuthenticationError):
    """The bearer token was valid once but its lifetime is over."""


class TokenInvalid(AuthenticationError):
    """The bearer token is unknown or cannot be parsed."""
