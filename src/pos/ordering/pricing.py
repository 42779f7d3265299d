"""Cart validation, payment-method parsing and order totals.

Totals supplied by the client win over computed ones:

    subtotal    = supplied, else sum(quantity * price)
    tax         = supplied, else 0.0
    grand_total = supplied, else subtotal + tax
"""

from dataclasses import dataclass

from pos.errors import InvalidRequest, UnsupportedPaymentMethod
from pos.ordering.order.order import PaymentMethod


@dataclass(frozen=True)
class CartLine:
    name: str
    item_id: str | None
    quantity: int
    price: float

    @property
    def line_total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class PriceQuote:
    subtotal: float
    tax: float
    grand_total: float


def _number(raw, field, line_name, cast):
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise InvalidRequest(field, f"Invalid quantity or price for item: {line_name}") from None


def _whole_number(raw, field, line_name):
    value = _number(raw, field, line_name, float)
    if not value.is_integer():
        raise InvalidRequest(field, f"Invalid quantity or price for item: {line_name}")
    return int(value)


def parse_cart(raw_lines) -> list[CartLine]:
    """Turn the client's cart (a list of dicts) into validated ``CartLine``s."""
    if not raw_lines:
        raise InvalidRequest("cart_items", "Cart items cannot be empty")

    lines = []
    for raw in raw_lines:
        if not isinstance(raw, dict):
            raise InvalidRequest("cart_items", "Each cart item must be an object")

        name = (raw.get("name") or "").strip()
        item_id = raw.get("item_id") or raw.get("itemId") or None
        label = name or item_id or "unnamed"
        quantity = _whole_number(raw.get("quantity"), "quantity", label)
        price = _number(raw.get("price"), "price", label, float)

        if quantity <= 0 or price < 0:
            raise InvalidRequest("cart_items", f"Invalid quantity or price for item: {label}")
        if not name and not item_id:
            raise InvalidRequest("cart_items", "Cart item needs a name or an item id")

        lines.append(CartLine(name=name, item_id=str(item_id) if item_id else None, quantity=quantity, price=price))
    return lines


def parse_payment_method(raw) -> PaymentMethod:
    """Blank means cash; anything else must name a known method, in any case."""
    if raw is None or not str(raw).strip():
        return PaymentMethod.CASH
    try:
        return PaymentMethod(str(raw).strip().upper())
    except ValueError:
        raise UnsupportedPaymentMethod(str(raw)) from None


def quote(lines, subtotal=None, tax=None, grand_total=None) -> PriceQuote:
    if subtotal is None:
        subtotal = round(sum(line.line_total for line in lines), 2)
    if tax is None:
        tax = 0.0
    if grand_total is None:
        grand_total = round(subtotal + tax, 2)
    return PriceQuote(subtotal=float(subtotal), tax=float(tax), grand_total=float(grand_total))
