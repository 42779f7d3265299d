"""Pydantic request/response schemas for the POS API.

These are external contracts, separate from the internal Protean commands.
Cart quantities and prices are loose here: the pricing engine
rejects bad lines with a message that names the item.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------
class CartItemSchema(BaseModel):
    name: str | None = None
    item_id: str | None = None
    quantity: int | None = None
    price: float | None = None


class CreateOrderRequest(BaseModel):
    customer_name: str | None = None
    phone_number: str | None = None
    cart_items: list[CartItemSchema] | None = None
    subtotal: float | None = None
    tax: float | None = None
    grand_total: float | None = None
    payment_method: str | None = None

    def cart_as_dicts(self) -> list[dict] | None:
        if self.cart_items is None:
            return None
        return [line.model_dump() for line in self.cart_items]


class OrderLineResponse(BaseModel):
    id: str
    name: str
    item_id: str | None = None
    quantity: int
    price: float


class OrderResponse(BaseModel):
    order_id: str
    customer_name: str | None = None
    phone_number: str | None = None
    subtotal: float
    tax: float
    grand_total: float
    payment_method: str
    payment_status: str
    created_at: datetime | None = None
    items: list[OrderLineResponse] = Field(default_factory=list)

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            order_id=order.order_id,
            customer_name=order.customer_name,
            phone_number=order.phone_number,
            subtotal=order.totals.subtotal,
            tax=order.totals.tax,
            grand_total=order.totals.grand_total,
            payment_method=order.payment_method,
            payment_status=order.payment_status,
            created_at=order.created_at,
            items=[
                OrderLineResponse(
                    id=str(line.id),
                    name=line.name,
                    item_id=line.item_id,
                    quantity=line.quantity,
                    price=line.unit_price,
                )
                for line in order.items
            ],
        )


class DashboardResponse(BaseModel):
    today_sales: float
    today_order_count: int
    recent_orders: list[OrderResponse]


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class CategoryPayload(BaseModel):
    name: str | None = None
    description: str | None = None
    bg_color: str | None = None


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None
    bg_color: str | None = None
    img_url: str | None = None
    item_count: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_summary(cls, summary) -> "CategoryResponse":
        category = summary.category
        return cls(
            category_id=str(category.id),
            name=category.name,
            description=category.description,
            bg_color=category.bg_color,
            img_url=category.img_url,
            item_count=summary.item_count,
            created_at=category.created_at,
        )


class ItemPayload(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    category_id: str | None = None
    stock: int | None = None


class ItemResponse(BaseModel):
    item_id: str
    name: str
    description: str | None = None
    price: float
    category_id: str
    stock: int
    img_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_item(cls, item) -> "ItemResponse":
        return cls(
            item_id=str(item.id),
            name=item.name,
            description=item.description,
            price=item.price,
            category_id=str(item.category_id),
            stock=item.stock,
            img_url=item.img_url,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class PurchaseRequest(BaseModel):
    quantity: int = 1


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------
class InitiatePaymentRequest(BaseModel):
    order: CreateOrderRequest | None = None
    return_url: str | None = None
    website_url: str | None = None


class InitiatePaymentResponse(BaseModel):
    order: OrderResponse
    khalti: dict


class LookupPaymentRequest(BaseModel):
    pidx: str | None = None
    order_id: str | None = None
