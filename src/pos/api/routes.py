"""FastAPI routes for the POS: catalogue, checkout, dashboard and payments."""

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from pydantic import BaseModel, ValidationError as PydanticValidationError
from protean.utils.globals import current_domain

from pos.api.schemas import (
    CategoryPayload,
    CategoryResponse,
    CreateOrderRequest,
    DashboardResponse,
    InitiatePaymentRequest,
    InitiatePaymentResponse,
    ItemPayload,
    ItemResponse,
    LookupPaymentRequest,
    OrderResponse,
    PurchaseRequest,
)
from pos.api.security import require_admin, require_authenticated
from pos.catalogue import service as catalogue
from pos.errors import InvalidRequest
from pos.inventory.purchase import purchase_item
from pos.ordering import dashboard
from pos.ordering.checkout import place_order
from pos.ordering.order.deletion import DeleteOrder
from pos.payments.initiation import initiate_payment, lookup_payment


def _parse_part(raw: str, schema: type[BaseModel], field: str) -> BaseModel:
    try:
        return schema.model_validate_json(raw)
    except PydanticValidationError:
        raise InvalidRequest(field, f"Invalid {field} data") from None


def _read_upload(file: UploadFile | None) -> catalogue.ImageUpload | None:
    if file is None:
        return None
    data = file.file.read()
    if not data:
        return None
    return catalogue.ImageUpload(data=data, filename=file.filename, content_type=file.content_type)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
def create_order(body: CreateOrderRequest) -> OrderResponse:
    order = place_order(
        cart_items=body.cart_as_dicts(),
        customer_name=body.customer_name,
        phone_number=body.phone_number,
        subtotal=body.subtotal,
        tax=body.tax,
        grand_total=body.grand_total,
        payment_method=body.payment_method,
    )
    return OrderResponse.from_order(order)


@order_router.get("/latest", response_model=list[OrderResponse], dependencies=[Depends(require_authenticated)])
async def latest_orders() -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in dashboard.recent_orders()]


@order_router.delete("/{order_id}", status_code=204, dependencies=[Depends(require_authenticated)])
async def delete_order(order_id: str) -> Response:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("", response_model=DashboardResponse, dependencies=[Depends(require_authenticated)])
async def get_dashboard() -> DashboardResponse:
    summary = dashboard.summary()
    return DashboardResponse(
        today_sales=summary.today_sales,
        today_order_count=summary.today_order_count,
        recent_orders=[OrderResponse.from_order(order) for order in summary.recent_orders],
    )


# ---------------------------------------------------------------------------
# Public catalogue
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])
item_router = APIRouter(prefix="/items", tags=["items"])


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_summary(summary) for summary in catalogue.list_categories()]


@item_router.get("", response_model=list[ItemResponse])
async def list_items(category_id: str | None = None) -> list[ItemResponse]:
    return [ItemResponse.from_item(item) for item in catalogue.list_items(category_id)]


@item_router.post("/{item_id}/purchase", response_model=ItemResponse)
def purchase(item_id: str, body: PurchaseRequest | None = None) -> ItemResponse:
    quantity = body.quantity if body is not None else 1
    return ItemResponse.from_item(purchase_item(item_id, quantity))


# ---------------------------------------------------------------------------
# Catalogue administration
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@admin_router.post("/categories", status_code=201, response_model=CategoryResponse)
def create_category(category: str = Form(...), file: UploadFile | None = File(None)) -> CategoryResponse:
    payload = _parse_part(category, CategoryPayload, "category")
    summary = catalogue.create_category(
        name=payload.name,
        description=payload.description,
        bg_color=payload.bg_color,
        image=_read_upload(file),
    )
    return CategoryResponse.from_summary(summary)


@admin_router.delete("/categories/{category_id}", status_code=204)
def delete_category(category_id: str) -> Response:
    catalogue.delete_category(category_id)
    return Response(status_code=204)


@admin_router.post("/items", status_code=201, response_model=ItemResponse)
def create_item(item: str = Form(...), file: UploadFile | None = File(None)) -> ItemResponse:
    payload = _parse_part(item, ItemPayload, "item")
    created = catalogue.create_item(
        name=payload.name,
        price=payload.price,
        category_id=payload.category_id,
        description=payload.description,
        stock=payload.stock,
        image=_read_upload(file),
    )
    return ItemResponse.from_item(created)


@admin_router.put("/items/{item_id}", response_model=ItemResponse)
def update_item(item_id: str, item: str = Form(...), file: UploadFile | None = File(None)) -> ItemResponse:
    payload = _parse_part(item, ItemPayload, "item")
    updated = catalogue.update_item(
        item_id,
        image=_read_upload(file),
        **payload.model_dump(exclude_none=True),
    )
    return ItemResponse.from_item(updated)


@admin_router.delete("/items/{item_id}", status_code=204)
def delete_item(item_id: str) -> Response:
    catalogue.delete_item(item_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.post("/initiate", response_model=InitiatePaymentResponse)
def initiate(body: InitiatePaymentRequest) -> InitiatePaymentResponse:
    result = initiate_payment(
        body.order.model_dump() if body.order else None,
        return_url=body.return_url,
        website_url=body.website_url,
    )
    return InitiatePaymentResponse(order=OrderResponse.from_order(result["order"]), khalti=result["khalti"])


@payment_router.post("/lookup")
def lookup(body: LookupPaymentRequest) -> dict:
    return lookup_payment(body.pidx, order_id=body.order_id)
