from pos.api.errors import register_pos_exception_handlers
from pos.api.routes import (
    admin_router,
    category_router,
    dashboard_router,
    item_router,
    order_router,
    payment_router,
)

routers = [
    order_router,
    dashboard_router,
    category_router,
    item_router,
    admin_router,
    payment_router,
]

__all__ = [
    "admin_router",
    "category_router",
    "dashboard_router",
    "item_router",
    "order_router",
    "payment_router",
    "register_pos_exception_handlers",
    "routers",
]
