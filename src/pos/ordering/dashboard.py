"""Read-only sales figures for the admin dashboard.

A "day" is the UTC calendar day: ``[00:00, next 00:00)``.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta

from protean.utils.globals import current_domain

from pos.ordering.order.order import Order

RECENT_ORDERS_LIMIT = 10


@dataclass(frozen=True)
class DashboardSummary:
    today_sales: float
    today_order_count: int
    recent_orders: list = field(default_factory=list)


def _window(day: date):
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def _today() -> date:
    return datetime.now(UTC).date()


def sales_for(day: date) -> float:
    """Sum of grand totals for orders placed on ``day``; ``0.0`` when there are none."""
    start, end = _window(day)
    orders = current_domain.repository_for(Order).created_between(start, end)
    return round(sum(order.grand_total or 0.0 for order in orders), 2)


def order_count_for(day: date) -> int:
    start, end = _window(day)
    return current_domain.repository_for(Order).count_between(start, end)


def recent_orders(limit: int = RECENT_ORDERS_LIMIT) -> list[Order]:
    return current_domain.repository_for(Order).latest(limit)


def summary(day: date | None = None) -> DashboardSummary:
    day = day or _today()
    return DashboardSummary(
        today_sales=sales_for(day),
        today_order_count=order_count_for(day),
        recent_orders=recent_orders(),
    )
