"""Repository for the Order aggregate with the dashboard's read queries."""

from pos.domain import pos
from pos.ordering.order.order import Order

PAGE_SIZE = 500


@pos.repository(part_of=Order)
class OrderRepository:
    def latest(self, limit: int = 10) -> list[Order]:
        """Newest orders first."""
        return self._dao.query.order_by("-created_at").limit(limit).all().items

    def created_between(self, start, end) -> list[Order]:
        """Orders with ``start <= created_at < end``."""
        query = self._dao.query.filter(created_at__gte=start, created_at__lt=end).order_by("created_at")

        orders = []
        offset = 0
        while True:
            page = query.offset(offset).limit(PAGE_SIZE).all().items
            orders.extend(page)
            if len(page) < PAGE_SIZE:
                return orders
            offset += PAGE_SIZE

    def count_between(self, start, end) -> int:
        return self._dao.query.filter(created_at__gte=start, created_at__lt=end).all().total
