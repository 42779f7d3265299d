"""Application tests for the dashboard figures."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain

from pos.ordering import dashboard
from pos.ordering.checkout import place_order
from pos.ordering.order.order import Order


def _order(total):
    return place_order([{"name": "Tip", "quantity": 1, "price": total}])


def _backdate(order, when):
    repo = current_domain.repository_for(Order)
    stored = repo.get(order.order_id)
    stored.created_at = when
    repo.add(stored)


class TestDashboard:
    def test_empty_day(self):
        summary = dashboard.summary()
        assert summary.today_sales == 0.0
        assert summary.today_order_count == 0
        assert summary.recent_orders == []

    def test_today_totals(self):
        _order(10.0)
        _order(2.5)

        summary = dashboard.summary()

        assert summary.today_sales == pytest.approx(12.5)
        assert summary.today_order_count == 2

    def test_window_excludes_other_days(self):
        today = datetime.now(UTC).date()
        yesterday_order = _order(99.0)
        _backdate(yesterday_order, datetime.now(UTC) - timedelta(days=1))
        _order(4.0)

        assert dashboard.sales_for(today) == pytest.approx(4.0)
        assert dashboard.order_count_for(today) == 1
        assert dashboard.order_count_for(today - timedelta(days=1)) == 1

    def test_window_is_half_open(self):
        today = datetime.now(UTC).date()
        midnight = datetime(today.year, today.month, today.day, tzinfo=UTC)
        order = _order(7.0)
        _backdate(order, midnight)

        assert dashboard.order_count_for(today) == 1
        assert dashboard.order_count_for(today - timedelta(days=1)) == 0

    def test_recent_orders_newest_first_capped(self):
        now = datetime.now(UTC)
        placed = [_order(float(n + 1)) for n in range(12)]
        for n, order in enumerate(placed):
            _backdate(order, now - timedelta(minutes=12 - n))

        recent = dashboard.recent_orders()

        assert len(recent) == dashboard.RECENT_ORDERS_LIMIT
        assert [o.order_id for o in recent] == [o.order_id for o in reversed(placed)][:10]
