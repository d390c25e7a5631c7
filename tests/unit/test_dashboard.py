"""
Dashboard summary tests against the sample counter orders.

Run with: pytest tests/unit/test_dashboard.py -v
"""

from datetime import timedelta

import pytest

from shopdash.analysis import dashboard
from shopdash.analysis.dashboard import (
    active_customers,
    completed_revenue,
    order_status_counts,
    orders_on_day,
    summarize_dashboard,
)
from shopdash.schemas import OrderStatus


@pytest.fixture
def summary(dataset, now):
    return summarize_dashboard(dataset.counter_orders, dataset.customers, dataset.products, now, "7d")


class TestKpis:

    def test_orders_today(self, summary):
        assert summary.orders_today == 6

    def test_open_orders(self, summary):
        assert summary.open_orders == 11

    def test_revenue(self, summary):
        assert summary.completed_revenue == 697
        assert summary.avg_order_value == pytest.approx(697 / 7)

    def test_products(self, summary):
        assert summary.active_products == 14
        assert summary.out_of_stock_products == 1

    def test_customers(self, summary):
        assert summary.total_customers == 15
        assert summary.active_customers == 11

    def test_status_breakdown(self, summary):
        counts = {s.status: s.count for s in summary.status_breakdown}
        assert counts == {
            OrderStatus.COMPLETED: 7,
            OrderStatus.PREPARING: 4,
            OrderStatus.PENDING: 7,
            OrderStatus.CANCELLED: 3,
        }

    def test_recent_orders(self, summary):
        assert [o.id for o in summary.recent_orders] == [
            "32854531", "32854527", "32854533", "32854529", "32854524", "32854521",
        ]


class TestSeries:

    def test_seven_points(self, summary):
        assert summary.range_key == "7d"
        assert len(summary.series) == 7

    def test_series_totals(self, summary):
        assert sum(p.orders for p in summary.series) == 15
        assert sum(p.revenue for p in summary.series) == 451

    def test_week_old_order_folds_into_first_day(self, summary):
        # 168h-old done order (87) plus the 144h-old one (78)
        assert summary.series[0].revenue == 165
        assert summary.series[0].orders == 2


class TestHelpers:

    def test_completed_revenue(self, now, order_factory):
        done = order_factory("a", None, now, status="Done", items=[("Thai Milk Tea (Large)", 1, 39)])
        pending = order_factory("b", None, now, status="pending", items=[("Thai Milk Tea (Large)", 1, 39)])
        assert completed_revenue(done) == 39
        assert completed_revenue(pending) == 0

    def test_status_counts_custom_list(self, dataset):
        counts = order_status_counts(dataset.counter_orders, [OrderStatus.READY])
        assert counts[0].count == 0

    def test_orders_on_day_boundary(self, now, order_factory):
        midnight = now.replace(hour=0, minute=0)
        orders = [
            order_factory("today", None, midnight),
            order_factory("yesterday", None, midnight - timedelta(seconds=1)),
        ]
        assert [o.id for o in orders_on_day(orders, now)] == ["today"]

    def test_active_customers_window(self, now, customer_factory):
        customers = [
            customer_factory("in", when=now - timedelta(days=30)),
            customer_factory("out", when=now - timedelta(days=30, seconds=1)),
        ]
        assert [c.id for c in active_customers(customers, now, 30)] == ["in"]

    def test_empty_inputs(self, now):
        summary = summarize_dashboard([], [], [], now, "24h")
        assert summary.orders_today == 0
        assert summary.avg_order_value == 0
        assert len(summary.series) == 24
        assert summary.recent_orders == []


def test_default_range_comes_from_settings(monkeypatch, dataset, now):
    monkeypatch.setattr(dashboard.settings, "dashboard_range", "24h")
    summary = summarize_dashboard(dataset.counter_orders, dataset.customers, dataset.products, now)
    assert summary.range_key == "24h"
    assert len(summary.series) == 24
