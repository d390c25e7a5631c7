"""
Sales report tests against the sample dataset.

Run with: pytest tests/unit/test_sales_report.py -v
"""

import pytest

from shopdash.analysis import sales_report
from shopdash.analysis.customer_metrics import compute_customer_metrics
from shopdash.analysis.sales_report import SalesReportBuilder, build_sales_report


@pytest.fixture
def report(dataset, now):
    return build_sales_report(
        dataset.counter_orders,
        dataset.customers,
        dataset.customer_orders,
        dataset.products,
        now,
        "30d",
    )


class TestStatusTotals:

    def test_counts(self, report):
        assert report.completed_orders == 7
        assert report.pending_orders == 7
        assert report.preparing_orders == 4
        assert report.cancelled_orders == 3

    def test_revenue(self, report):
        assert report.total_revenue == 697
        assert report.avg_order_value == pytest.approx(697 / 7)


class TestSeries:

    def test_thirty_day_series(self, report):
        assert report.range_key == "30d"
        assert len(report.series) == 30
        # The 271-day-old order is the only one outside the window
        assert sum(p.orders for p in report.series) == 20
        assert sum(p.revenue for p in report.series) == 697

    def test_average_series_matches(self, report):
        assert len(report.avg_value_series) == len(report.series)
        for point, avg in zip(report.series, report.avg_value_series):
            expected = point.revenue / point.orders if point.orders else 0
            assert avg.avg == pytest.approx(expected)


class TestTopItems:

    def test_best_sellers(self, report):
        assert [t.name for t in report.top_items] == [
            "Chicken Shawarma (Medium)",
            "Taro Milk Tea (Medium)",
            "Lamb Shawarma (Medium)",
            "Chicken Shawarma (Small)",
            "Black Sugar Milk Tea (Medium)",
            "Vanilla Bliss (Medium)",
        ]
        assert [t.quantity for t in report.top_items] == [3, 3, 3, 3, 3, 2]

    def test_no_orders(self):
        assert SalesReportBuilder().top_items([]) == []

    def test_limit(self, dataset):
        assert len(SalesReportBuilder().top_items(dataset.counter_orders, limit=2)) == 2


class TestCustomers:

    def test_customer_split(self, report):
        assert report.customers_with_orders == 12
        assert report.customers_without_orders == 3

    def test_top_customers(self, report):
        assert [c.id for c in report.top_customers] == [
            "cust_001", "cust_010", "cust_009", "cust_014", "cust_003", "cust_002",
        ]
        assert report.top_customers[0].lifetime_value == 220
        assert report.top_customers[0].orders == 3

    def test_ties_keep_directory_order(self, dataset):
        metrics = compute_customer_metrics(dataset.customers, dataset.customer_orders)
        ranked = SalesReportBuilder().top_customers(dataset.customers, metrics, limit=15)
        ids = [c.id for c in ranked]
        # cust_007 and cust_013 both spent 20
        assert ids.index("cust_007") < ids.index("cust_013")
        assert ids[-3:] == ["cust_008", "cust_011", "cust_012"]


def test_product_stats(report):
    assert report.product_stats.active == 14
    assert report.product_stats.inactive == 1
    assert report.product_stats.out_of_stock == 1


def test_default_range_comes_from_settings(monkeypatch, dataset, now):
    monkeypatch.setattr(sales_report.settings, "report_range", "6m")
    result = build_sales_report(
        dataset.counter_orders, dataset.customers, dataset.customer_orders, dataset.products, now,
    )
    assert result.range_key == "6m"
    assert len(result.series) == 6
