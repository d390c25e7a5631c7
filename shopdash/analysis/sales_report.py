"""Sales Report: aggregations behind the reports page.

Combines the counter orders (status counts, revenue, best sellers, trend
series) with the customer order history (lifetime value leaders).

Usage:
    python -m shopdash.report
"""

from datetime import datetime

import pandas as pd

from shopdash.analysis.customer_metrics import compute_customer_metrics
from shopdash.analysis.dashboard import completed_revenue
from shopdash.analysis.range_series import average_value_series, build_range_series, to_datetime
from shopdash.config import MetricsConfig
from shopdash.schemas import (
    Customer,
    CustomerMetrics,
    Order,
    Product,
    ProductStats,
    SalesReport,
    TopCustomer,
    TopItem,
    status_value,
)
from shopdash.settings import settings


class SalesReportBuilder:
    """Builds the reports page from orders, customers and products."""

    def __init__(self, config: MetricsConfig | None = None):
        self._config = config or MetricsConfig()

    def top_items(self, orders: list[Order], limit: int | None = None) -> list[TopItem]:
        """Best sellers by quantity across every order, ties in first-seen order.

        Counts all statuses, not just completed ones: this answers "what do
        people order", not "what did we earn".
        """
        limit = limit if limit is not None else self._config.report_top_items
        rows = [{"name": item.name, "quantity": item.quantity} for o in orders for item in o.items]
        if not rows:
            return []

        totals = pd.DataFrame(rows).groupby("name", sort=False, as_index=False)["quantity"].sum()
        totals["seen"] = range(len(totals))
        ranked = totals.sort_values(["quantity", "seen"], ascending=[False, True]).head(limit)
        return [
            TopItem(name=name, quantity=int(quantity))
            for name, quantity in zip(ranked["name"], ranked["quantity"])
        ]

    def product_stats(self, products: list[Product]) -> ProductStats:
        return ProductStats(
            active=sum(1 for p in products if p.is_active),
            inactive=sum(1 for p in products if not p.is_active),
            out_of_stock=sum(1 for p in products if not p.in_stock),
        )

    def top_customers(
        self,
        customers: list[Customer],
        metrics: dict[str, CustomerMetrics],
        limit: int | None = None,
    ) -> list[TopCustomer]:
        """Highest lifetime value first; equal values keep directory order."""
        limit = limit if limit is not None else self._config.report_top_customers
        ranked = sorted(
            (
                TopCustomer(
                    id=c.id,
                    name=c.name,
                    phone=c.phone,
                    lifetime_value=metrics[c.id].lifetime_value if c.id in metrics else 0.0,
                    orders=metrics[c.id].order_count if c.id in metrics else 0,
                )
                for c in customers
            ),
            key=lambda t: t.lifetime_value,
            reverse=True,
        )
        return ranked[:limit]

    def build(
        self,
        orders: list[Order],
        customers: list[Customer],
        customer_orders: list[Order],
        products: list[Product],
        now: datetime,
        range_key=None,
    ) -> SalesReport:
        """Run every reports-page aggregation against one reference time.

        Args:
            orders: Counter orders (status counts, revenue, best sellers, series).
            customers: Customer directory.
            customer_orders: Per-customer order history (lifetime value).
            products: Menu products.
            now: Reference time, supplied by the caller.
            range_key: Chart range for the trend series. Defaults to
                settings.report_range.
        """
        config = self._config
        range_key = range_key or settings.report_range
        now = to_datetime(now)

        def count(status: str) -> int:
            return sum(1 for o in orders if status_value(o.status) == status)

        completed = [o for o in orders if status_value(o.status) == config.completed_status]
        total_revenue = float(sum(o.total for o in completed))
        avg_order_value = total_revenue / len(completed) if completed else 0.0

        series = build_range_series(
            range_key,
            orders,
            now,
            get_date=lambda o: o.created_at,
            get_revenue=lambda o: completed_revenue(o, config),
        )

        metrics = compute_customer_metrics(customers, customer_orders, config)
        with_orders = sum(1 for c in customers if c.id in metrics and metrics[c.id].order_count > 0)

        return SalesReport(
            range_key=str(getattr(range_key, "value", range_key)),
            completed_orders=len(completed),
            pending_orders=count("pending"),
            preparing_orders=count("preparing"),
            cancelled_orders=count("cancelled"),
            total_revenue=total_revenue,
            avg_order_value=avg_order_value,
            top_items=self.top_items(orders),
            series=series,
            avg_value_series=average_value_series(series),
            product_stats=self.product_stats(products),
            customers_with_orders=with_orders,
            customers_without_orders=len(customers) - with_orders,
            top_customers=self.top_customers(customers, metrics),
        )


def build_sales_report(
    orders: list[Order],
    customers: list[Customer],
    customer_orders: list[Order],
    products: list[Product],
    now: datetime,
    range_key=None,
    config: MetricsConfig | None = None,
) -> SalesReport:
    """Reports page aggregations. See SalesReportBuilder.build."""
    return SalesReportBuilder(config).build(orders, customers, customer_orders, products, now, range_key)
