"""Dashboard Summary: headline KPIs for the admin home page.

Each helper answers one question the home page asks ("How many orders are
still open?", "Who came in this month?"). summarize_dashboard() runs them
all against the same reference time.
"""

from datetime import datetime, timedelta

from shopdash.analysis.queue import SortMode, sort_orders
from shopdash.analysis.range_series import align_timestamp, build_range_series, to_datetime
from shopdash.config import MetricsConfig
from shopdash.schemas import (
    Customer,
    DashboardSummary,
    Order,
    OrderStatus,
    Product,
    StatusCount,
    status_value,
)
from shopdash.settings import settings

# Pie chart order on the home page
BREAKDOWN_STATUSES = [
    OrderStatus.COMPLETED,
    OrderStatus.PREPARING,
    OrderStatus.PENDING,
    OrderStatus.CANCELLED,
]


def completed_revenue(order: Order, config: MetricsConfig | None = None) -> float:
    """Revenue contribution of one order: its total if completed, else 0."""
    config = config or MetricsConfig()
    return order.total if status_value(order.status) == config.completed_status else 0.0


def order_status_counts(orders: list[Order], statuses=None) -> list[StatusCount]:
    statuses = statuses or BREAKDOWN_STATUSES
    return [
        StatusCount(status=status, count=sum(1 for o in orders if status_value(o.status) == status.value))
        for status in statuses
    ]


def orders_on_day(orders: list[Order], now: datetime) -> list[Order]:
    """Orders created on the same calendar day as now (in now's timezone)."""
    return [o for o in orders if align_timestamp(to_datetime(o.created_at), now).date() == now.date()]


def active_customers(customers: list[Customer], now: datetime, window_days: int) -> list[Customer]:
    """Customers whose last visit is within window_days of now."""
    window = timedelta(days=window_days)
    return [c for c in customers if now - align_timestamp(to_datetime(c.last_visit), now) <= window]


def summarize_dashboard(
    orders: list[Order],
    customers: list[Customer],
    products: list[Product],
    now: datetime,
    range_key=None,
    config: MetricsConfig | None = None,
) -> DashboardSummary:
    """Build every number on the admin home page.

    Args:
        orders: Counter orders.
        customers: Customer directory (for the active-customer count).
        products: Menu products.
        now: Reference time, supplied by the caller.
        range_key: Chart range for the revenue/orders series. Defaults to
            settings.dashboard_range.

    Returns:
        DashboardSummary with KPIs, status breakdown and chart series.
    """
    config = config or MetricsConfig()
    range_key = range_key or settings.dashboard_range
    now = to_datetime(now)

    open_orders = [o for o in orders if status_value(o.status) in config.open_statuses]
    completed = [o for o in orders if status_value(o.status) == config.completed_status]
    revenue = sum(o.total for o in completed)
    avg_order_value = revenue / len(completed) if completed else 0.0

    series = build_range_series(
        range_key,
        orders,
        now,
        get_date=lambda o: o.created_at,
        get_revenue=lambda o: completed_revenue(o, config),
    )

    return DashboardSummary(
        range_key=str(getattr(range_key, "value", range_key)),
        orders_today=len(orders_on_day(orders, now)),
        open_orders=len(open_orders),
        completed_revenue=float(revenue),
        avg_order_value=float(avg_order_value),
        active_products=sum(1 for p in products if p.is_active),
        out_of_stock_products=sum(1 for p in products if not p.in_stock),
        total_customers=len(customers),
        active_customers=len(active_customers(customers, now, config.active_customer_window_days)),
        recent_orders=sort_orders(orders, SortMode.LATEST, config)[: config.recent_orders],
        status_breakdown=order_status_counts(orders),
        series=series,
    )
