"""Report runner: prints the dashboard and reports pages from sample data.

This is the only file you run. It builds the sample dataset relative to the
current time in the business timezone, runs every aggregation, checks the
data for orphaned orders, and prints a summary.

Usage:
    python -m shopdash.report
    python -m shopdash.report 30d
"""

import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from shopdash.analysis.customer_metrics import compute_customer_metrics, find_orphan_orders, metrics_frame
from shopdash.analysis.dashboard import summarize_dashboard
from shopdash.analysis.queue import sort_orders
from shopdash.analysis.range_series import get_range_label, series_frame, thin_labels
from shopdash.analysis.sales_report import build_sales_report
from shopdash.sample_data import build_sample_dataset
from shopdash.settings import settings


def _money(value: float) -> str:
    return f"{settings.currency} {value:,.2f}"


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    range_key = argv[0] if argv else settings.dashboard_range
    now = datetime.now(ZoneInfo(settings.timezone))

    print("=" * 60)
    print("shopdash report")
    print("=" * 60)

    data = build_sample_dataset(now)

    # ── Dashboard ─────────────────────────────────────────────
    print(f"\n[1/4] Dashboard ({get_range_label(range_key)})...")
    summary = summarize_dashboard(data.counter_orders, data.customers, data.products, now, range_key)
    print(f"  Orders today:      {summary.orders_today}")
    print(f"  Open orders:       {summary.open_orders}")
    print(f"  Completed revenue: {_money(summary.completed_revenue)}")
    print(f"  Avg order value:   {_money(summary.avg_order_value)}")
    print(f"  Active customers:  {summary.active_customers} / {summary.total_customers}")
    print(f"  Products:          {summary.active_products} active, "
          f"{summary.out_of_stock_products} out of stock")
    for segment in summary.status_breakdown:
        print(f"    {segment.status.value:<10} {segment.count}")

    frame = series_frame(summary.series)
    frame["tick"] = thin_labels(summary.series, range_key)
    print(frame.to_string(index=False))

    # ── Orders queue ──────────────────────────────────────────
    print("\n[2/4] Orders queue (first come first serve)...")
    for order in sort_orders(data.counter_orders, "queue")[:8]:
        print(f"  {order.id}  {order.status.value:<10} {order.created_at:%Y-%m-%d %H:%M}  "
              f"{order.customer_name}  {_money(order.total)}")

    # ── Customers ─────────────────────────────────────────────
    print("\n[3/4] Customer metrics...")
    metrics = compute_customer_metrics(data.customers, data.customer_orders)
    print(metrics_frame(metrics).to_string(index=False))

    # ── Reports ───────────────────────────────────────────────
    print("\n[4/4] Sales report...")
    report = build_sales_report(
        data.counter_orders, data.customers, data.customer_orders, data.products, now,
    )
    print(f"  Total revenue: {_money(report.total_revenue)} over {report.completed_orders} orders")
    print(f"  Customers with orders: {report.customers_with_orders}, "
          f"without: {report.customers_without_orders}")
    print("  Top items:")
    for item in report.top_items:
        print(f"    {item.quantity:>3} × {item.name}")
    print("  Top customers by lifetime value:")
    for customer in report.top_customers:
        print(f"    {customer.name:<22} {_money(customer.lifetime_value)} ({customer.orders} orders)")

    # ── Validate ──────────────────────────────────────────────
    orphans = find_orphan_orders(data.customers, data.customer_orders)
    status = "✓" if not orphans else "✗"
    print(f"\n  {status} orphan_customer_orders: {len(orphans)}")

    return report


if __name__ == "__main__":
    main()
