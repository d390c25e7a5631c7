"""Customer Metrics: lifetime statistics per customer from order history.

Folds the order list into spend, completed-order count, recency and top
purchased items for every customer. Only completed orders count toward
these numbers; pending, ready and cancelled orders are ignored.

The result is a derived view. Recompute it whenever the order list changes;
never store it as the source of truth.

Usage:
    metrics = compute_customer_metrics(customers, orders)
    metrics["cust_001"].avg_order_value
"""

import pandas as pd

from shopdash.analysis.range_series import align_timestamp
from shopdash.config import MetricsConfig
from shopdash.logging_config import get_logger
from shopdash.schemas import Customer, CustomerMetrics, Order, TopItem, status_value

logger = get_logger("customer_metrics")

ORDER_COLUMNS = ["order_id", "customer_id", "status", "total"]
ITEM_COLUMNS = ["customer_id", "status", "name", "quantity"]


class CustomerMetricsCalculator:
    """Computes per-customer lifetime metrics from a list of orders."""

    def __init__(self, config: MetricsConfig | None = None):
        self._config = config or MetricsConfig()

    def compute(
        self,
        customers: list[Customer],
        orders: list[Order],
    ) -> dict[str, CustomerMetrics]:
        """Build the customer id -> metrics mapping.

        Args:
            customers: Every customer that must appear in the output.
            orders: Order history. Read only, never mutated.

        Returns:
            Dict keyed by customer id, in customer order. Customers without
            completed orders get a zeroed entry.
        """
        customer_ids = list(dict.fromkeys(c.id for c in customers))
        known = set(customer_ids)

        orders_df = self._orders_frame(orders)
        orphans = orders_df[~orders_df["customer_id"].isin(known)]
        if len(orphans) > 0:
            logger.warning(
                "Skipping orders for unknown customers",
                extra={"orphan_count": len(orphans), "order_ids": orphans["order_id"].tolist()},
            )

        completed = orders_df[
            (orders_df["status"] == self._config.completed_status)
            & orders_df["customer_id"].isin(known)
        ]
        totals = self._order_totals(completed)
        latest = self._latest_orders(orders, known)
        top_items = self._top_items(orders, known)

        metrics: dict[str, CustomerMetrics] = {}
        for customer_id in customer_ids:
            entry = CustomerMetrics()
            if customer_id in totals:
                entry.total_spent, entry.order_count = totals[customer_id]
                entry.last_order_at = latest.get(customer_id)

            # Guard: zero completed orders means zero AOV, not NaN
            entry.avg_order_value = (
                entry.total_spent / entry.order_count if entry.order_count > 0 else 0.0
            )
            entry.lifetime_value = entry.total_spent  # placeholder definition
            entry.top_items = top_items.get(customer_id, [])
            metrics[customer_id] = entry

        return metrics

    # ── Private helpers ────────────────────────────────────────────

    def _orders_frame(self, orders: list[Order]) -> pd.DataFrame:
        """One row per order with its line-item total."""
        rows = [
            {
                "order_id": o.id,
                "customer_id": o.customer_id,
                "status": status_value(o.status),
                "total": float(o.total),
            }
            for o in orders
        ]
        return pd.DataFrame(rows, columns=ORDER_COLUMNS)

    def _order_totals(self, completed: pd.DataFrame) -> dict[str, tuple[float, int]]:
        """Completed spend and order count per customer."""
        if completed.empty:
            return {}

        summary = completed.groupby("customer_id", sort=False).agg(
            total_spent=("total", "sum"),
            order_count=("order_id", "count"),
        )
        return {
            customer_id: (float(row["total_spent"]), int(row["order_count"]))
            for customer_id, row in summary.iterrows()
        }

    def _latest_orders(self, orders: list[Order], known: set[str]) -> dict:
        """Most recent completed order time per customer.

        Walked in plain Python so the caller's datetime objects come back
        untouched (a DataFrame column would turn them into Timestamps).
        A later timestamp replaces the recorded one; ties keep the first.
        Mixing naive and aware timestamps raises ValueError.
        """
        latest = {}
        for o in orders:
            if status_value(o.status) != self._config.completed_status or o.customer_id not in known:
                continue
            current = latest.get(o.customer_id)
            if current is None or align_timestamp(o.created_at, current) > current:
                latest[o.customer_id] = o.created_at
        return latest

    def _top_items(self, orders: list[Order], known: set[str]) -> dict[str, list[TopItem]]:
        """Highest-quantity item names per customer, ties in first-seen order."""
        rows = [
            {
                "customer_id": o.customer_id,
                "status": status_value(o.status),
                "name": item.name,
                "quantity": item.quantity,
            }
            for o in orders
            for item in o.items
        ]
        items_df = pd.DataFrame(rows, columns=ITEM_COLUMNS)
        items_df = items_df[
            (items_df["status"] == self._config.completed_status)
            & items_df["customer_id"].isin(known)
        ]
        if items_df.empty:
            return {}

        # sort=False keeps groups in first-seen order; "seen" pins that order for ties
        per_item = items_df.groupby(["customer_id", "name"], sort=False, as_index=False)["quantity"].sum()
        per_item["seen"] = range(len(per_item))
        ranked = per_item.sort_values(["quantity", "seen"], ascending=[False, True])
        top = ranked.groupby("customer_id", sort=False).head(self._config.top_items_per_customer)

        result: dict[str, list[TopItem]] = {}
        for customer_id, name, quantity in zip(top["customer_id"], top["name"], top["quantity"]):
            result.setdefault(customer_id, []).append(TopItem(name=name, quantity=int(quantity)))
        return result


def compute_customer_metrics(
    customers: list[Customer],
    orders: list[Order],
    config: MetricsConfig | None = None,
) -> dict[str, CustomerMetrics]:
    """Per-customer lifetime metrics. See CustomerMetricsCalculator.compute."""
    return CustomerMetricsCalculator(config).compute(customers, orders)


def find_orphan_orders(customers: list[Customer], orders: list[Order]) -> list[Order]:
    """Orders whose customer id matches no customer (counter orders included)."""
    known = {c.id for c in customers}
    return [o for o in orders if o.customer_id not in known]


def metrics_frame(metrics: dict[str, CustomerMetrics]) -> pd.DataFrame:
    """Flatten the metrics mapping into one row per customer.

    top_items becomes a comma-joined string of item names so the frame
    prints cleanly.
    """
    rows = [
        {
            "customer_id": customer_id,
            "total_spent": m.total_spent,
            "order_count": m.order_count,
            "last_order_at": m.last_order_at,
            "avg_order_value": round(m.avg_order_value, 2),
            "lifetime_value": m.lifetime_value,
            "top_items": ", ".join(t.name for t in m.top_items),
        }
        for customer_id, m in metrics.items()
    ]
    return pd.DataFrame(rows, columns=[
        "customer_id", "total_spent", "order_count", "last_order_at",
        "avg_order_value", "lifetime_value", "top_items",
    ])
