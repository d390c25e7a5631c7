"""Directory filters: search, filter and sort helpers for the listing pages.

Orders board, customer directory and inventory table all share the same
pattern: a free-text query matched case-insensitively against a few fields,
optional allow-lists, then a page-specific sort.
"""

import math
from datetime import datetime

from shopdash.analysis.range_series import align_timestamp, to_datetime
from shopdash.schemas import Customer, CustomerMetrics, InventoryItem, Order, status_value

CUSTOMER_SORT_MODES = ("recent", "lifetime_value", "orders")


def _normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def _matches(query: str, *fields) -> bool:
    return any(query in (field or "").lower() for field in fields)


def filter_orders(orders: list[Order], query: str = "", statuses=None) -> list[Order]:
    """Orders matching the search box and the status checkboxes.

    The query is matched against customer name, phone, location, order id,
    item names and status. An empty status list means "all statuses".
    """
    q = _normalize_query(query)
    allowed = {status_value(s) for s in statuses} if statuses else None

    results = []
    for order in orders:
        if q:
            item_names = " ".join(item.name for item in order.items)
            if not _matches(
                q,
                order.customer_name,
                order.phone,
                order.location,
                order.id,
                item_names,
                status_value(order.status),
            ):
                continue
        if allowed is not None and status_value(order.status) not in allowed:
            continue
        results.append(order)
    return results


def rank_customers(
    customers: list[Customer],
    metrics: dict[str, CustomerMetrics],
    query: str = "",
    sort_mode: str = "recent",
) -> list[Customer]:
    """Customer directory rows after search and sort.

    Sort modes:
    - "recent": last completed order, falling back to last visit, newest first.
    - "lifetime_value": highest lifetime value first.
    - "orders": most completed orders first.
    """
    if sort_mode not in CUSTOMER_SORT_MODES:
        raise ValueError(
            f"Unknown customer sort mode: {sort_mode!r}\n"
            f"Expected one of: {', '.join(CUSTOMER_SORT_MODES)}"
        )
    q = _normalize_query(query)
    empty = CustomerMetrics()

    results = []
    for customer in customers:
        m = metrics.get(customer.id, empty)
        if q:
            top_items = " ".join(t.name for t in m.top_items)
            if not _matches(q, customer.name, customer.phone, customer.id, customer.favorite_item, top_items):
                continue
        results.append(customer)

    def sort_key(customer: Customer) -> float:
        m = metrics.get(customer.id, empty)
        if sort_mode == "lifetime_value":
            return m.lifetime_value
        if sort_mode == "orders":
            return m.order_count
        recent = m.last_order_at or customer.last_visit
        return to_datetime(recent).timestamp()

    return sorted(results, key=sort_key, reverse=True)


def filter_inventory(
    items: list[InventoryItem],
    query: str = "",
    categories=None,
    show_inactive: bool = False,
    only_low_stock: bool = False,
) -> list[InventoryItem]:
    """Inventory rows: low stock first, then alphabetical by name."""
    q = _normalize_query(query)
    allowed = set(categories) if categories else None

    results = []
    for item in items:
        if not show_inactive and not item.is_active:
            continue
        if q and not _matches(q, item.name, item.category, item.location):
            continue
        if allowed is not None and item.category not in allowed:
            continue
        if only_low_stock and not item.is_low_stock:
            continue
        results.append(item)

    return sorted(results, key=lambda i: (0 if i.is_low_stock else 1, i.name.lower()))


def parse_non_negative_int(value) -> int | None:
    """Form input -> whole number >= 0, or None if it isn't one.

    Fractions are floored ("3.7" -> 3). Blank input reads as 0.
    """
    if isinstance(value, str):
        value = value.strip() or "0"
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return math.floor(number)


def days_ago(value, now: datetime) -> str:
    """Human "last seen" text: Today, 1 day ago, N days ago."""
    try:
        when = align_timestamp(to_datetime(value), to_datetime(now))
    except (TypeError, ValueError):
        return str(value)
    days = math.floor((to_datetime(now) - when).total_seconds() / 86400)
    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"
