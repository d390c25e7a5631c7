"""Central configuration for the shopdash aggregations.

Every status rank, range definition and limit used by the analysis
modules lives here. No other module hardcodes these values. They import
from this config.
"""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

load_dotenv()

# ── Order statuses ─────────────────────────────────────────────

# Only this status is revenue-bearing (spend, LTV, top items).
COMPLETED_STATUS = "completed"

# Statuses that still need work at the counter.
OPEN_STATUSES = ("pending", "preparing")

# Admin orders use "Done" where customer orders use "completed".
STATUS_ALIASES = {
    "done": "completed",
}

# ── Queue ordering ─────────────────────────────────────────────
# First come first serve: pending, then preparing, then done, then
# cancelled at the bottom. Oldest first inside each group.

QUEUE_STATUS_RANK = {
    "pending": 0,
    "preparing": 1,
    "completed": 2,
    "done": 2,
    "cancelled": 3,
}
QUEUE_FALLBACK_RANK = 99

# ── Range series ───────────────────────────────────────────────
# granularity, number of buckets, axis tick step, span of the window.

RANGE_META = {
    "24h": {"label": "24h", "granularity": "hour", "points": 24, "tick_step": 3},
    "7d": {"label": "7d", "granularity": "day", "points": 7, "tick_step": 2},
    "30d": {"label": "30d", "granularity": "day", "points": 30, "tick_step": 5},
    "6m": {"label": "6m", "granularity": "month", "points": 6, "tick_step": 1},
}

# strftime patterns used as bucket keys (calendar fields of the local time)
BUCKET_KEY_FORMATS = {
    "hour": "%Y-%m-%d-%H",
    "day": "%Y-%m-%d",
    "month": "%Y-%m",
}

# ── Limits ─────────────────────────────────────────────────────

TOP_ITEMS_PER_CUSTOMER = 3
REPORT_TOP_ITEMS = 6
REPORT_TOP_CUSTOMERS = 6
RECENT_ORDERS = 6

# ── Windows ────────────────────────────────────────────────────

# last_visit within this many days = active
ACTIVE_CUSTOMER_WINDOW_DAYS = int(os.getenv("SHOPDASH_ACTIVE_CUSTOMER_WINDOW_DAYS", "30"))


@dataclass
class MetricsConfig:
    """Bundled config object passed to the analysis classes.

    Exists so we can override values in tests without touching module-level constants.
    Production code uses the defaults; tests can pass modified instances.
    """
    completed_status: str = COMPLETED_STATUS
    open_statuses: tuple[str, ...] = OPEN_STATUSES
    top_items_per_customer: int = TOP_ITEMS_PER_CUSTOMER
    queue_status_rank: dict[str, int] = field(default_factory=lambda: dict(QUEUE_STATUS_RANK))
    queue_fallback_rank: int = QUEUE_FALLBACK_RANK
    report_top_items: int = REPORT_TOP_ITEMS
    report_top_customers: int = REPORT_TOP_CUSTOMERS
    recent_orders: int = RECENT_ORDERS
    active_customer_window_days: int = ACTIVE_CUSTOMER_WINDOW_DAYS
