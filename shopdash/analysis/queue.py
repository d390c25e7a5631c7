"""Queue ordering for the orders board.

Two modes:
- "queue": first come first serve for active work. Pending, then
  preparing, then done, then cancelled; oldest first inside each group.
  The oldest order that is not done yet bubbles to the top.
- "latest": newest first, ignoring status.
"""

from datetime import datetime
from enum import Enum
from functools import cmp_to_key

from shopdash.analysis.range_series import to_datetime
from shopdash.config import MetricsConfig
from shopdash.schemas import status_value

_DEFAULT_CONFIG = MetricsConfig()


class SortMode(str, Enum):
    QUEUE = "queue"
    LATEST = "latest"


def _sort_mode(value) -> SortMode:
    try:
        return SortMode(value)
    except ValueError:
        raise ValueError(
            f"Unknown sort mode: {value!r}\n"
            f"Expected one of: {', '.join(m.value for m in SortMode)}"
        ) from None


def queue_rank(status, config: MetricsConfig | None = None) -> int:
    """Rank for queue mode; unknown statuses sink to the bottom."""
    config = config or _DEFAULT_CONFIG
    return config.queue_status_rank.get(status_value(status), config.queue_fallback_rank)


def _timestamp(order) -> float:
    created_at: datetime = to_datetime(order.created_at)
    return created_at.timestamp()


def compare_orders(a, b, sort_mode="queue", config: MetricsConfig | None = None) -> int:
    """Comparator for orders with .status and .created_at. Negative sorts a first."""
    mode = _sort_mode(sort_mode)
    time_a = _timestamp(a)
    time_b = _timestamp(b)

    if mode is SortMode.LATEST:
        return (time_b > time_a) - (time_b < time_a)

    rank_a = queue_rank(a.status, config)
    rank_b = queue_rank(b.status, config)
    if rank_a != rank_b:
        return rank_a - rank_b
    return (time_a > time_b) - (time_a < time_b)


def sort_orders(orders, sort_mode="queue", config: MetricsConfig | None = None) -> list:
    """Return a new, stably sorted list. The input list is left alone."""
    mode = _sort_mode(sort_mode)
    return sorted(orders, key=cmp_to_key(lambda a, b: compare_orders(a, b, mode, config)))
