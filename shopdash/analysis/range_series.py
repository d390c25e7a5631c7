"""Range Series: buckets timestamped records into fixed chart windows.

Four ranges are supported: last 24 hours (hourly), last 7 and 30 days
(daily) and last 6 months (monthly). The output always has one point per
bucket, oldest first, with empty buckets left at zero so the chart shows
gaps instead of skipping them.

"now" is always supplied by the caller. Nothing here reads the clock.

Usage:
    points = build_range_series(
        "7d", orders, now,
        get_date=lambda o: o.created_at,
        get_revenue=lambda o: o.total if o.status == "completed" else 0,
    )
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Iterable

import pandas as pd

from shopdash.config import BUCKET_KEY_FORMATS, RANGE_META
from shopdash.logging_config import get_logger
from shopdash.schemas import AverageValuePoint, RangePoint

logger = get_logger("range_series")


class RangeKey(str, Enum):
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_6_MONTHS = "6m"


RANGE_OPTIONS = [{"value": key, "label": meta["label"]} for key, meta in RANGE_META.items()]


@dataclass(frozen=True)
class RangeBucket:
    key: str
    label: str
    start: datetime


def _range_meta(range_key) -> dict:
    key = range_key.value if isinstance(range_key, RangeKey) else str(range_key)
    if key not in RANGE_META:
        raise ValueError(
            f"Unknown range key: {range_key!r}\n"
            f"Expected one of: {', '.join(RANGE_META)}"
        )
    return RANGE_META[key]


def to_datetime(value: Any) -> datetime:
    """Accept datetime objects or ISO-8601 strings ('Z' suffix included)."""
    if isinstance(value, datetime):
        return value
    parsed = pd.Timestamp(value)
    if pd.isna(parsed):
        raise ValueError(f"Not a timestamp: {value!r}")
    return parsed.to_pydatetime()


def align_timestamp(value: datetime, now: datetime) -> datetime:
    """Express a record timestamp in now's clock so calendar fields compare."""
    if (value.tzinfo is None) != (now.tzinfo is None):
        raise ValueError(
            f"Cannot mix naive and timezone-aware timestamps: "
            f"record={value.isoformat()}, now={now.isoformat()}"
        )
    if now.tzinfo is not None:
        return value.astimezone(now.tzinfo)
    return value


def _bucket_key(value: datetime, granularity: str) -> str:
    return value.strftime(BUCKET_KEY_FORMATS[granularity])


def _hour_label(value: datetime) -> str:
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{value.hour % 12 or 12} {suffix}"


def _day_label(value: datetime) -> str:
    return f"{value:%b} {value.day}"


def _month_label(value: datetime) -> str:
    return f"{value:%b %y}"


def _shift_months(value: datetime, months: int) -> datetime:
    """First-of-month value moved back by whole months."""
    index = value.year * 12 + (value.month - 1) - months
    return value.replace(year=index // 12, month=index % 12 + 1)


def _window_start(now: datetime, granularity: str, points: int) -> datetime:
    """The instant one full span before now (24h, N days or N calendar months)."""
    if granularity == "hour":
        return now - timedelta(hours=points)
    if granularity == "day":
        return now - timedelta(days=points)
    # Calendar months, clamped to month end (Aug 31 - 6 months = Feb 28/29)
    shifted = pd.Timestamp(now) - pd.DateOffset(months=points)
    return shifted.to_pydatetime()


def get_range_buckets(range_key, now: datetime) -> tuple[list[RangeBucket], str]:
    """Generate bucket keys and labels walking backward from now, oldest first."""
    meta = _range_meta(range_key)
    granularity = meta["granularity"]
    points = meta["points"]
    buckets: list[RangeBucket] = []

    for i in range(points - 1, -1, -1):
        if granularity == "hour":
            start = now.replace(minute=0, second=0, microsecond=0) - timedelta(hours=i)
            label = _hour_label(start)
        elif granularity == "day":
            start = now.replace(hour=0, minute=0, second=0, microsecond=0) - timedelta(days=i)
            label = _day_label(start)
        else:
            first = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
            start = _shift_months(first, i)
            label = _month_label(start)
        buckets.append(RangeBucket(key=_bucket_key(start, granularity), label=label, start=start))

    return buckets, granularity


class RangeSeriesBuilder:
    """Builds fixed-length, zero-filled revenue/order series for one range."""

    def __init__(self, range_key):
        self._meta = _range_meta(range_key)
        self._range_key = range_key

    def build(
        self,
        records: Iterable,
        now: datetime,
        get_date: Callable[[Any], Any],
        get_revenue: Callable[[Any], float],
    ) -> list[RangePoint]:
        """Bucket records by their timestamp and sum revenue per bucket.

        Args:
            records: Any records; only read through the two getters.
            now: Reference time. Records snap to hour, day or month; those whose
                snapped key matches no bucket are ignored. A record at exactly
                one span before now counts in the first bucket.
            get_date: Record -> datetime or ISO string.
            get_revenue: Record -> revenue contribution, used verbatim.

        Returns:
            One RangePoint per bucket, oldest first. Never shorter than the range.
        """
        now = to_datetime(now)
        buckets, granularity = get_range_buckets(self._range_key, now)
        bucket_keys = {b.key for b in buckets}
        window_start = _window_start(now, granularity, self._meta["points"])

        keys: list[str] = []
        revenues: list[float] = []
        skipped = 0
        for record in records:
            when = align_timestamp(to_datetime(get_date(record)), now)
            key = _bucket_key(when, granularity)
            if when == window_start:
                # Exactly one full span back still opens the window
                key = buckets[0].key
            if key not in bucket_keys:
                skipped += 1
                continue
            keys.append(key)
            revenues.append(float(get_revenue(record)))

        if skipped:
            logger.debug(
                "Records outside the chart buckets",
                extra={"range": str(self._meta["label"]), "skipped": skipped},
            )

        if not keys:
            return [RangePoint(label=b.label, revenue=0.0, orders=0) for b in buckets]

        frame = pd.DataFrame({"key": keys, "revenue": revenues})
        grouped = frame.groupby("key").agg(
            revenue=("revenue", "sum"),
            orders=("revenue", "size"),
        )
        aligned = grouped.reindex([b.key for b in buckets], fill_value=0)

        return [
            RangePoint(
                label=bucket.label,
                revenue=float(aligned.at[bucket.key, "revenue"]),
                orders=int(aligned.at[bucket.key, "orders"]),
            )
            for bucket in buckets
        ]


def build_range_series(
    range_key,
    records: Iterable,
    now: datetime,
    *,
    get_date: Callable[[Any], Any],
    get_revenue: Callable[[Any], float],
) -> list[RangePoint]:
    """Range series for range_key. See RangeSeriesBuilder.build."""
    return RangeSeriesBuilder(range_key).build(records, now, get_date, get_revenue)


def average_value_series(points: list[RangePoint]) -> list[AverageValuePoint]:
    """Revenue per order for each bucket; 0 where a bucket has no orders."""
    return [
        AverageValuePoint(label=p.label, avg=p.revenue / p.orders if p.orders > 0 else 0.0)
        for p in points
    ]


def get_range_label(range_key) -> str:
    return _range_meta(range_key)["label"]


def get_range_tick_step(range_key) -> int:
    return _range_meta(range_key)["tick_step"]


def sparse_tick_label(value: str, index: int, step: int) -> str:
    """Keep every step-th axis label, blank the rest."""
    return value if index % step == 0 else ""


def thin_labels(points: list[RangePoint], range_key) -> list[str]:
    step = get_range_tick_step(range_key)
    return [sparse_tick_label(p.label, i, step) for i, p in enumerate(points)]


def series_frame(points: list[RangePoint]) -> pd.DataFrame:
    return pd.DataFrame(
        [p.model_dump() for p in points],
        columns=["label", "revenue", "orders"],
    )
