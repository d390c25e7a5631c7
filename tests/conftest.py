"""
Shared fixtures: a fixed reference time and the sample dataset built from it.

Every aggregation takes "now" as a parameter, so pinning it here keeps the
tests independent of the wall clock.
"""

from datetime import datetime

import pytest

from shopdash.sample_data import build_sample_dataset
from shopdash.schemas import Customer, Order, OrderItem

# Sunday afternoon; keeps 24h/7d windows clear of month boundaries
NOW = datetime(2026, 10, 18, 14, 30)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def dataset(now):
    return build_sample_dataset(now)


def make_customer(customer_id: str, name: str = "Test Customer", when: datetime = NOW) -> Customer:
    return Customer(id=customer_id, name=name, phone="+233 20 000 0000", joined_at=when, last_visit=when)


def make_order(
    order_id: str,
    customer_id: str | None,
    created_at: datetime,
    status: str = "completed",
    items=(),
    **extra,
) -> Order:
    return Order(
        id=order_id,
        customer_id=customer_id,
        created_at=created_at,
        status=status,
        items=[OrderItem(name=name, quantity=qty, unit_price=price) for name, qty, price in items],
        **extra,
    )


@pytest.fixture
def order_factory():
    return make_order


@pytest.fixture
def customer_factory():
    return make_customer
