"""
Record validation tests.

Run with: pytest tests/unit/test_schemas.py -v
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from shopdash.schemas import InventoryItem, Order, OrderItem, OrderStatus, status_value


class TestOrderStatus:

    @pytest.mark.parametrize("raw", ["Done", "done", " DONE ", "completed", "Completed"])
    def test_done_normalized_to_completed(self, raw, now):
        order = Order(id="o1", created_at=now, status=raw)
        assert order.status is OrderStatus.COMPLETED

    def test_admin_capitalization(self, now):
        assert Order(id="o1", created_at=now, status="Preparing").status is OrderStatus.PREPARING

    def test_unknown_status_rejected(self, now):
        with pytest.raises(ValidationError):
            Order(id="o1", created_at=now, status="shipped")

    def test_status_value(self):
        assert status_value(OrderStatus.READY) == "ready"
        assert status_value(" Pending") == "pending"


class TestOrderTotals:

    def test_total_is_sum_of_lines(self, order_factory, now):
        order = order_factory("o1", "c1", now, items=[("Taro Milk Tea", 2, 28), ("Cheese Sticks", 3, 12)])
        assert order.total == 92

    def test_no_items(self, order_factory, now):
        assert order_factory("o1", "c1", now).total == 0

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            OrderItem(name="Taro Milk Tea", quantity=-1, unit_price=28)

    def test_iso_timestamp_parsed(self):
        order = Order(id="o1", created_at="2026-10-18T09:00:00Z", status="pending")
        assert order.created_at.tzinfo is not None


@pytest.mark.parametrize("quantity,low", [(79, True), (80, True), (81, False)])
def test_low_stock_threshold(quantity, low):
    item = InventoryItem(
        id="inv", name="Cup", category="Cups", unit="pcs",
        quantity=quantity, reorder_level=80, updated_at=datetime(2026, 10, 18),
    )
    assert item.is_low_stock is low
