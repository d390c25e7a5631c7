"""Pydantic models. Input records the dashboard hands us, and the derived
shapes it renders."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from shopdash.config import STATUS_ALIASES


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def status_value(status) -> str:
    """Plain lower-case status string for enum members and raw strings alike."""
    if isinstance(status, Enum):
        status = status.value
    return str(status).strip().lower()


# ── Input records ──────────────────────────────────────────────

class OrderItem(BaseModel):
    name: str
    quantity: int = Field(ge=0)
    unit_price: float = Field(ge=0)
    notes: str | None = None

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


class Order(BaseModel):
    """One order, covering both the customer-history and counter shapes.

    Counter orders only know the customer's name, so customer_id is optional.
    """
    id: str
    customer_id: str | None = None
    customer_name: str | None = None
    phone: str | None = None
    location: str | None = None
    created_at: datetime
    status: OrderStatus
    items: list[OrderItem] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            return STATUS_ALIASES.get(value, value)
        return value

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self.items)


class Customer(BaseModel):
    id: str
    name: str
    phone: str = ""
    joined_at: datetime
    last_visit: datetime
    favorite_item: str | None = None
    notes: str | None = None


class ProductPrice(BaseModel):
    medium: float
    large: float


class Product(BaseModel):
    id: str
    name: str
    category: str
    price: ProductPrice
    image: str | None = None
    in_stock: bool = True
    is_active: bool = True


class InventoryItem(BaseModel):
    id: str
    name: str
    category: str
    unit: str
    quantity: int = Field(ge=0)
    reorder_level: int = Field(ge=0)
    location: str | None = None
    is_active: bool = True
    updated_at: datetime
    notes: str | None = None

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.reorder_level


# ── Derived views ──────────────────────────────────────────────

class TopItem(BaseModel):
    name: str
    quantity: int


class CustomerMetrics(BaseModel):
    total_spent: float = 0.0
    order_count: int = 0
    last_order_at: datetime | None = None
    avg_order_value: float = 0.0
    # Placeholder: equal to total_spent until a predictive formula exists.
    lifetime_value: float = 0.0
    top_items: list[TopItem] = Field(default_factory=list)


class RangePoint(BaseModel):
    label: str
    revenue: float
    orders: int


class AverageValuePoint(BaseModel):
    label: str
    avg: float


class StatusCount(BaseModel):
    status: OrderStatus
    count: int


class DashboardSummary(BaseModel):
    range_key: str
    orders_today: int
    open_orders: int
    completed_revenue: float
    avg_order_value: float
    active_products: int
    out_of_stock_products: int
    total_customers: int
    active_customers: int
    recent_orders: list[Order]
    status_breakdown: list[StatusCount]
    series: list[RangePoint]


class ProductStats(BaseModel):
    active: int
    inactive: int
    out_of_stock: int


class TopCustomer(BaseModel):
    id: str
    name: str
    phone: str
    lifetime_value: float
    orders: int


class SalesReport(BaseModel):
    range_key: str
    completed_orders: int
    pending_orders: int
    preparing_orders: int
    cancelled_orders: int
    total_revenue: float
    avg_order_value: float
    top_items: list[TopItem]
    series: list[RangePoint]
    avg_value_series: list[AverageValuePoint]
    product_stats: ProductStats
    customers_with_orders: int
    customers_without_orders: int
    top_customers: list[TopCustomer]
