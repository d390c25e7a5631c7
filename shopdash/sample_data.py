"""Sample dataset: the demo shop used by the report runner and the tests.

Every timestamp is an offset from a caller-supplied "now", so the data
always looks recent. The aggregation modules never import this file; the
caller builds a dataset and passes its lists in explicitly.

Edge cases baked in on purpose:
- cust_008 has no orders at all, cust_011 only a pending one.
- cust_012 only has a cancelled order.
- cust_007's only order is 31 days old (just outside a 30d window).
- cust_013 shares a phone number with cust_001.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from shopdash.schemas import Customer, InventoryItem, Order, OrderItem, Product, ProductPrice


@dataclass
class SampleDataset:
    """Bundle of sample lists, all relative to the same now."""
    now: datetime
    customers: list[Customer] = field(default_factory=list)
    customer_orders: list[Order] = field(default_factory=list)
    counter_orders: list[Order] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    inventory: list[InventoryItem] = field(default_factory=list)


# ── Customers ──────────────────────────────────────────────────
# id, name, phone, last visit (days ago), joined (days ago), favourite, notes

CUSTOMER_ROWS = [
    ("cust_001", "Ama Mensah", "+233 54 123 4567", 2, 220, "Brown Sugar Boba", "Prefers 50% sugar, extra pearls."),
    ("cust_002", "Kofi Owusu", "+233 20 555 0199", 6, 90, "Mango Ice Tea", None),
    ("cust_003", "Esi Boateng", "+233 24 777 3011", 1, 150, "Strawberry Milk Tea", None),
    ("cust_004", "Yaw Ofori", "+233 27 901 5522", 80, 300, None, "Moved out of town."),
    ("cust_005", "Adwoa Agyeman", "+233 50 442 0190", 0, 14, "Matcha Milk Tea", None),
    ("cust_006", "Kwame Nkrumah Jr.", "+233 24 300 1122", 3, 480, "Classic Milk Tea", "Allergic to peanuts."),
    ("cust_007", "Akosua Boateng-Tay", "+233 59 808 7711", 31, 31, "Passion Fruit Ice Tea", None),
    ("cust_008", "Samuel Mensah", "+233 55 918 4400", 365, 400, None, "No orders yet (walk-in inquiry only)."),
    ("cust_009", "Nana Akua", "+233 57 200 9090", 7, 200, "Taro Milk Tea", "Prefers 70% ice."),
    ("cust_010", "Prince Boateng", "+233 26 602 3303", 1, 620, "Caramel Milk Tea", None),
    ("cust_011", "Afia Darko", "+233 20 909 5522", 12, 80, None, "Uses office delivery address."),
    ("cust_012", "Robert Osei", "+233 23 441 7788", 180, 200, None, None),
    ("cust_013", "Lydia Quansah", "+233 54 123 4567", 4, 95, "Honey Lemon Ice Tea", "Shares phone with family (duplicate contact)."),
    ("cust_014", "George K.", "+233 27 111 2020", 2, 720, "Brown Sugar Boba", None),
    ("cust_015", "Comfort Asare", "+233 56 703 1001", 0, 0, "Coconut Milk Tea", "First visit today."),
]

# ── Customer order history ─────────────────────────────────────
# id, customer, days ago, status, [(item, qty, unit price)]

CUSTOMER_ORDER_ROWS = [
    ("ord_1001", "cust_001", 35, "completed", [("Brown Sugar Boba", 2, 28), ("Chicken Shawarma (Large)", 1, 45)]),
    ("ord_1016", "cust_001", 9, "completed", [("Brown Sugar Boba", 2, 28)]),
    ("ord_1021", "cust_001", 2, "completed", [("Brown Sugar Boba", 1, 28), ("Chicken Shawarma (Regular)", 1, 35)]),
    ("ord_1007", "cust_002", 28, "completed", [("Mango Ice Tea", 2, 22), ("Chicken Shawarma (Regular)", 1, 35)]),
    ("ord_1019", "cust_002", 6, "completed", [("Mango Ice Tea", 1, 22)]),
    ("ord_1025", "cust_002", 1, "pending", [("Chicken Shawarma (Large)", 1, 45), ("Mango Ice Tea", 1, 22)]),
    ("ord_1003", "cust_003", 60, "completed", [("Strawberry Milk Tea", 2, 26)]),
    ("ord_1012", "cust_003", 14, "completed", [("Strawberry Milk Tea", 1, 26), ("Chicken Shawarma (Regular)", 1, 35)]),
    ("ord_1028", "cust_003", 1, "completed", [("Strawberry Milk Tea", 1, 26)]),
    ("ord_0999", "cust_004", 120, "completed", [("Chicken Shawarma (Regular)", 1, 35)]),
    ("ord_1008", "cust_004", 80, "completed", [("Vanilla Milk Tea", 1, 26)]),
    ("ord_1032", "cust_005", 0, "completed", [("Matcha Milk Tea", 1, 28), ("Oreo Milk Tea", 1, 30)]),
    ("ord_1011", "cust_006", 20, "completed", [("Classic Milk Tea", 2, 25), ("Chicken Shawarma (Large)", 1, 45)]),
    ("ord_1022", "cust_006", 3, "ready", [("Classic Milk Tea", 1, 25)]),
    ("ord_1002", "cust_007", 31, "completed", [("Passion Fruit Ice Tea", 1, 20)]),
    ("ord_1014", "cust_009", 18, "completed", [("Taro Milk Tea", 1, 28), ("Chicken Shawarma (Regular)", 1, 35), ("Cheese Sticks", 2, 12)]),
    ("ord_1035", "cust_009", 7, "completed", [("Taro Milk Tea", 2, 28)]),
    ("ord_1030", "cust_010", 1, "completed", [("Caramel Milk Tea", 3, 30), ("Chicken Shawarma (Large)", 2, 45)]),
    ("ord_1027", "cust_011", 12, "pending", [("Vanilla Milk Tea", 1, 26)]),
    ("ord_0988", "cust_012", 180, "cancelled", [("Oreo Milk Tea", 1, 30), ("Chicken Shawarma (Regular)", 1, 35)]),
    ("ord_1033", "cust_013", 4, "completed", [("Honey Lemon Ice Tea", 1, 20)]),
    ("ord_1036", "cust_014", 2, "completed", [
        ("Brown Sugar Boba", 1, 28),
        ("Classic Milk Tea", 1, 25),
        ("Strawberry Milk Tea", 1, 26),
        ("Taro Milk Tea", 1, 28),
        ("Chicken Shawarma (Regular)", 1, 35),
    ]),
    ("ord_1037", "cust_015", 0, "completed", [("Coconut Milk Tea", 1, 28)]),
]

# ── Counter orders (orders board) ──────────────────────────────
# id, customer name, location, hours ago, status, [(item, qty, unit price)]

COUNTER_ORDER_ROWS = [
    ("32854514", "Carrick Kwenin", "Superannuation Hall", 271 * 24, "Pending", [
        ("Caramel Dream Milk (Medium)", 1, 38), ("Vanilla Bliss (Medium)", 1, 37), ("Chicken Shawarma (Medium)", 1, 45),
    ]),
    ("32854515", "Sarah Johnson", "Library Building", 2 * 24, "Done", [
        ("Matcha Green Tea (Medium)", 2, 35), ("Brown Sugar Pearl Milk Tea (Large)", 1, 42),
    ]),
    ("32854516", "Michael Chen", "Engineering Block", 5 * 24, "Done", [
        ("Classic Milk Tea (Large)", 1, 38), ("Beef Shawarma (Large)", 1, 52),
    ]),
    ("32854517", "Emma Williams", "Student Center", 1 * 24, "Pending", [
        ("Taro Milk Tea (Medium)", 3, 36), ("Mango Passion Fruit Tea (Large)", 2, 40), ("Falafel Shawarma (Medium)", 1, 42),
    ]),
    ("32854518", "David Park", "Sports Complex", 10 * 24, "Cancelled", [
        ("Strawberry Milk Tea (Small)", 1, 32),
    ]),
    ("32854519", "Lisa Anderson", "Medical Building", 3 * 24, "Preparing", [
        ("Honeydew Milk Tea (Large)", 2, 40), ("Passion Fruit Green Tea (Medium)", 1, 37), ("Mixed Shawarma Platter (Large)", 1, 65),
    ]),
    ("32854520", "James Rodriguez", "Arts Building", 7 * 24, "Done", [
        ("Thai Milk Tea (Large)", 1, 39), ("Lamb Shawarma (Medium)", 1, 48),
    ]),
    ("32854521", "Sophie Taylor", "Cafeteria Block", 12, "Pending", [
        ("Peach Oolong Tea (Medium)", 2, 36), ("Lychee Rose Tea (Large)", 1, 41), ("Chicken Shawarma (Small)", 2, 40),
    ]),
    ("32854522", "Daniel Kim", "Residential Hall A", 6 * 24, "Done", [
        ("Winter Melon Tea (Large)", 1, 38), ("Vanilla Bliss (Large)", 1, 40),
    ]),
    ("32854523", "Olivia Martinez", "Administration Building", 4 * 24, "Preparing", [
        ("Chocolate Milk Tea (Medium)", 2, 37), ("Caramel Dream Milk (Small)", 1, 34), ("Beef Shawarma (Medium)", 1, 48),
    ]),
    ("32854524", "Ryan Thompson", "Computer Lab", 8, "Pending", [
        ("Jasmine Green Tea (Large)", 1, 35), ("Chicken Shawarma (Large)", 1, 48),
    ]),
    ("32854525", "Isabella Garcia", "Music Hall", 15 * 24, "Cancelled", [
        ("Rose Milk Tea (Medium)", 1, 36), ("Brown Sugar Pearl Milk Tea (Medium)", 1, 38),
    ]),
    ("32854526", "Nathan Brooks", "Business School", 18, "Preparing", [
        ("Oolong Milk Tea (Medium)", 1, 36), ("Falafel Shawarma (Large)", 2, 45), ("Vanilla Bliss (Small)", 1, 34),
    ]),
    ("32854527", "Amara Osei", "Science Complex", 3, "Pending", [
        ("Mango Green Tea (Large)", 2, 40), ("Lamb Shawarma (Large)", 1, 52),
    ]),
    ("32854528", "Lucas Weber", "Law Building", 9 * 24, "Done", [
        ("Hokkaido Milk Tea (Large)", 1, 42), ("Chicken Shawarma (Medium)", 2, 45),
    ]),
    ("32854529", "Zara Ahmed", "Gymnasium", 6, "Pending", [
        ("Strawberry Jasmine Tea (Medium)", 1, 38), ("Caramel Dream Milk (Large)", 1, 40), ("Mixed Shawarma Platter (Medium)", 1, 58),
    ]),
    ("32854530", "Ethan Morrison", "Theater Building", 14 * 24, "Done", [
        ("Black Sugar Milk Tea (Medium)", 3, 38),
    ]),
    ("32854531", "Priya Patel", "Chemistry Lab", 2, "Pending", [
        ("Taro Coconut Tea (Large)", 1, 42), ("Vanilla Bliss (Medium)", 1, 37), ("Beef Shawarma (Large)", 1, 52),
    ]),
    ("32854532", "Marcus Lee", "Parking Lot C", 11 * 24, "Cancelled", [
        ("Honeydew Smoothie (Large)", 1, 44), ("Chicken Shawarma (Small)", 1, 40),
    ]),
    ("32854533", "Fatima Hassan", "Main Quad", 5, "Preparing", [
        ("Earl Grey Milk Tea (Medium)", 2, 36), ("Lamb Shawarma (Medium)", 2, 48), ("Caramel Dream Milk (Small)", 1, 34),
    ]),
    ("32854534", "Oscar Chen", "Design Studio", 20, "Done", [
        ("Lychee Yakult Tea (Large)", 1, 42), ("Falafel Shawarma (Medium)", 1, 42),
    ]),
]

# ── Menu ───────────────────────────────────────────────────────
# id, name, category, medium price, large price, in stock, active

PRODUCT_ROWS = [
    ("prod_001", "Classic Milk Tea", "Bubble Tea", 38, 45, True, True),
    ("prod_002", "Taro Milk Tea", "Bubble Tea", 40, 48, True, True),
    ("prod_003", "Brown Sugar Pearl", "Bubble Tea", 38, 42, True, True),
    ("prod_004", "Caramel Dream Milk", "Bubble Tea", 38, 40, True, True),
    ("prod_005", "Honeydew Milk Tea", "Bubble Tea", 40, 40, True, True),
    ("prod_006", "Matcha Green Tea", "Bubble Tea", 35, 42, True, True),
    ("prod_007", "Vanilla Bliss", "HQ Special", 37, 40, True, True),
    ("prod_008", "Lychee Yakult Tea", "Ice Tea", 36, 42, True, True),
    ("prod_009", "Passion Fruit Tea", "Ice Tea", 37, 40, True, True),
    ("prod_010", "Chicken Shawarma", "Shawarma", 45, 48, True, True),
    ("prod_011", "Beef Shawarma", "Shawarma", 48, 52, True, True),
    ("prod_012", "Lamb Shawarma", "Shawarma", 48, 52, False, True),
    ("prod_013", "Falafel Shawarma", "Shawarma", 42, 45, True, True),
    ("prod_014", "Hokkaido Milk Tea", "HQ Special", 40, 42, True, True),
    ("prod_015", "Taro Coconut Tea", "Ice Tea", 40, 42, True, False),
]

# ── Inventory ──────────────────────────────────────────────────
# id, name, category, unit, quantity, reorder level, location, hours since update, notes

INVENTORY_ROWS = [
    ("inv_001", "Bubble Tea Cup (Medium)", "Cups", "pcs", 180, 80, "Store room", 48, "Clear cups"),
    ("inv_002", "Bubble Tea Cup (Large)", "Cups", "pcs", 55, 80, "Store room", 6, "Large size cups"),
    ("inv_003", "Shawarma Wraps", "Wraps", "packs", 9, 6, "Back fridge", 0, None),
    ("inv_004", "Straws (Wide)", "Straws", "pcs", 120, 100, "Front counter", 24, None),
]


def build_sample_dataset(now: datetime) -> SampleDataset:
    """Materialize the sample tables as validated records relative to now."""

    def days(n: int) -> datetime:
        return now - timedelta(days=n)

    def hours(n: int) -> datetime:
        return now - timedelta(hours=n)

    def items(rows) -> list[OrderItem]:
        return [OrderItem(name=name, quantity=qty, unit_price=price) for name, qty, price in rows]

    customers = [
        Customer(
            id=cid, name=name, phone=phone,
            last_visit=days(last_visit), joined_at=days(joined),
            favorite_item=favorite, notes=notes,
        )
        for cid, name, phone, last_visit, joined, favorite, notes in CUSTOMER_ROWS
    ]

    customer_orders = [
        Order(id=oid, customer_id=cid, created_at=days(age), status=status, items=items(rows))
        for oid, cid, age, status, rows in CUSTOMER_ORDER_ROWS
    ]

    counter_orders = [
        Order(
            id=oid, customer_name=name, location=location,
            created_at=hours(age), status=status, items=items(rows),
        )
        for oid, name, location, age, status, rows in COUNTER_ORDER_ROWS
    ]

    products = [
        Product(
            id=pid, name=name, category=category,
            price=ProductPrice(medium=medium, large=large),
            in_stock=in_stock, is_active=is_active,
        )
        for pid, name, category, medium, large, in_stock, is_active in PRODUCT_ROWS
    ]

    inventory = [
        InventoryItem(
            id=iid, name=name, category=category, unit=unit,
            quantity=quantity, reorder_level=reorder, location=location,
            updated_at=hours(age), notes=notes,
        )
        for iid, name, category, unit, quantity, reorder, location, age, notes in INVENTORY_ROWS
    ]

    return SampleDataset(
        now=now,
        customers=customers,
        customer_orders=customer_orders,
        counter_orders=counter_orders,
        products=products,
        inventory=inventory,
    )
