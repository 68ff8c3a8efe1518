# orderdesk/models.py

"""
The Contract: Define what our data looks like
"""

from datetime import datetime, timezone
from typing import Optional, List
from enum import Enum
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Relationship

from orderdesk.errors import ValidationError

# Largest value an INTEGER column holds on every backend we target
MAX_DB_INT = 2**31 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- 1. Enums ---
class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def from_label(cls, label: str) -> "OrderStatus":
        """
        Parse a caller supplied label, ignoring case ("confirmed" -> CONFIRMED)
        """
        try:
            return cls[label.upper()]
        except (KeyError, AttributeError):
            valid = ", ".join(status.value for status in cls)
            raise ValidationError(f"Invalid status '{label}'. Valid values: {valid}") from None


# --- 2. Database Tables ---

class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    price_in_cents: int  # minor currency units, never floats


class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=100, unique=True, index=True)  # the UNIQUE constraint is the real guard
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=200)


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Foreign Keys link tables together
    customer_id: int = Field(foreign_key="customers.id", ondelete="CASCADE", index=True)
    order_date: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    status: OrderStatus = Field(default=OrderStatus.PENDING)

    # One-way navigations only: customers never hold their orders
    customer: Optional[Customer] = Relationship()
    items: List["OrderItem"] = Relationship(
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "OrderItem.id"}
    )


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", ondelete="CASCADE", index=True)
    product_id: int = Field(foreign_key="products.id", ondelete="RESTRICT", index=True)
    quantity: int

    product: Optional[Product] = Relationship()
