# orderdesk/schemas.py
"""
Request and response bodies. JSON uses camelCase (priceInCents, customerId),
Python code uses snake_case; both spellings are accepted on input.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from orderdesk.models import MAX_DB_INT, Customer, Order, OrderItem, OrderStatus, Product
from orderdesk.pricing import item_subtotal, order_total

Text100 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# --- Products ---

class ProductIn(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    price_in_cents: int = Field(gt=0, le=MAX_DB_INT)


class ProductRead(CamelModel):
    id: int
    name: str
    price_in_cents: int


# --- Customers ---

class CustomerIn(CamelModel):
    name: Text100
    email: Text100
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=200)


class CustomerRead(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerSummary(CamelModel):
    id: int
    name: str
    email: str


# --- Orders ---

class OrderItemIn(CamelModel):
    product_id: int
    # Positivity is checked by the order builder so it reports the product id
    quantity: int


class OrderCreate(CamelModel):
    customer_id: int
    items: List[OrderItemIn] = Field(default_factory=list)


class StatusUpdate(CamelModel):
    status: str


class OrderItemRead(CamelModel):
    id: int
    product_id: int
    product: ProductRead
    quantity: int
    subtotal: int

    @classmethod
    def from_item(cls, item: OrderItem) -> "OrderItemRead":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product=ProductRead.model_validate(item.product),
            quantity=item.quantity,
            subtotal=item_subtotal(item),
        )


class OrderRead(CamelModel):
    id: int
    customer_id: int
    customer: CustomerSummary
    items: List[OrderItemRead]
    order_date: datetime
    status: OrderStatus
    total_amount: int

    @classmethod
    def from_order(cls, order: Order) -> "OrderRead":
        # Totals are computed here, on every read, from live product prices
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            customer=CustomerSummary.model_validate(order.customer),
            items=[OrderItemRead.from_item(item) for item in order.items],
            order_date=order.order_date,
            status=order.status,
            total_amount=order_total(order.items),
        )


def product_read(product: Product) -> ProductRead:
    return ProductRead.model_validate(product)


def customer_read(customer: Customer) -> CustomerRead:
    return CustomerRead.model_validate(customer)
