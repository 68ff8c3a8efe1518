# orderdesk/services/orders.py
"""
Order aggregate: building an order from a customer and (product, quantity)
requests, and moving it between statuses.

The builder resolves every reference before anything is written, then the
order and its items go to the database in a single commit. A bad product id or
quantity in the middle of the list therefore leaves nothing behind.

Status changes are not gated by the current status: any of the five states
can be set from any other.
"""

import logging
from typing import Iterable, List, Tuple

from orderdesk.errors import NotFoundError, ValidationError
from orderdesk.models import MAX_DB_INT, Order, OrderItem, OrderStatus, utcnow
from orderdesk.stores import CustomerStore, OrderStore, ProductStore

logger = logging.getLogger(__name__)

# (product id, quantity)
ItemRequest = Tuple[int, int]


def _check_quantity(product_id: int, quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 0 < quantity <= MAX_DB_INT:
        raise ValidationError(
            f"Quantity for product {product_id} must be an integer between 1 and {MAX_DB_INT}, got {quantity!r}"
        )


class OrderService:
    def __init__(self, orders: OrderStore, customers: CustomerStore, products: ProductStore):
        self.orders = orders
        self.customers = customers
        self.products = products

    def create_order(self, customer_id: int, items: Iterable[ItemRequest]) -> Order:
        # Malformed requests are rejected before any lookup
        requests = list(items)
        for product_id, quantity in requests:
            _check_quantity(product_id, quantity)

        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)

        order = Order(customer_id=customer.id, status=OrderStatus.PENDING, order_date=utcnow())
        order.customer = customer

        for product_id, quantity in requests:
            product = self.products.find_by_id(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            order.items.append(OrderItem(product=product, quantity=quantity))

        order = self.orders.create(order)
        logger.info(
            "Created order %s for customer %s with %d item(s)", order.id, customer.id, len(order.items)
        )
        return order

    def list(self) -> List[Order]:
        return self.orders.find_all()

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return self.orders.find_by_customer_id(customer_id)

    def get(self, order_id: int) -> Order:
        order = self.orders.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def update_status(self, order_id: int, label: str) -> Order:
        order = self.get(order_id)
        status = OrderStatus.from_label(label)
        previous = order.status
        order.status = status
        order = self.orders.update(order)
        logger.info("Order %s status %s -> %s", order_id, previous.value, status.value)
        return order

    def delete(self, order_id: int) -> None:
        if not self.orders.delete(order_id):
            raise NotFoundError("Order", order_id)
        logger.info("Deleted order %s", order_id)
