# orderdesk/pricing.py
"""
Money math for orders. Everything is integer cents.

Totals are recomputed from the product's *current* price on every read,
so changing a product price changes the total of orders placed earlier.
"""

from typing import Iterable

from orderdesk.models import OrderItem


def line_subtotal(quantity: int, unit_price_in_cents: int) -> int:
    return quantity * unit_price_in_cents


def item_subtotal(item: OrderItem) -> int:
    return line_subtotal(item.quantity, item.product.price_in_cents)


def order_total(items: Iterable[OrderItem]) -> int:
    return sum(item_subtotal(item) for item in items)
