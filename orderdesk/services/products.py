# orderdesk/services/products.py

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from orderdesk.errors import ConflictError, NotFoundError, ValidationError
from orderdesk.models import MAX_DB_INT, Product
from orderdesk.stores import ProductStore

logger = logging.getLogger(__name__)


def _check_product_fields(name: str, price_in_cents: int) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name must not be empty")
    if isinstance(price_in_cents, bool) or not isinstance(price_in_cents, int):
        raise ValidationError("priceInCents must be an integer")
    if not 0 < price_in_cents <= MAX_DB_INT:
        raise ValidationError(f"priceInCents must be an integer between 1 and {MAX_DB_INT}")


class ProductService:
    def __init__(self, products: ProductStore):
        self.products = products

    def create(self, name: str, price_in_cents: int) -> Product:
        _check_product_fields(name, price_in_cents)
        product = self.products.create(Product(name=name, price_in_cents=price_in_cents))
        logger.info("Created product %s (%s, %s cents)", product.id, product.name, product.price_in_cents)
        return product

    def list(self) -> List[Product]:
        return self.products.find_all()

    def get(self, product_id: int) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def update(self, product_id: int, name: str, price_in_cents: int) -> Product:
        product = self.get(product_id)
        _check_product_fields(name, price_in_cents)
        product.name = name
        product.price_in_cents = price_in_cents
        return self.products.update(product)

    def delete(self, product_id: int) -> None:
        try:
            deleted = self.products.delete(product_id)
        except IntegrityError:
            self.products.rollback()
            raise ConflictError(f"Product {product_id} is still referenced by order items") from None
        if not deleted:
            raise NotFoundError("Product", product_id)
        logger.info("Deleted product %s", product_id)
