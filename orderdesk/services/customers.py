# orderdesk/services/customers.py

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from orderdesk.errors import ConflictError, NotFoundError, ValidationError
from orderdesk.models import Customer
from orderdesk.stores import CustomerStore, OrderStore

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "A customer with this email already exists"


def _check_customer_fields(name: str, email: str) -> None:
    if not name or not name.strip() or not email or not email.strip():
        raise ValidationError("Customer name and email are required")


class CustomerService:
    """
    Customer CRUD plus the two rules that are not plain persistence:
    - email is unique (pre-checked here, enforced by the UNIQUE constraint)
    - deleting a customer deletes their orders and line items
    """

    def __init__(self, customers: CustomerStore, orders: OrderStore):
        self.customers = customers
        self.orders = orders

    def _save(self, customer: Customer) -> Customer:
        # Two concurrent writers can both pass exists_by_email; the constraint catches the loser
        try:
            return self.customers.update(customer)
        except IntegrityError as exc:
            self.customers.rollback()
            if "email" in str(exc.orig).lower():
                raise ConflictError(EMAIL_IN_USE) from None
            raise ConflictError(f"Customer violates a database constraint: {exc.orig}") from None

    def create(
        self,
        name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Customer:
        _check_customer_fields(name, email)
        if self.customers.exists_by_email(email):
            raise ConflictError(EMAIL_IN_USE)

        customer = self._save(Customer(name=name, email=email, phone=phone, address=address))
        logger.info("Created customer %s <%s>", customer.id, customer.email)
        return customer

    def list(self) -> List[Customer]:
        return self.customers.find_all()

    def get(self, customer_id: int) -> Customer:
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer

    def get_by_email(self, email: str) -> Customer:
        customer = self.customers.find_by_email(email)
        if customer is None:
            raise NotFoundError("Customer", email, field="email")
        return customer

    def update(
        self,
        customer_id: int,
        name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Customer:
        customer = self.get(customer_id)
        _check_customer_fields(name, email)
        if email != customer.email and self.customers.exists_by_email(email):
            raise ConflictError(EMAIL_IN_USE)

        customer.name = name
        customer.email = email
        customer.phone = phone
        customer.address = address
        return self._save(customer)

    def delete(self, customer_id: int) -> None:
        customer = self.get(customer_id)
        orders = self.orders.find_by_customer_id(customer_id)
        for order in orders:
            # ORM cascade on Order.items removes the line items too
            self.orders.discard(order)
        self.customers.delete(customer.id)
        logger.info("Deleted customer %s and %d order(s)", customer_id, len(orders))
