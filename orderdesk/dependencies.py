# orderdesk/dependencies.py
"""
Used by FastAPI for dependency injection - Database & Services
Every request gets one database session; the stores and services for that
request are built on top of it. Tests only need to override get_session.
"""

from fastapi import Depends
from sqlmodel import Session

from orderdesk.utils.db import get_session
from orderdesk.stores import CustomerStore, OrderStore, ProductStore
from orderdesk.services.customers import CustomerService
from orderdesk.services.orders import OrderService
from orderdesk.services.products import ProductService


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(ProductStore(session))


def get_customer_service(session: Session = Depends(get_session)) -> CustomerService:
    return CustomerService(CustomerStore(session), OrderStore(session))


def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    # All three stores share the session so the order commits as one unit
    return OrderService(OrderStore(session), CustomerStore(session), ProductStore(session))
