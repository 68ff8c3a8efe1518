"""Pytest fixtures for orderdesk tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from orderdesk.utils.db import build_engine, get_session, init_db
from orderdesk.stores import CustomerStore, OrderItemStore, OrderStore, ProductStore
from orderdesk.services.customers import CustomerService
from orderdesk.services.orders import OrderService
from orderdesk.services.products import ProductService


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database, shared by every session of one test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def stores(session):
    return {
        "products": ProductStore(session),
        "customers": CustomerStore(session),
        "orders": OrderStore(session),
        "items": OrderItemStore(session),
    }


@pytest.fixture
def product_service(stores):
    return ProductService(stores["products"])


@pytest.fixture
def customer_service(stores):
    return CustomerService(stores["customers"], stores["orders"])


@pytest.fixture
def order_service(stores):
    return OrderService(stores["orders"], stores["customers"], stores["products"])


@pytest.fixture
def api_client(engine):
    """Test client whose requests each get their own session on the test database."""
    from orderdesk.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
