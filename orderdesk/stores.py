# orderdesk/stores.py
"""
Persistence for each entity, one store per table.

Stores only talk to the session: they return None / False for missing rows
and let IntegrityError from the database propagate. The services decide which
domain error that becomes.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel, Session, select

from orderdesk.models import MAX_DB_INT, Customer, Order, OrderItem, Product

ModelT = TypeVar("ModelT", bound=SQLModel)


def _storable_id(value: int) -> bool:
    # Ids outside the INTEGER range can never match a row and would fail to bind
    return 0 < value <= MAX_DB_INT


class Store(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def create(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        if not _storable_id(entity_id):
            return None
        return self.session.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        # Surrogate ids are allocated in insertion order
        statement = select(self.model).order_by(self.model.id)
        return list(self.session.exec(statement).all())

    def update(self, entity: ModelT) -> ModelT:
        return self.create(entity)

    def delete(self, entity_id: int) -> bool:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def discard(self, entity: ModelT) -> None:
        # Staged only, goes out with the next commit
        self.session.delete(entity)

    def rollback(self) -> None:
        self.session.rollback()


class ProductStore(Store[Product]):
    model = Product


class CustomerStore(Store[Customer]):
    model = Customer

    def find_by_email(self, email: str) -> Optional[Customer]:
        statement = select(Customer).where(Customer.email == email)
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None


class OrderStore(Store[Order]):
    model = Order

    def find_by_customer_id(self, customer_id: int) -> List[Order]:
        if not _storable_id(customer_id):
            return []
        statement = select(Order).where(Order.customer_id == customer_id).order_by(Order.id)
        return list(self.session.exec(statement).all())


class OrderItemStore(Store[OrderItem]):
    model = OrderItem

    def find_by_order_id(self, order_id: int) -> List[OrderItem]:
        if not _storable_id(order_id):
            return []
        statement = select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.id)
        return list(self.session.exec(statement).all())
