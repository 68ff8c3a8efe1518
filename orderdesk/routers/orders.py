# orderdesk/routers/orders.py

from typing import List

from fastapi import APIRouter, Depends, Response

from orderdesk.dependencies import get_order_service
from orderdesk.schemas import OrderCreate, OrderRead, StatusUpdate
from orderdesk.services.orders import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderRead, status_code=201)
def create_order(body: OrderCreate, service: OrderService = Depends(get_order_service)):
    """
    Place an order for an existing customer.
    1. The customer and every product are looked up (404 if one is missing)
    2. Each quantity must be positive (400 otherwise)
    3. The order is stored as PENDING together with its items
    """
    items = [(item.product_id, item.quantity) for item in body.items]
    order = service.create_order(body.customer_id, items)
    return OrderRead.from_order(order)


@router.get("", response_model=List[OrderRead])
def list_orders(service: OrderService = Depends(get_order_service)):
    return [OrderRead.from_order(order) for order in service.list()]


@router.get("/customer/{customer_id}", response_model=List[OrderRead])
def list_customer_orders(customer_id: int, service: OrderService = Depends(get_order_service)):
    return [OrderRead.from_order(order) for order in service.list_by_customer(customer_id)]


@router.get("/{order_id}", response_model=OrderRead)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    return OrderRead.from_order(service.get(order_id))


@router.put("/{order_id}/status", response_model=OrderRead)
def update_order_status(
    order_id: int,
    body: StatusUpdate,
    service: OrderService = Depends(get_order_service),
):
    """
    Set the status by label, case-insensitive ("shipped", "SHIPPED").
    Any status may follow any other.
    """
    return OrderRead.from_order(service.update_status(order_id, body.status))


@router.delete("/{order_id}", status_code=204)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    service.delete(order_id)
    return Response(status_code=204)
