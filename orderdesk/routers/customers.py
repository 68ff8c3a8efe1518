# orderdesk/routers/customers.py

from typing import List

from fastapi import APIRouter, Depends, Response

from orderdesk.dependencies import get_customer_service
from orderdesk.schemas import CustomerIn, CustomerRead, customer_read
from orderdesk.services.customers import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", response_model=CustomerRead, status_code=201)
def create_customer(body: CustomerIn, service: CustomerService = Depends(get_customer_service)):
    """
    Register a customer. Fails with 400 if the email is already in use.
    """
    customer = service.create(body.name, body.email, phone=body.phone, address=body.address)
    return customer_read(customer)


@router.get("", response_model=List[CustomerRead])
def list_customers(service: CustomerService = Depends(get_customer_service)):
    return [customer_read(customer) for customer in service.list()]


# Declared before /{customer_id} so "email" is never parsed as an id
@router.get("/email/{email}", response_model=CustomerRead)
def get_customer_by_email(email: str, service: CustomerService = Depends(get_customer_service)):
    return customer_read(service.get_by_email(email))


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    return customer_read(service.get(customer_id))


@router.put("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: int,
    body: CustomerIn,
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.update(
        customer_id, body.name, body.email, phone=body.phone, address=body.address
    )
    return customer_read(customer)


@router.delete("/{customer_id}", status_code=204)
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """
    Delete a customer together with all of their orders and line items.
    """
    service.delete(customer_id)
    return Response(status_code=204)
