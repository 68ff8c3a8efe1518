# orderdesk/routers/products.py

from typing import List

from fastapi import APIRouter, Depends, Response

from orderdesk.dependencies import get_product_service
from orderdesk.schemas import ProductIn, ProductRead, product_read
from orderdesk.services.products import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductRead, status_code=201)
def create_product(body: ProductIn, service: ProductService = Depends(get_product_service)):
    return product_read(service.create(body.name, body.price_in_cents))


@router.get("", response_model=List[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)):
    return [product_read(product) for product in service.list()]


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return product_read(service.get(product_id))


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    body: ProductIn,
    service: ProductService = Depends(get_product_service),
):
    """
    Replace name and price. Orders that contain this product pick up the
    new price the next time they are read.
    """
    return product_read(service.update(product_id, body.name, body.price_in_cents))


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete(product_id)
    return Response(status_code=204)
