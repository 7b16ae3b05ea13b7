from __future__ import annotations

from fastapi import APIRouter, Request

from shop.routers.payloads import ProductCreate, get_service, product_to_dict
from shop.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def _service(request: Request) -> ProductService:
    return get_service(request, "product_service")


@router.post("", status_code=201)
def create_product(body: ProductCreate, request: Request):
    product = _service(request).create_product(body.name, body.price, body.quantity)
    return product_to_dict(product)


@router.get("/{product_id}")
def show_product(product_id: str, request: Request):
    return product_to_dict(_service(request).find_product(product_id))
