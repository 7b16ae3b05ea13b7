from __future__ import annotations

from fastapi import APIRouter, Request

from shop.routers.payloads import OrderCreate, get_service, order_to_dict
from shop.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def _service(request: Request) -> OrderService:
    return get_service(request, "order_service")


@router.post("", status_code=201)
def create_order(body: OrderCreate, request: Request):
    lines = [line.model_dump() for line in body.products]
    order = _service(request).place_order(body.customer_id, lines)
    return order_to_dict(order)


@router.get("/{order_id}")
def show_order(order_id: str, request: Request):
    return order_to_dict(_service(request).find_order(order_id))
