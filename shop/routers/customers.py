from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from shop.routers.payloads import CustomerCreate, customer_to_dict, get_service
from shop.services.customer_service import CustomerNotFoundError, CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


def _service(request: Request) -> CustomerService:
    return get_service(request, "customer_service")


@router.post("", status_code=201)
def create_customer(body: CustomerCreate, request: Request):
    customer = _service(request).register_customer(body.name, body.email)
    return customer_to_dict(customer)


@router.get("/{customer_id}")
def show_customer(customer_id: str, request: Request):
    try:
        customer = _service(request).find_customer(customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(404, exc.message)
    return customer_to_dict(customer)
