"""Request bodies and JSON renderers shared by the routers."""
from __future__ import annotations

from decimal import Decimal

from fastapi import Request
from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(..., ge=0)


class OrderLine(BaseModel):
    id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    customer_id: str = Field(..., min_length=1)
    products: list[OrderLine]


def get_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} is not configured")
    return svc


def _timestamp(value) -> str | None:
    return value.isoformat() if value is not None else None


def customer_to_dict(entity) -> dict:
    return {
        "id": entity.id,
        "name": entity.name,
        "email": entity.email,
        "created_at": _timestamp(getattr(entity, "created_at", None)),
    }


def product_to_dict(entity) -> dict:
    return {
        "id": entity.id,
        "name": entity.name,
        "price": float(entity.price),
        "quantity": int(entity.quantity),
        "created_at": _timestamp(getattr(entity, "created_at", None)),
    }


def order_to_dict(entity) -> dict:
    return {
        "id": entity.id,
        "customer": customer_to_dict(entity.customer),
        "order_products": [
            {
                "product_id": item.product_id,
                "quantity": int(item.quantity),
                "price": float(item.price),
            }
            for item in entity.order_products
        ],
        "created_at": _timestamp(getattr(entity, "created_at", None)),
    }
