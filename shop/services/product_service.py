"""Product catalog use cases."""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.core.errors import AppError
from shop.repositories.interfaces import ProductsRepository
from shop.repositories.sql_repository import SQLProductsRepository

logger = logging.getLogger(__name__)


class ProductError(AppError):
    """Base exception for the catalog workflow."""


class DuplicateProductError(ProductError):
    """Raised when a product with the same name exists."""


class InvalidProductError(ProductError):
    """Raised when price or quantity is negative."""


class ProductNotFoundError(ProductError):
    """Raised when looking up an unknown product id."""

    status_code = 404


class ProductService:
    def __init__(self, products: ProductsRepository | None = None) -> None:
        self.products = products or SQLProductsRepository()

    def create_product(self, name: str, price: Decimal | float | str, quantity: int):
        name_value = (name or "").strip()
        if not name_value:
            raise InvalidProductError("Product name is required")
        price_value = Decimal(str(price))
        if price_value < 0:
            raise InvalidProductError("Price must not be negative")
        if quantity < 0:
            raise InvalidProductError("Quantity must not be negative")
        if self.products.find_by_name(name_value):
            raise DuplicateProductError("Product already exists")
        product = self.products.create(name=name_value, price=price_value, quantity=quantity)
        logger.info("Created product %s (%s) with %d units", product.id, name_value, quantity)
        return product

    def find_product(self, product_id: str):
        product = self.products.find_by_id(product_id)
        if not product:
            raise ProductNotFoundError("Product not found")
        return product
