"""
Order placement and lookup.

Placing an order runs a fixed sequence: validate the customer, resolve every
requested product, check stock for every line, decrement stock in one batch
and finally persist the order with the prices captured at this moment. Any
failure aborts before the stock update, so a rejected order never changes
product quantities.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from shop.core.errors import AppError
from shop.repositories.interfaces import (
    CustomersRepository,
    OrderItemData,
    OrdersRepository,
    ProductsRepository,
    QuantityUpdate,
    StockConflictError,
)
from shop.repositories.sql_repository import (
    SQLCustomersRepository,
    SQLOrdersRepository,
    SQLProductsRepository,
)
from shop.services.customer_service import CustomerNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "CustomerNotFoundError",
    "InsufficientStockError",
    "InvalidOrderError",
    "OrderError",
    "OrderNotFoundError",
    "OrderService",
    "ProductsNotFoundError",
]


class OrderError(AppError):
    """Base exception for the order workflow."""


class InvalidOrderError(OrderError):
    """Raised when a requested quantity is not a positive integer."""


class ProductsNotFoundError(OrderError):
    """Raised when requested product ids do not resolve."""

    def __init__(self, message: str, product_ids: list[str] | None = None):
        super().__init__(message)
        self.product_ids = list(product_ids or [])


class InsufficientStockError(OrderError):
    """Raised when at least one line asks for more than is available."""

    def __init__(self, message: str, product_ids: list[str]):
        super().__init__(message)
        self.product_ids = list(product_ids)


class OrderNotFoundError(OrderError):
    status_code = 404


class OrderService:
    """Places and retrieves orders."""

    def __init__(
        self,
        customers: CustomersRepository | None = None,
        products: ProductsRepository | None = None,
        orders: OrdersRepository | None = None,
    ) -> None:
        self.customers = customers or SQLCustomersRepository()
        self.products = products or SQLProductsRepository()
        self.orders = orders or SQLOrdersRepository()

    @staticmethod
    def _merge_lines(products: Iterable[Mapping]) -> dict[str, int]:
        """Sum quantities per product id, keeping first-seen order."""
        lines: dict[str, int] = {}
        for line in products:
            product_id = str(line["id"])
            quantity = line["quantity"]
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidOrderError(f"Invalid quantity for product {product_id}")
            lines[product_id] = lines.get(product_id, 0) + quantity
        return lines

    def place_order(self, customer_id: str, products: Iterable[Mapping]):
        lines = self._merge_lines(products)

        customer = self.customers.find_by_id(customer_id)
        if not customer:
            raise CustomerNotFoundError("Customer not found")

        found = {product.id: product for product in self.products.find_all_by_id(list(lines))}
        if not found:
            raise ProductsNotFoundError("Could not find products", list(lines))
        missing = [product_id for product_id in lines if product_id not in found]
        if missing:
            raise ProductsNotFoundError(
                f"Could not find products: {', '.join(missing)}", missing
            )

        unavailable = [
            product_id
            for product_id, quantity in lines.items()
            if found[product_id].quantity < quantity
        ]
        if unavailable:
            raise InsufficientStockError("Quantity of products is not available", unavailable)

        updates: list[QuantityUpdate] = [
            {
                "id": product_id,
                "quantity": found[product_id].quantity - quantity,
                "previous": found[product_id].quantity,
            }
            for product_id, quantity in lines.items()
        ]
        try:
            self.products.update_quantity(updates)
        except StockConflictError as exc:
            raise InsufficientStockError(
                "Quantity of products is not available", exc.product_ids
            ) from exc

        items: list[OrderItemData] = [
            {"product_id": product_id, "quantity": quantity, "price": found[product_id].price}
            for product_id, quantity in lines.items()
        ]
        order = self.orders.create(customer=customer, items=items)
        logger.info(
            "Order %s placed by customer %s with %d line(s)", order.id, customer.id, len(items)
        )
        return order

    def find_order(self, order_id: str):
        order = self.orders.find_by_id(order_id)
        if not order:
            raise OrderNotFoundError("Order not found")
        return order
