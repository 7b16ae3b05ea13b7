"""
Repository contracts consumed by the use cases.

Implementations return objects exposing the attributes of the ORM models in
``shop.db.models`` (``id``, ``name``, ``email`` for customers; ``id``,
``price``, ``quantity`` for products; ``id``, ``customer``,
``order_products`` for orders).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, NotRequired, Optional, TypedDict

from shop.core.errors import AppError


class QuantityUpdate(TypedDict):
    id: str
    quantity: int
    # quantity read before the check; the row is only written if it still holds it
    previous: NotRequired[int]


class StockConflictError(AppError):
    """Raised by a store when a product quantity changed since it was read."""

    status_code = 409

    def __init__(self, message: str, product_ids: list[str]):
        super().__init__(message)
        self.product_ids = list(product_ids)


class OrderItemData(TypedDict):
    product_id: str
    quantity: int
    price: Decimal


class CustomersRepository(ABC):
    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Any]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Any]:
        ...

    @abstractmethod
    def create(self, name: str, email: str) -> Any:
        ...


class ProductsRepository(ABC):
    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Any]:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Any]:
        ...

    @abstractmethod
    def find_all_by_id(self, ids: Iterable[str]) -> list[Any]:
        """Return the products whose id is in ``ids``; unknown ids are skipped."""

    @abstractmethod
    def create(self, name: str, price: Decimal, quantity: int) -> Any:
        ...

    @abstractmethod
    def update_quantity(self, updates: list[QuantityUpdate]) -> None:
        """Set the stored quantity of every listed product, all or nothing.

        Implementations must refuse a negative quantity. When an update
        carries ``previous`` the row is written only if its quantity still
        equals it; otherwise nothing is written and ``StockConflictError``
        is raised, so two orders cannot both take the last units.
        """


class OrdersRepository(ABC):
    @abstractmethod
    def find_by_id(self, order_id: str) -> Optional[Any]:
        ...

    @abstractmethod
    def create(self, customer: Any, items: list[OrderItemData]) -> Any:
        ...
