"""
Persistence adapters.

Services depend on the interfaces in ``interfaces``; the SQLAlchemy
implementations live in ``sql_repository`` and are the default wiring.
"""

from .interfaces import CustomersRepository, OrdersRepository, ProductsRepository
from .sql_repository import SQLCustomersRepository, SQLOrdersRepository, SQLProductsRepository

__all__ = [
    "CustomersRepository",
    "OrdersRepository",
    "ProductsRepository",
    "SQLCustomersRepository",
    "SQLOrdersRepository",
    "SQLProductsRepository",
]
