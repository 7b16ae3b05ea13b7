"""
Shared fixtures: a temporary SQLite database and in-memory repositories.
"""
from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from types import SimpleNamespace
from uuid import uuid4

import pytest

# Ensure the shop package is importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shop.core import config as core_config  # noqa: E402
from shop.db import create_tables  # noqa: E402
from shop.db import session as db_session  # noqa: E402
from shop.repositories.interfaces import (  # noqa: E402
    CustomersRepository,
    OrdersRepository,
    ProductsRepository,
    StockConflictError,
)


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a fresh SQLite file and drop it afterwards."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _reset_caches()

    engine = db_session.get_engine()
    create_tables.create_all(reset=True)

    yield db_file

    create_tables.drop_all()
    engine.dispose()
    _reset_caches()


class InMemoryCustomers(CustomersRepository):
    def __init__(self) -> None:
        self.items: dict[str, SimpleNamespace] = {}
        self.created: list[SimpleNamespace] = []

    def find_by_id(self, customer_id):
        return self.items.get(customer_id)

    def find_by_email(self, email):
        key = email.strip().lower()
        return next((c for c in self.items.values() if c.email.strip().lower() == key), None)

    def create(self, name, email):
        customer = SimpleNamespace(id=str(uuid4()), name=name, email=email)
        self.items[customer.id] = customer
        self.created.append(customer)
        return customer


class InMemoryProducts(ProductsRepository):
    def __init__(self) -> None:
        self.items: dict[str, SimpleNamespace] = {}
        self.update_calls: list[list[dict]] = []

    def add(self, product_id, price, quantity, name=None):
        product = SimpleNamespace(
            id=product_id, name=name or product_id, price=Decimal(str(price)), quantity=quantity
        )
        self.items[product_id] = product
        return product

    def find_by_id(self, product_id):
        return self.items.get(product_id)

    def find_by_name(self, name):
        return next((p for p in self.items.values() if p.name == name), None)

    def find_all_by_id(self, ids):
        # copies, like rows read from a store
        return [SimpleNamespace(**vars(self.items[i])) for i in dict.fromkeys(ids) if i in self.items]

    def create(self, name, price, quantity):
        return self.add(str(uuid4()), price, quantity, name=name)

    def update_quantity(self, updates):
        self.update_calls.append([dict(u) for u in updates])
        stale = [
            item["id"]
            for item in updates
            if "previous" in item and self.items[item["id"]].quantity != item["previous"]
        ]
        if stale:
            raise StockConflictError("Product quantities changed, try again", stale)
        for item in updates:
            self.items[item["id"]].quantity = item["quantity"]


class InMemoryOrders(OrdersRepository):
    def __init__(self) -> None:
        self.items: dict[str, SimpleNamespace] = {}

    def find_by_id(self, order_id):
        return self.items.get(order_id)

    def create(self, customer, items):
        order = SimpleNamespace(
            id=str(uuid4()),
            customer=customer,
            order_products=[SimpleNamespace(**item) for item in items],
        )
        self.items[order.id] = order
        return order


@pytest.fixture()
def customers_repo():
    return InMemoryCustomers()


@pytest.fixture()
def products_repo():
    return InMemoryProducts()


@pytest.fixture()
def orders_repo():
    return InMemoryOrders()
