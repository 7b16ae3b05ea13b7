"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import selectinload

from shop.db.models import Customer, Order, OrderProduct, Product
from shop.db.session import get_session
from shop.repositories.interfaces import (
    CustomersRepository,
    OrderItemData,
    OrdersRepository,
    ProductsRepository,
    QuantityUpdate,
    StockConflictError,
)


class SQLCustomersRepository(CustomersRepository):
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        with get_session() as session:
            return session.get(Customer, customer_id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        with get_session() as session:
            email_key = (email or "").strip().lower()
            stmt = select(Customer).where(func.lower(Customer.email) == email_key)
            return session.execute(stmt).scalar_one_or_none()

    def create(self, name: str, email: str) -> Customer:
        entity = Customer(name=name, email=email)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity


class SQLProductsRepository(ProductsRepository):
    def find_by_id(self, product_id: str) -> Optional[Product]:
        with get_session() as session:
            return session.get(Product, product_id)

    def find_by_name(self, name: str) -> Optional[Product]:
        with get_session() as session:
            stmt = select(Product).where(Product.name == name)
            return session.execute(stmt).scalar_one_or_none()

    def find_all_by_id(self, ids: Iterable[str]) -> list[Product]:
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        with get_session() as session:
            stmt = select(Product).where(Product.id.in_(wanted))
            return list(session.execute(stmt).scalars().all())

    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        entity = Product(name=name, price=price, quantity=quantity)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_quantity(self, updates: list[QuantityUpdate]) -> None:
        for item in updates:
            if item["quantity"] < 0:
                raise ValueError(f"Negative quantity for product {item['id']}")
        conflicts: list[str] = []
        with get_session() as session:
            for item in updates:
                stmt = update(Product).where(Product.id == item["id"])
                if "previous" in item:
                    stmt = stmt.where(Product.quantity == item["previous"])
                stmt = stmt.values(quantity=item["quantity"]).execution_options(
                    synchronize_session=False
                )
                if session.execute(stmt).rowcount != 1:
                    conflicts.append(item["id"])
            if conflicts:
                session.rollback()
                raise StockConflictError("Product quantities changed, try again", conflicts)
            session.commit()


class SQLOrdersRepository(OrdersRepository):
    @staticmethod
    def _load(session, order_id: str) -> Optional[Order]:
        stmt = (
            select(Order)
            .where(Order.id == order_id)
            .options(selectinload(Order.customer), selectinload(Order.order_products))
        )
        return session.execute(stmt).scalar_one_or_none()

    def find_by_id(self, order_id: str) -> Optional[Order]:
        with get_session() as session:
            return self._load(session, order_id)

    def create(self, customer: Customer, items: list[OrderItemData]) -> Order:
        entity = Order(
            customer_id=customer.id,
            order_products=[
                OrderProduct(
                    product_id=item["product_id"],
                    position=position,
                    quantity=item["quantity"],
                    price=item["price"],
                )
                for position, item in enumerate(items)
            ],
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            return self._load(session, entity.id)
