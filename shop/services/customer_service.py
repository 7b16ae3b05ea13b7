"""Customer registration and lookup."""

from __future__ import annotations

import logging

from shop.core.errors import AppError
from shop.repositories.interfaces import CustomersRepository
from shop.repositories.sql_repository import SQLCustomersRepository

logger = logging.getLogger(__name__)


class DuplicateCustomerError(AppError):
    """Raised when the e-mail is already registered."""


class CustomerNotFoundError(AppError):
    """Raised when a referenced customer does not exist."""


class CustomerService:
    """Registers customers, keeping e-mails unique."""

    def __init__(self, customers: CustomersRepository | None = None) -> None:
        self.customers = customers or SQLCustomersRepository()

    def register_customer(self, name: str, email: str):
        if self.customers.find_by_email(email):
            raise DuplicateCustomerError("Customer already exists")
        customer = self.customers.create(name=name, email=email)
        logger.info("Registered customer %s", customer.id)
        return customer

    def find_customer(self, customer_id: str):
        customer = self.customers.find_by_id(customer_id)
        if not customer:
            raise CustomerNotFoundError("Customer not found")
        return customer
