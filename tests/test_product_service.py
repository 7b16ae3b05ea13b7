from __future__ import annotations

from decimal import Decimal

import pytest

from shop.services.product_service import (
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
    ProductService,
)


def test_create_product(products_repo):
    product = ProductService(products_repo).create_product("Mug", "10.00", 5)

    assert product.name == "Mug"
    assert product.price == Decimal("10.00")
    assert product.quantity == 5


def test_create_product_rejects_duplicate_name(products_repo):
    svc = ProductService(products_repo)
    svc.create_product("Mug", 10, 5)

    with pytest.raises(DuplicateProductError):
        svc.create_product("Mug", 12, 1)


@pytest.mark.parametrize("price, quantity", [(-1, 1), (1, -1)])
def test_create_product_rejects_negative_values(products_repo, price, quantity):
    with pytest.raises(InvalidProductError):
        ProductService(products_repo).create_product("Mug", price, quantity)


def test_find_product_unknown_id_is_404(products_repo):
    with pytest.raises(ProductNotFoundError) as err:
        ProductService(products_repo).find_product("nope")
    assert err.value.status_code == 404
