#!/usr/bin/env python3
"""
Add a product to the catalog directly in the database.

Usage:
  python scripts/add_product.py --name "Blue mug" --price 10.00 [--quantity 5]
"""
from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from shop.core.config import get_settings
from shop.core.errors import AppError
from shop.core.logging_config import configure_logging
from shop.services.product_service import ProductService

logger = logging.getLogger("add_product")


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a product to the catalog")
    ap.add_argument("--name", required=True, help="Product name (must be unique)")
    ap.add_argument("--price", required=True, help="Unit price (ex.: 10.00)")
    ap.add_argument("--quantity", type=int, default=0, help="Units in stock (default: 0)")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    try:
        price = Decimal(args.price)
    except InvalidOperation:
        raise SystemExit(f"Invalid price: {args.price}")

    try:
        product = ProductService().create_product(args.name, price, args.quantity)
    except AppError as exc:
        raise SystemExit(exc.message)
    print("OK: product added")
    print(f"  ID: {product.id}")
    print(f"  Name: {product.name}")
    print(f"  Price: {product.price}")
    print(f"  Quantity: {product.quantity}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        logger.exception("Failed to add product")
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
