"""FastAPI application: routers, error rendering and service wiring."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shop.core.config import get_settings
from shop.core.errors import AppError
from shop.core.logging_config import configure_logging
from shop.db.create_tables import create_all
from shop.routers import customers as customers_router
from shop.routers import orders as orders_router
from shop.routers import products as products_router
from shop.services.customer_service import CustomerService
from shop.services.order_service import OrderService
from shop.services.product_service import ProductService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if get_settings().app_env != "prod":
        # migrations are run out of band in production
        create_all()
    yield


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"status": "error", "message": exc.message}, status_code=exc.status_code)


def create_app(
    *,
    customer_service: CustomerService | None = None,
    product_service: ProductService | None = None,
    order_service: OrderService | None = None,
) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn shop.app:create_app --factory``)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Shop API", lifespan=_lifespan)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:3000", "http://127.0.0.1:3000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_exception_handler(AppError, _app_error_handler)

    app.state.customer_service = customer_service or CustomerService()
    app.state.product_service = product_service or ProductService()
    app.state.order_service = order_service or OrderService()

    app.include_router(customers_router.router)
    app.include_router(products_router.router)
    app.include_router(orders_router.router)
    return app


app = create_app()
