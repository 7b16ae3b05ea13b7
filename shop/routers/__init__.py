"""
FastAPI routers grouped by resource (customers, products, orders).

Each module exposes an APIRouter included by the main application (app.py).
Routers read their service from ``request.app.state`` so tests can swap it.
"""
