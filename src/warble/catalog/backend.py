"""Simulated catalog backend — sample data and route handlers.

``install_routes()`` registers the catalog's addresses on a
``SimulatedProxy``. Each call gets its own copy of the dataset, so writes
in one proxy never leak into another.
"""

from collections.abc import Iterable
from typing import Any

from warble.proxy.simulated import SimulatedProxy

# ---------------------------------------------------------------------------
# Sample data — a small sporting-goods catalog
# ---------------------------------------------------------------------------

PRODUCTS: tuple[dict[str, Any], ...] = (
    {"id": 1, "name": "Baseball glove", "price": 49.99, "category": "baseball"},
    {"id": 2, "name": "Baseball bat", "price": 89.0, "category": "baseball"},
    {"id": 3, "name": "Soccer ball", "price": 24.5, "category": "soccer"},
    {"id": 4, "name": "Goalkeeper gloves", "price": 35.0, "category": "soccer"},
    {"id": 5, "name": "Tennis racket", "price": 120.0, "category": "tennis"},
    {"id": 6, "name": "Running shoes", "price": 95.0, "category": "running"},
)


def install_routes(
    proxy: SimulatedProxy,
    products: Iterable[dict[str, Any]] = PRODUCTS,
) -> SimulatedProxy:
    """Register the catalog routes on *proxy* and return it."""
    catalog = [dict(p) for p in products]

    @proxy.on_read("/products")
    def list_products(params: dict[str, str]) -> list[dict[str, Any]]:
        return [dict(p) for p in catalog]

    @proxy.on_read("/products/search/{searchText}")
    def search_products(params: dict[str, str]) -> list[dict[str, Any]]:
        needle = params["searchText"].lower()
        return [dict(p) for p in catalog if needle in p["name"].lower()]

    @proxy.on_write("/products")
    def add_product(params: dict[str, str], body: dict[str, Any]) -> dict[str, Any]:
        if not body.get("name"):
            msg = "Product name is required"
            raise ValueError(msg)
        next_id = max((p["id"] for p in catalog), default=0) + 1
        product = {"id": next_id, **body}
        catalog.append(product)
        return dict(product)

    return proxy
