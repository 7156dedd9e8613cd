"""ProductService — the catalog's data-access collaborator.

Knows addresses and payload shapes, nothing about state. Takes any
``ServiceProxy``, so it runs unchanged against the simulated or the HTTP
backend.
"""

from typing import Any

from warble.catalog.models import Product
from warble.errors import ServiceError
from warble.proxy.protocol import ServiceProxy
from warble.proxy.routes import format_address

SEARCH = "/products/search/{searchText}"
PRODUCTS = "/products"


class ProductService:
    __slots__ = ("proxy",)

    def __init__(self, proxy: ServiceProxy) -> None:
        self.proxy = proxy

    async def search(self, text: str) -> list[Product]:
        """Products whose name contains *text*. Empty text lists everything."""
        if text.strip():
            address = format_address(SEARCH, searchText=text.strip())
        else:
            address = PRODUCTS
        return _products(await self.proxy.read(address))

    async def add(self, name: str, price: float, category: str = "") -> Product:
        """Create a product and return it as stored by the backend."""
        body = {"name": name, "price": price, "category": category}
        return _product(await self.proxy.write(PRODUCTS, body))


def _products(payload: Any) -> list[Product]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = f"Malformed product payload: expected a list, got {type(payload).__name__}"
        raise ServiceError(msg)
    return [_product(item) for item in payload]


def _product(item: Any) -> Product:
    try:
        return Product.from_dict(item)
    except (KeyError, TypeError, ValueError) as exc:
        msg = f"Malformed product payload: {item!r}"
        raise ServiceError(msg) from exc
