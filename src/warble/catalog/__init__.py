"""Product catalog — the canonical functional area built on warble.

Composition::

    proxy = install_routes(SimulatedProxy())   # or HttpProxy(base_url)
    catalog = create_catalog(proxy)
    catalog.search.text_changed("glove")
    await catalog.search.search()
    select_search_view(catalog.store.get_state())
"""

from dataclasses import dataclass

from warble.catalog.backend import PRODUCTS, install_routes
from warble.catalog.models import Product, SearchState
from warble.catalog.search import SearchActions, search_area, search_bindings, select_search_view
from warble.catalog.service import ProductService
from warble.proxy.protocol import ServiceProxy
from warble.store import Store, create_store

__all__ = [
    "PRODUCTS",
    "Catalog",
    "Product",
    "ProductService",
    "SearchActions",
    "SearchState",
    "create_catalog",
    "install_routes",
    "search_area",
    "search_bindings",
    "select_search_view",
]


@dataclass(frozen=True, slots=True)
class Catalog:
    """A wired catalog: one store, its action groups, and the service."""

    store: Store
    service: ProductService
    search: SearchActions


def create_catalog(proxy: ServiceProxy) -> Catalog:
    """Wire a store and action groups around *proxy*."""
    store = create_store(search_area())
    service = ProductService(proxy)
    return Catalog(store=store, service=service, search=SearchActions(store, service))
