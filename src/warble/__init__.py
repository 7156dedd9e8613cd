"""Warble — a small state-dispatch runtime.

Declarative operations describe state changes, imperative operations
orchestrate them around service calls, and a swappable proxy keeps all
I/O behind one interface.

Basic usage::

    from dataclasses import replace
    from warble import ActionGroup, Area, Bindings, create_store, declarative

    class Counter(ActionGroup):
        @declarative
        def added(self, amount: int) -> int:
            return amount

    area = Area("counter", 0, Bindings().bind(Counter.added, lambda n, amount: n + amount))
    store = create_store(area)
    Counter(store, "counter").added(2)
    store.get_state()["counter"]  # 2
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "ActionGroup",
    "Area",
    "Bindings",
    "ConfigurationError",
    "Event",
    "HttpProxy",
    "NoMatchingRoute",
    "Operation",
    "ProxyConfig",
    "ServiceError",
    "ServiceProxy",
    "SimulatedProxy",
    "State",
    "Store",
    "WarbleError",
    "combine",
    "create_proxy",
    "create_store",
    "declarative",
    "format_address",
    "imperative",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ActionGroup": "warble.actions",
    "declarative": "warble.actions",
    "imperative": "warble.actions",
    "Area": "warble.bindings",
    "Bindings": "warble.bindings",
    "combine": "warble.bindings",
    "Event": "warble.events",
    "Operation": "warble.events",
    "ConfigurationError": "warble.errors",
    "NoMatchingRoute": "warble.errors",
    "ServiceError": "warble.errors",
    "WarbleError": "warble.errors",
    "ProxyConfig": "warble.config",
    "HttpProxy": "warble.proxy",
    "ServiceProxy": "warble.proxy",
    "SimulatedProxy": "warble.proxy",
    "create_proxy": "warble.proxy",
    "format_address": "warble.proxy",
    "State": "warble.state",
    "Store": "warble.store",
    "create_store": "warble.store",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warble`` fast (httpx is only loaded with the proxies)
    while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
