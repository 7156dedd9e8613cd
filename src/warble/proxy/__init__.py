"""Service proxies — one capability interface, swappable backends.

``create_proxy()`` is the composition root: it picks exactly one
implementation from a ``ProxyConfig``. Everything downstream only sees
the ``ServiceProxy`` protocol.
"""

from warble.config import ProxyConfig
from warble.proxy.http import HttpProxy
from warble.proxy.protocol import ServiceProxy
from warble.proxy.routes import format_address
from warble.proxy.simulated import SimulatedProxy

__all__ = [
    "HttpProxy",
    "ServiceProxy",
    "SimulatedProxy",
    "create_proxy",
    "format_address",
]


def create_proxy(config: ProxyConfig) -> HttpProxy | SimulatedProxy:
    """Build the proxy selected by ``config.backend``.

    The simulated proxy comes back with no routes; register them (for
    example with ``warble.catalog.install_routes``) before use.
    """
    if config.backend == "http":
        return HttpProxy(config.base_url, timeout=config.timeout)
    return SimulatedProxy(latency=config.latency, seed=config.seed)
