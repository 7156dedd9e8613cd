"""In-memory simulated backend.

Answers ``read``/``write`` calls from registered route handlers instead of
the network. Routes are kept per kind, in registration order; the first
structural match wins.

Usage::

    proxy = SimulatedProxy()

    @proxy.on_read("/products/search/{searchText}")
    def search(params):
        return [p for p in PRODUCTS if params["searchText"].lower() in p["name"].lower()]

    await proxy.read("/products/search/glove")
"""

import asyncio
import inspect
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

from warble.errors import NoMatchingRoute, ServiceError, WarbleError
from warble.proxy.routes import RouteEntry, split_address

logger = logging.getLogger("warble.proxy")

# handler(params) for reads, handler(params, body) for writes; sync or async
type ReadHandler = Callable[[dict[str, str]], Any]
type WriteHandler = Callable[[dict[str, str], Any], Any]


class SimulatedProxy:
    """Route-matching in-memory backend.

    ``latency`` is an optional ``(min, max)`` range in seconds of random
    delay before each call resolves, for exploratory use. Leave it ``None``
    for deterministic runs.
    """

    __slots__ = ("_latency", "_random", "_reads", "_writes")

    def __init__(
        self,
        *,
        latency: tuple[float, float] | None = None,
        seed: int | None = None,
    ) -> None:
        self._reads: list[RouteEntry] = []
        self._writes: list[RouteEntry] = []
        self._latency = latency
        self._random = random.Random(seed)

    # -- registration ------------------------------------------------------

    def add_read(self, pattern: str, handler: ReadHandler) -> None:
        self._reads.append(RouteEntry.create(pattern, handler))

    def add_write(self, pattern: str, handler: WriteHandler) -> None:
        self._writes.append(RouteEntry.create(pattern, handler))

    def on_read(self, pattern: str) -> Callable[[ReadHandler], ReadHandler]:
        """Decorator form of ``add_read``."""

        def decorator(handler: ReadHandler) -> ReadHandler:
            self.add_read(pattern, handler)
            return handler

        return decorator

    def on_write(self, pattern: str) -> Callable[[WriteHandler], WriteHandler]:
        """Decorator form of ``add_write``."""

        def decorator(handler: WriteHandler) -> WriteHandler:
            self.add_write(pattern, handler)
            return handler

        return decorator

    @property
    def routes(self) -> list[tuple[str, str]]:
        """All registered ``(kind, pattern)`` pairs in registration order."""
        return [("read", r.pattern) for r in self._reads] + [
            ("write", r.pattern) for r in self._writes
        ]

    # -- calls -------------------------------------------------------------

    def read(self, address: str) -> Awaitable[Any]:
        """Resolve *address* against the read routes.

        Raises ``NoMatchingRoute`` immediately if nothing matches.
        """
        entry, params = self._match(self._reads, "read", address)
        return self._resolve(entry, address, params)

    def write(self, address: str, body: Any) -> Awaitable[Any]:
        """Resolve *address* against the write routes with *body*.

        Raises ``NoMatchingRoute`` immediately if nothing matches.
        """
        entry, params = self._match(self._writes, "write", address)
        return self._resolve(entry, address, params, body)

    def _match(
        self,
        entries: list[RouteEntry],
        kind: str,
        address: str,
    ) -> tuple[RouteEntry, dict[str, str]]:
        parts = split_address(address)
        for entry in entries:
            params = entry.match(parts)
            if params is not None:
                return entry, params
        raise NoMatchingRoute(kind, address)

    async def _resolve(
        self,
        entry: RouteEntry,
        address: str,
        params: dict[str, str],
        *body: Any,
    ) -> Any:
        if self._latency is not None:
            delay = self._random.uniform(*self._latency)
            logger.debug("Delaying %s by %.3fs", address, delay)
            await asyncio.sleep(delay)

        try:
            result = entry.handler(params, *body)
            if inspect.isawaitable(result):
                result = await result
        except WarbleError:
            raise
        except Exception as exc:
            logger.debug("Handler for %s raised %r", entry.pattern, exc)
            raise ServiceError(str(exc) or type(exc).__name__) from exc
        return result
