"""ServiceProxy protocol.

A proxy is any object with this shape::

    def read(self, address: str) -> Awaitable[Any]: ...
    def write(self, address: str, body: Any) -> Awaitable[Any]: ...

No base class required. Data-access collaborators receive a proxy at
construction, so swapping the simulated backend for the HTTP one never
touches action groups or reducers.
"""

from collections.abc import Awaitable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ServiceProxy(Protocol):
    """Protocol for read/write calls by address.

    Failures surface as ``ServiceError`` when awaited. A simulated backend
    raises ``NoMatchingRoute`` from the call itself, before anything is
    awaited.
    """

    def read(self, address: str) -> Awaitable[Any]: ...

    def write(self, address: str, body: Any) -> Awaitable[Any]: ...
