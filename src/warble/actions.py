"""Action runtime — declarative and imperative operations.

An ``ActionGroup`` bundles the operations of one functional area and holds
an explicit reference to the store. Two kinds of operation live on it:

- ``@declarative``: synchronous, computes a payload, and immediately
  dispatches ``Event(operation, payload)``. The only way state changes.
- ``@imperative``: ``async def``, orchestrates declarative operations and
  awaits service calls. Suspends only at those awaits.

Example::

    class SearchActions(ActionGroup):
        @declarative
        def search_pending(self) -> None:
            return None

        @imperative
        async def search(self) -> None:
            self.search_pending()
            results = await self.service.search(self.state.search_text)
            ...

Overlapping invocations of the same imperative operation are allowed; the
runtime imposes no mutual exclusion and no timeout.
"""

import functools
import inspect
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from warble.errors import ConfigurationError
from warble.events import Event, Operation
from warble.state import State
from warble.store import Store

logger = logging.getLogger("warble.actions")

_KIND_ATTR = "__warble_kind__"


def declarative(fn: Callable[..., Any]) -> Operation:
    """Mark a method as a declarative operation.

    The returned ``Operation`` is the identity to bind in ``Bindings``.
    """
    if inspect.iscoroutinefunction(fn):
        msg = f"@declarative {fn.__qualname__} must be synchronous; use @imperative for async work"
        raise ConfigurationError(msg)
    return Operation(fn)


def imperative[**P](
    fn: Callable[P, Coroutine[Any, Any, Any]],
) -> Callable[P, Coroutine[Any, Any, Any]]:
    """Mark an ``async def`` method as an imperative operation."""
    if not inspect.iscoroutinefunction(fn):
        msg = f"@imperative {fn.__qualname__} must be an async def"
        raise ConfigurationError(msg)

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        logger.debug("Started %s", fn.__qualname__)
        result = await fn(*args, **kwargs)
        logger.debug("Finished %s", fn.__qualname__)
        return result

    setattr(wrapper, _KIND_ATTR, "imperative")
    return wrapper


class ActionGroup:
    """Operations for one functional area.

    ``state`` always reads through the store, so code after an ``await``
    sees the state as of resumption rather than a stale snapshot.
    """

    __slots__ = ("_area", "_store")

    def __init__(self, store: Store, area: str) -> None:
        if area not in store.get_state():
            msg = f"Store has no area {area!r}"
            raise ConfigurationError(msg)
        self._store = store
        self._area = area

    @property
    def store(self) -> Store:
        return self._store

    @property
    def state(self) -> Any:
        """This area's current subtree."""
        return self._store.get_state()[self._area]

    @property
    def root_state(self) -> State:
        """The whole current state."""
        return self._store.get_state()

    def _run_declarative(self, operation: Operation, /, *args: Any, **kwargs: Any) -> Any:
        payload = operation.compute(self, *args, **kwargs)
        self._store.dispatch(Event(operation, payload))
        return payload


def operations(group: type[ActionGroup]) -> list[tuple[str, str]]:
    """List ``(name, kind)`` for every operation on an action group class.

    *kind* is ``"declarative"`` or ``"imperative"``. Ordered by definition,
    base classes first.
    """
    found: dict[str, str] = {}
    for klass in reversed(group.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, Operation):
                found[name] = "declarative"
            elif getattr(value, _KIND_ATTR, None) == "imperative":
                found[name] = "imperative"
    return list(found.items())
