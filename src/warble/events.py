"""Operation identities and events.

An ``Operation`` is the stable handle for one declarative operation. It is
compared by identity, so the operation object itself is the key used by
the binding table — no action-type strings.

An ``Event`` is the ephemeral ``(operation, payload)`` pair produced each
time a declarative operation runs.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class Operation:
    """Identity of a declarative operation.

    Created by ``@declarative``. On the class it is the identity itself;
    on an ``ActionGroup`` instance it is a bound callable that computes
    the payload and dispatches the event::

        class Counter(ActionGroup):
            @declarative
            def added(self, amount: int) -> int:
                return amount

        Counter.added            # Operation — bind this
        Counter(store).added(2)  # dispatches Event(Counter.added, 2)
    """

    __slots__ = ("__wrapped__", "name", "owner")

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.__wrapped__ = fn
        self.name: str = fn.__name__
        self.owner: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner.__qualname__
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return functools.partial(instance._run_declarative, self)

    @property
    def qualname(self) -> str:
        """``Owner.name`` — used in logs and reprs."""
        if self.owner:
            return f"{self.owner}.{self.name}"
        return self.name

    def compute(self, group: Any, *args: Any, **kwargs: Any) -> Any:
        """Run the decorated function to produce the payload."""
        return self.__wrapped__(group, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<Operation {self.qualname}>"


@dataclass(frozen=True, slots=True)
class Event:
    """A single dispatched event.

    ``payload`` may be ``None`` for signal-only operations such as
    "search started".
    """

    operation: Operation
    payload: Any = None

    @property
    def name(self) -> str:
        return self.operation.qualname
