"""Binding table — operation identity to transition function.

Mirrors the ``Router`` + ``Route`` pattern: ``Bindings`` is mutable during
setup, ``compile()`` freezes it into a plain reducer function. ``combine()``
joins one reducer per functional area into the root transition consumed
by the store.

Usage::

    search = (
        Bindings()
        .bind(SearchActions.text_changed, lambda s, text: replace(s, search_text=text))
        .bind(SearchActions.search_pending, lambda s, _: replace(s, loading=True))
    )
    reducer = search.compile()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from warble.errors import ConfigurationError
from warble.events import Event, Operation
from warble.state import State

logger = logging.getLogger("warble.bindings")

# (substate, payload) -> substate
type Transition = Callable[[Any, Any], Any]

# (substate, event) -> substate — one per functional area
type Reducer = Callable[[Any, Event], Any]

# (state, event) -> state — the combined root transition
type RootReducer = Callable[[State, Event], State]


class Bindings:
    """Builder for one functional area's binding table.

    ``bind()`` is fluent and last-registration-wins. ``compile()`` takes a
    snapshot, so later ``bind()`` calls never leak into a reducer that was
    already handed out.
    """

    __slots__ = ("_table",)

    def __init__(self) -> None:
        self._table: dict[Operation, Transition] = {}

    def bind(self, operation: Operation, fn: Transition) -> Bindings:
        """Bind *operation* to *fn*. Replaces any earlier binding."""
        if not isinstance(operation, Operation):
            msg = (
                f"Can only bind declarative operations, got {operation!r}. "
                "Decorate the method with @declarative and bind the class attribute."
            )
            raise ConfigurationError(msg)
        if operation in self._table:
            logger.debug("Rebinding %s (last registration wins)", operation.qualname)
        self._table[operation] = fn
        return self

    def __contains__(self, operation: object) -> bool:
        return operation in self._table

    def __len__(self) -> int:
        return len(self._table)

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Bound operations in registration order."""
        return tuple(self._table)

    def compile(self) -> Reducer:
        """Freeze the table into a reducer.

        Unmatched events return the substate unchanged (same object).
        """
        table = MappingProxyType(dict(self._table))

        def reducer(substate: Any, event: Event) -> Any:
            fn = table.get(event.operation)
            if fn is None:
                return substate
            return fn(substate, event.payload)

        return reducer


@dataclass(frozen=True, slots=True)
class Area:
    """A functional area: a named subtree, its default, and its bindings."""

    name: str
    default: Any
    bindings: Bindings = field(default_factory=Bindings)


def combine(reducers: Mapping[str, Reducer]) -> RootReducer:
    """Join per-area reducers into one root transition.

    Each area's subtree is reduced independently. When no subtree changes
    the original ``State`` instance is returned.
    """
    frozen = tuple(reducers.items())

    def root(state: State, event: Event) -> State:
        changed: dict[str, Any] = {}
        for name, reducer in frozen:
            before = state[name]
            after = reducer(before, event)
            if after is not before:
                changed[name] = after
        if not changed:
            return state
        return State({name: changed.get(name, state[name]) for name in state})

    return root
