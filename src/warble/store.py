"""State container.

Holds one immutable ``State``, applies transitions, and notifies observers.

Serialization:
    ``apply()`` never overlaps with itself. A transition applied from inside
    an observer (or from another thread while one is running) is queued and
    runs after the current application has finished notifying everyone.
    Application never suspends, so concurrently pending imperative
    operations can only interleave *between* applications.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

from warble.bindings import Area, Reducer, RootReducer, combine
from warble.errors import ConfigurationError
from warble.events import Event
from warble.state import State

logger = logging.getLogger("warble.store")

type Observer = Callable[[State], None]
type Tap = Callable[[Event], None]
type Unsubscribe = Callable[[], None]


class Store:
    """The single writer of application state.

    Usage::

        store = create_store(search_area)
        unsubscribe = store.subscribe(lambda state: render(state))
        store.dispatch(Event(SearchActions.text_changed, "glove"))
        unsubscribe()
    """

    __slots__ = (
        "_applying",
        "_lock",
        "_observers",
        "_queue",
        "_reducer",
        "_state",
        "_taps",
    )

    def __init__(self, initial: State, reducer: RootReducer) -> None:
        self._state = initial
        self._reducer = reducer
        self._observers: list[Observer] = []
        self._taps: list[Tap] = []
        self._queue: deque[tuple[Callable[[State], State], Event | None]] = deque()
        self._applying = False
        self._lock = threading.Lock()

    def get_state(self) -> State:
        """Current snapshot. No side effects."""
        return self._state

    def apply(self, transition: Callable[[State], State]) -> None:
        """Replace the state with ``transition(current)`` and notify observers."""
        self._enqueue(transition, None)

    def dispatch(self, event: Event) -> None:
        """Apply the root reducer for *event*.

        Taps see the event after the state is replaced and before
        observers are notified.
        """
        reducer = self._reducer
        self._enqueue(lambda state: reducer(state, event), event)

    def subscribe(self, observer: Observer) -> Unsubscribe:
        """Register *observer*. Returns an idempotent unsubscribe callable."""
        return _register(self._observers, observer)

    def tap(self, listener: Tap) -> Unsubscribe:
        """Register an event listener. Returns an idempotent unsubscribe callable."""
        return _register(self._taps, listener)

    def _enqueue(self, transition: Callable[[State], State], event: Event | None) -> None:
        with self._lock:
            self._queue.append((transition, event))
            if self._applying:
                return
            self._applying = True

        try:
            while True:
                with self._lock:
                    if not self._queue:
                        self._applying = False
                        return
                    transition, event = self._queue.popleft()
                self._run(transition, event)
        except BaseException:
            with self._lock:
                self._queue.clear()
                self._applying = False
            raise

    def _run(self, transition: Callable[[State], State], event: Event | None) -> None:
        next_state = transition(self._state)
        if not isinstance(next_state, State):
            msg = f"Transition returned {type(next_state).__name__}, expected State"
            raise TypeError(msg)

        self._state = next_state
        if event is not None:
            logger.debug("Dispatched %s payload=%r", event.name, event.payload)
            for listener in tuple(self._taps):
                listener(event)
        for observer in tuple(self._observers):
            observer(next_state)


def _register(listeners: list[Any], listener: Any) -> Unsubscribe:
    listeners.append(listener)

    def unsubscribe() -> None:
        if listener in listeners:
            listeners.remove(listener)

    return unsubscribe


def create_store(*areas: Area) -> Store:
    """Build a store from functional areas.

    The initial state holds each area's default. Each area's bindings are
    compiled once here and combined into the root transition.

    Raises ``ConfigurationError`` on duplicate area names or no areas.
    """
    if not areas:
        msg = "create_store() needs at least one Area"
        raise ConfigurationError(msg)

    reducers: dict[str, Reducer] = {}
    defaults: dict[str, Any] = {}
    for area in areas:
        if area.name in reducers:
            msg = f"Duplicate area name: {area.name!r}"
            raise ConfigurationError(msg)
        reducers[area.name] = area.bindings.compile()
        defaults[area.name] = area.default

    logger.debug("Created store with areas: %s", ", ".join(reducers))
    return Store(State(defaults), combine(reducers))

