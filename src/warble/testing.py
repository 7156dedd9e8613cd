"""Test helpers for warble stores.

``EventRecorder`` taps a store and keeps every dispatched event together
with the state it produced, so tests can assert on ordering::

    with EventRecorder(store) as recorder:
        await actions.search()
    assert recorder.names == ["SearchActions.search_pending", "SearchActions.search_succeeded"]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from warble.events import Event, Operation
from warble.state import State
from warble.store import Store, Unsubscribe


@dataclass(frozen=True, slots=True)
class Recorded:
    """One dispatched event and the state right after it was applied."""

    event: Event
    state: State


class EventRecorder:
    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("_store", "_unsubscribe", "records")

    def __init__(self, store: Store) -> None:
        self._store = store
        self.records: list[Recorded] = []
        self._unsubscribe: Unsubscribe | None = None

    def __enter__(self) -> EventRecorder:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.tap(self._record)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _record(self, event: Event) -> None:
        self.records.append(Recorded(event=event, state=self._store.get_state()))

    @property
    def events(self) -> list[Event]:
        return [r.event for r in self.records]

    @property
    def operations(self) -> list[Operation]:
        return [r.event.operation for r in self.records]

    @property
    def names(self) -> list[str]:
        return [r.event.name for r in self.records]

    def payloads(self, operation: Operation) -> list[Any]:
        """Payloads of every recorded event for *operation*, in order."""
        return [r.event.payload for r in self.records if r.event.operation is operation]


def assert_dispatched(recorder: EventRecorder, *operations: Operation) -> None:
    """Assert the recorder saw exactly *operations*, in order."""
    actual = recorder.operations
    assert actual == list(operations), (
        f"Expected {[op.qualname for op in operations]}, got {recorder.names}"
    )
