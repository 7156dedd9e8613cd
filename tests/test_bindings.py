"""Tests for warble.bindings — binding table, compile, and combine."""

from functools import reduce

import pytest

from warble.actions import ActionGroup, declarative
from warble.bindings import Area, Bindings, combine
from warble.errors import ConfigurationError
from warble.events import Event
from warble.state import State


class Counter(ActionGroup):
    @declarative
    def added(self, amount: int) -> int:
        return amount

    @declarative
    def reset(self) -> None:
        return None

    @declarative
    def never_bound(self) -> None:
        return None


class Label(ActionGroup):
    @declarative
    def renamed(self, text: str) -> str:
        return text


def _counter_bindings() -> Bindings:
    return (
        Bindings()
        .bind(Counter.added, lambda n, amount: n + amount)
        .bind(Counter.reset, lambda n, _: 0)
    )


class TestBind:
    def test_fluent(self) -> None:
        b = Bindings()
        assert b.bind(Counter.added, lambda n, a: n + a) is b

    def test_registration_order(self) -> None:
        b = _counter_bindings()
        assert b.operations == (Counter.added, Counter.reset)
        assert len(b) == 2
        assert Counter.added in b
        assert Counter.never_bound not in b

    def test_last_registration_wins(self) -> None:
        reducer = (
            Bindings()
            .bind(Counter.added, lambda n, amount: n + amount)
            .bind(Counter.added, lambda n, amount: n * amount)
            .compile()
        )
        assert reducer(3, Event(Counter.added, 4)) == 12

    def test_rejects_strings(self) -> None:
        with pytest.raises(ConfigurationError, match="@declarative"):
            Bindings().bind("ADDED", lambda n, a: n)  # type: ignore[arg-type]


class TestCompile:
    def test_applies_bound_transition(self) -> None:
        reducer = _counter_bindings().compile()
        assert reducer(1, Event(Counter.added, 2)) == 3

    def test_signal_only_payload(self) -> None:
        reducer = _counter_bindings().compile()
        assert reducer(7, Event(Counter.reset)) == 0

    def test_unbound_event_returns_same_object(self) -> None:
        substate = ["untouched"]
        reducer = _counter_bindings().compile()
        assert reducer(substate, Event(Counter.never_bound)) is substate

    def test_compile_is_idempotent(self) -> None:
        bindings = _counter_bindings()
        first = bindings.compile()
        second = bindings.compile()
        events = [Event(Counter.added, 2), Event(Counter.reset), Event(Counter.added, 5)]
        for event in events:
            assert first(10, event) == second(10, event)

    def test_later_binds_do_not_leak_into_compiled_reducer(self) -> None:
        bindings = Bindings().bind(Counter.added, lambda n, a: n + a)
        reducer = bindings.compile()
        bindings.bind(Counter.added, lambda n, a: 0)
        assert reducer(1, Event(Counter.added, 1)) == 2

    def test_left_fold_equivalence(self) -> None:
        reducer = _counter_bindings().compile()
        events = [
            Event(Counter.added, 3),
            Event(Counter.never_bound),
            Event(Counter.added, 4),
            Event(Counter.reset),
            Event(Counter.added, 9),
        ]
        state = 0
        for event in events:
            state = reducer(state, event)
        assert state == reduce(reducer, events, 0) == 9


class TestCombine:
    def _root(self):
        return combine(
            {
                "counter": _counter_bindings().compile(),
                "label": Bindings().bind(Label.renamed, lambda _, text: text).compile(),
            }
        )

    def test_event_targets_one_area(self) -> None:
        state = State({"counter": 1, "label": "a"})
        updated = self._root()(state, Event(Counter.added, 1))
        assert updated["counter"] == 2
        assert updated["label"] is state["label"]

    def test_unbound_event_returns_same_state(self) -> None:
        state = State({"counter": 1, "label": "a"})
        assert self._root()(state, Event(Counter.never_bound)) is state

    def test_area_order_preserved(self) -> None:
        state = State({"counter": 1, "label": "a"})
        updated = self._root()(state, Event(Label.renamed, "b"))
        assert list(updated) == ["counter", "label"]


class TestArea:
    def test_default_bindings_are_empty(self) -> None:
        area = Area("counter", 0)
        assert len(area.bindings) == 0

    def test_frozen(self) -> None:
        area = Area("counter", 0)
        with pytest.raises(AttributeError):
            area.name = "other"  # type: ignore[misc]
