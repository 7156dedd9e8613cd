"""Immutable state tree.

A ``State`` maps each functional-area name to that area's subtree. The
set of areas is fixed when the store is built; every transition produces
a new ``State`` (or returns the same one when nothing changed).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class State(Mapping[str, Any]):
    """Read-only mapping of area name to subtree.

    Subtrees are expected to be immutable themselves (frozen dataclasses,
    tuples, strings). ``State`` never copies or freezes them.

    Usage::

        state = State({"search": SearchState()})
        state["search"].loading
        state.search.loading  # attribute access for convenience
    """

    __slots__ = ("_areas",)

    def __init__(self, areas: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_areas", dict(areas))

    def __getitem__(self, name: str) -> Any:
        return self._areas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._areas)

    def __len__(self) -> int:
        return len(self._areas)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._areas[name]
        except KeyError:
            msg = f"State has no area {name!r}"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: object) -> None:
        msg = "State is immutable; dispatch an event instead"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, State):
            return self._areas == other._areas
        return NotImplemented

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._areas.items())
        return f"State({inner})"

    def replace(self, name: str, subtree: Any) -> State:
        """Return a new ``State`` with one area's subtree swapped.

        Raises ``KeyError`` for an area that was never registered, so
        unknown areas can never appear.
        """
        if name not in self._areas:
            msg = f"Unknown area {name!r}"
            raise KeyError(msg)
        return State({**self._areas, name: subtree})
