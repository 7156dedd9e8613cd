"""The ``search`` functional area.

State machine of one search::

    Idle --search()--> Pending --resolved--> Succeeded
                               --rejected--> Failed

Both terminal states are idle again (``loading=False``); the next
``search()`` re-enters Pending. Empty results are a success, not a
failure.
"""

from dataclasses import replace
from typing import Any

from warble.actions import ActionGroup, declarative, imperative
from warble.bindings import Area, Bindings
from warble.catalog.models import Product, SearchState
from warble.catalog.service import ProductService
from warble.errors import ServiceError
from warble.state import State
from warble.store import Store

AREA = "search"


class SearchActions(ActionGroup):
    """Operations of the search area."""

    __slots__ = ("service",)

    def __init__(self, store: Store, service: ProductService) -> None:
        super().__init__(store, AREA)
        self.service = service

    @declarative
    def text_changed(self, text: str) -> str:
        return text

    @declarative
    def search_pending(self) -> None:
        return None

    @declarative
    def search_succeeded(self, results: list[Product]) -> list[Product]:
        return results

    @declarative
    def search_failed(self, message: str) -> str:
        return message

    @imperative
    async def search(self) -> None:
        """Search for the current text.

        Backend failures end up in ``error_message``; they are not raised.
        """
        self.search_pending()
        try:
            results = await self.service.search(self.state.search_text)
        except ServiceError as exc:
            self.search_failed(exc.message)
            return
        self.search_succeeded(results)


def _text_changed(state: SearchState, text: str) -> SearchState:
    return replace(state, search_text=text)


def _pending(state: SearchState, _: None) -> SearchState:
    return replace(state, loading=True, error_message="")


def _succeeded(state: SearchState, results: list[Product]) -> SearchState:
    return replace(state, search_results=tuple(results), loading=False, error_message="")


def _failed(state: SearchState, message: str) -> SearchState:
    return replace(state, loading=False, error_message=message or "Search failed")


def search_bindings() -> Bindings:
    return (
        Bindings()
        .bind(SearchActions.text_changed, _text_changed)
        .bind(SearchActions.search_pending, _pending)
        .bind(SearchActions.search_succeeded, _succeeded)
        .bind(SearchActions.search_failed, _failed)
    )


def search_area() -> Area:
    return Area(name=AREA, default=SearchState(), bindings=search_bindings())


def select_search_view(state: State) -> dict[str, Any]:
    """Flatten the search subtree into the values a UI renders."""
    search: SearchState = state[AREA]
    return {
        "search_text": search.search_text,
        "results": [p.name for p in search.search_results],
        "result_count": len(search.search_results),
        "loading": search.loading,
        "error_message": search.error_message,
        "has_error": bool(search.error_message),
    }
