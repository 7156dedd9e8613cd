"""Catalog types — products and the search area's state subtree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Product:
    """A product as returned by the catalog backend."""

    id: int
    name: str
    price: float = 0.0
    category: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Product:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=float(data.get("price", 0.0)),
            category=str(data.get("category", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price, "category": self.category}


@dataclass(frozen=True, slots=True)
class SearchState:
    """The ``search`` subtree.

    Idle is represented by ``loading=False``; there is no idle event.
    """

    search_text: str = ""
    search_results: tuple[Product, ...] = ()
    loading: bool = False
    error_message: str = ""
