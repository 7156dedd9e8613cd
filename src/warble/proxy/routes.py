"""Address patterns for the simulated backend.

Patterns are parsed once at registration into an ordered tuple of
segments and matched positionally against the split concrete address::

    "/products/search/{searchText}"
        -> (Segment("products"), Segment("search"), Segment("{searchText}", name="searchText"))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, unquote

from warble.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of an address pattern.

    Literal:     ``products``     (name=None)
    Placeholder: ``{searchText}`` (name="searchText")
    """

    value: str
    name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.name is not None


def split_address(address: str) -> list[str]:
    """Split an address into non-empty path segments (trailing slash ignored)."""
    return [part for part in address.strip("/").split("/") if part]


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a route pattern into segments.

    Raises ``ConfigurationError`` for malformed or duplicate placeholders.
    """
    segments: list[Segment] = []
    seen: set[str] = set()
    for part in split_address(pattern):
        if part.startswith("{") and part.endswith("}"):
            name = part[1:-1].strip()
            if not name.isidentifier():
                msg = f"Invalid placeholder {part!r} in pattern {pattern!r}"
                raise ConfigurationError(msg)
            if name in seen:
                msg = f"Duplicate placeholder {{{name}}} in pattern {pattern!r}"
                raise ConfigurationError(msg)
            seen.add(name)
            segments.append(Segment(value=part, name=name))
        elif "{" in part or "}" in part:
            msg = (
                f"Invalid segment {part!r} in pattern {pattern!r}. "
                "Placeholders must span a whole segment, like /items/{id}"
            )
            raise ConfigurationError(msg)
        else:
            segments.append(Segment(value=part))
    return tuple(segments)


def format_address(pattern: str, **params: Any) -> str:
    """Fill ``{name}`` placeholders in *pattern* with URL-quoted values.

    Raises ``KeyError`` if a placeholder has no value.
    """
    parts: list[str] = []
    for segment in parse_pattern(pattern):
        if segment.name is None:
            parts.append(segment.value)
        else:
            parts.append(quote(str(params[segment.name]), safe=""))
    return "/" + "/".join(parts)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A frozen ``(pattern, handler)`` pair.

    Created at registration, never mutated afterwards.
    """

    pattern: str
    handler: Callable[..., Any]
    segments: tuple[Segment, ...]

    @classmethod
    def create(cls, pattern: str, handler: Callable[..., Any]) -> RouteEntry:
        return cls(pattern=pattern, handler=handler, segments=parse_pattern(pattern))

    def match(self, parts: list[str]) -> dict[str, str] | None:
        """Match split address *parts*. Returns captured params or ``None``."""
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for segment, part in zip(self.segments, parts, strict=True):
            if segment.name is not None:
                params[segment.name] = unquote(part)
            elif segment.value != part:
                return None
        return params
