"""Tests for warble.proxy.routes — pattern parsing and positional matching."""

import pytest

from warble.errors import ConfigurationError
from warble.proxy.routes import RouteEntry, format_address, parse_pattern, split_address


def _handler(params: dict[str, str]) -> dict[str, str]:
    return params


class TestParsePattern:
    def test_static(self) -> None:
        segments = parse_pattern("/products")
        assert len(segments) == 1
        assert segments[0].value == "products"
        assert segments[0].is_param is False

    def test_placeholder(self) -> None:
        segments = parse_pattern("/products/search/{searchText}")
        assert [s.value for s in segments] == ["products", "search", "{searchText}"]
        assert segments[2].is_param is True
        assert segments[2].name == "searchText"

    def test_root(self) -> None:
        assert parse_pattern("/") == ()

    def test_duplicate_placeholder(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate placeholder"):
            parse_pattern("/a/{id}/b/{id}")

    def test_invalid_placeholder_name(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid placeholder"):
            parse_pattern("/a/{not-valid}")

    def test_partial_segment_placeholder(self) -> None:
        with pytest.raises(ConfigurationError, match="whole segment"):
            parse_pattern("/a/item-{id}")


class TestSplitAddress:
    def test_trailing_slash_ignored(self) -> None:
        assert split_address("/products/") == ["products"]

    def test_empty_segments_dropped(self) -> None:
        assert split_address("/products//search") == ["products", "search"]


class TestRouteEntryMatch:
    def test_captures_placeholder(self) -> None:
        entry = RouteEntry.create("/products/search/{searchText}", _handler)
        assert entry.match(split_address("/products/search/glove")) == {"searchText": "glove"}

    def test_captured_value_is_unquoted(self) -> None:
        entry = RouteEntry.create("/products/search/{searchText}", _handler)
        params = entry.match(split_address("/products/search/Baseball%20glove"))
        assert params == {"searchText": "Baseball glove"}

    def test_missing_segment(self) -> None:
        entry = RouteEntry.create("/products/search/{searchText}", _handler)
        assert entry.match(split_address("/products/search")) is None

    def test_extra_segment(self) -> None:
        entry = RouteEntry.create("/products/search/{searchText}", _handler)
        assert entry.match(split_address("/products/search/glove/red")) is None

    def test_literal_mismatch(self) -> None:
        entry = RouteEntry.create("/products/search/{searchText}", _handler)
        assert entry.match(split_address("/orders/search/glove")) is None

    def test_multiple_placeholders(self) -> None:
        entry = RouteEntry.create("/users/{userId}/orders/{orderId}", _handler)
        assert entry.match(split_address("/users/7/orders/42")) == {"userId": "7", "orderId": "42"}

    def test_frozen(self) -> None:
        entry = RouteEntry.create("/products", _handler)
        with pytest.raises(AttributeError):
            entry.pattern = "/other"  # type: ignore[misc]


class TestFormatAddress:
    def test_substitutes_placeholders(self) -> None:
        assert format_address("/products/search/{searchText}", searchText="glove") == (
            "/products/search/glove"
        )

    def test_quotes_values(self) -> None:
        assert format_address("/products/search/{searchText}", searchText="a b/c") == (
            "/products/search/a%20b%2Fc"
        )

    def test_missing_value(self) -> None:
        with pytest.raises(KeyError):
            format_address("/products/search/{searchText}")
