"""Tests for parameter sets and percent-encoding."""

import urllib.parse

import pytest

from fatsecret_client.exceptions import ParameterConflictError
from fatsecret_client.params import ParameterSet, percent_encode


def test_percent_encode_special_characters():
    """Test that special characters are properly percent-encoded."""
    assert percent_encode("hello world") == "hello%20world"
    assert percent_encode("test+value") == "test%2Bvalue"
    assert percent_encode("foo=bar") == "foo%3Dbar"
    assert percent_encode("a&b") == "a%26b"
    assert percent_encode("a/b") == "a%2Fb"


def test_percent_encode_leaves_unreserved_characters():
    """Test that RFC 3986 unreserved characters are never encoded."""
    unreserved = "AZaz09-._~"
    assert percent_encode(unreserved) == unreserved


def test_percent_encode_non_ascii_as_utf8():
    """Test that non-ASCII characters are encoded as UTF-8 octets."""
    assert percent_encode("crème") == "cr%C3%A8me"


def test_percent_encode_converts_non_strings():
    """Test that numbers are encoded through str()."""
    assert percent_encode(12345) == "12345"


def test_parameter_set_stores_strings():
    """Test that values are stored as strings."""
    params = ParameterSet({"food_id": 12345, "max_results": 20})

    assert params["food_id"] == "12345"
    assert params["max_results"] == "20"
    assert len(params) == 2


def test_canonical_query_sorted_by_key():
    """Test that the canonical query is sorted alphabetically."""
    params = ParameterSet({"b": "2", "a": "1", "c": "3"})

    assert params.canonical_query() == "a=1&b=2&c=3"


def test_canonical_query_independent_of_insertion_order():
    """Test that insertion order does not affect the canonical query."""
    first = ParameterSet({"method": "foods.search", "format": "json", "x": "1"})
    second = ParameterSet({"x": "1", "format": "json", "method": "foods.search"})

    assert first.canonical_query() == second.canonical_query()


def test_canonical_query_sorts_on_encoded_keys():
    """Test that sorting happens after encoding."""
    # "%20" (0x25) sorts before "A" (0x41) once the space is encoded
    params = ParameterSet({"A": "1", " ": "2"})

    assert params.canonical_query() == "%20=2&A=1"


def test_canonical_query_round_trip():
    """Test that decoding the canonical query recovers the original pairs."""
    original = {
        "search_expression": "apple pie + cream",
        "expression": "crème brûlée",
        "food_id": "12345",
        "odd key": "a=b&c",
    }
    params = ParameterSet(original)

    decoded = {}
    for pair in params.canonical_query().split("&"):
        key, value = pair.split("=")
        decoded[urllib.parse.unquote(key)] = urllib.parse.unquote(value)

    assert decoded == original


def test_merge_rejects_conflicting_keys():
    """Test that merging a duplicate key raises ParameterConflictError."""
    params = ParameterSet({"format": "json"})

    with pytest.raises(ParameterConflictError) as exc_info:
        params.merge({"format": "xml"})

    assert "format" in str(exc_info.value)
    assert params["format"] == "json"


def test_parameter_conflict_is_value_error():
    """Test that callers can catch conflicts as ValueError."""
    with pytest.raises(ValueError):
        ParameterSet({"a": "1"}).merge({"a": "2"})


def test_merge_returns_self():
    """Test that merge can be chained."""
    params = ParameterSet().merge({"a": "1"}).merge({"b": "2"})

    assert dict(params) == {"a": "1", "b": "2"}
