"""Tests for description token helpers."""

import pytest

from wdgraph.exceptions import GraphFormatError
from wdgraph.io.utils import parse_cost, parse_count, parse_int, strip_comments


def test_strip_comments():
    """Test tokenizing with comments and blank lines."""
    text = "3 # count\n\n  a\tb c\n# whole line\n"
    assert strip_comments(text) == ["3", "a", "b", "c"]


def test_strip_comments_empty():
    """Test empty input."""
    assert strip_comments("") == []


@pytest.mark.parametrize("token, value", [("0", 0), ("42", 42), ("-7", -7), ("+3", 3)])
def test_parse_int(token, value):
    """Test decimal integers with optional sign."""
    assert parse_int(token, "a number", 0) == value


@pytest.mark.parametrize("token", ["1.0", "1e3", "abc", "0x10", "--1"])
def test_parse_int_rejects(token):
    """Test that non-integers are rejected with the position."""
    with pytest.raises(GraphFormatError, match="at token 5"):
        parse_int(token, "a number", 5)


def test_parse_count_rejects_negative():
    """Test that counts must be non-negative."""
    assert parse_count("0", "an edge count", 0) == 0
    with pytest.raises(GraphFormatError, match="An edge count at token 2 must be non-negative"):
        parse_count("-1", "an edge count", 2)


def test_parse_cost_allows_negative():
    """Test that costs may be negative."""
    assert parse_cost("-12", 9) == -12
    with pytest.raises(GraphFormatError, match="integer edge cost"):
        parse_cost("x", 9)
