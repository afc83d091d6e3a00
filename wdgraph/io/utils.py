"""Token helpers for the textual graph description format.

The format is a flat stream of whitespace-separated tokens. These helpers
strip comments and convert count and cost tokens, raising GraphFormatError
with the token position on malformed input.
"""

from __future__ import annotations

import re
from typing import List

from wdgraph.exceptions import GraphFormatError

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def strip_comments(text: str) -> List[str]:
    """
    Split a description into tokens, dropping ``#`` comments.

    A ``#`` starts a comment that runs to the end of its line. Blank lines
    are ignored.

    Parameters
    ----------
    text : str
        Raw description text.

    Returns
    -------
    List[str]
        Tokens in file order.
    """
    tokens: List[str] = []
    for line in text.splitlines():
        if "#" in line:
            line = line[: line.index("#")]
        tokens.extend(line.split())
    return tokens


def parse_int(token: str, what: str, position: int) -> int:
    """
    Convert a token to an int.

    Parameters
    ----------
    token : str
        Token text.
    what : str
        Description of the expected value, used in the error message.
    position : int
        Zero-based token position, used in the error message.

    Raises
    ------
    GraphFormatError
        If the token is not a decimal integer.
    """
    if not _INT_PATTERN.match(token):
        raise GraphFormatError(f"Expected {what} at token {position}, got {token!r}.")
    return int(token)


def parse_count(token: str, what: str, position: int) -> int:
    """
    Convert a token to a non-negative count.

    Raises
    ------
    GraphFormatError
        If the token is not an integer or is negative.
    """
    value = parse_int(token, what, position)
    if value < 0:
        raise GraphFormatError(f"{what.capitalize()} at token {position} must be non-negative, got {value}.")
    return value


def parse_cost(token: str, position: int) -> int:
    """Convert an edge cost token to an int (negative costs are allowed)."""
    return parse_int(token, "an integer edge cost", position)
