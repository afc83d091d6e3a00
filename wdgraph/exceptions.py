"""Exception types raised by :mod:`wdgraph`.

Structural outcomes (cycles, disconnected graphs, unreachable vertices,
unknown shortest-path sources) are reported through result objects, not
exceptions. The classes here cover malformed input only.
"""

from __future__ import annotations

from typing import Optional


class WdgraphError(Exception):
    """Base class for all package-specific errors."""


class GraphLoadError(WdgraphError, ValueError):
    """Raised when a graph description cannot be loaded."""


class UnresolvedVertexError(GraphLoadError):
    """Raised when an edge names a vertex missing from the vertex table."""

    def __init__(self, name: str, edge_position: Optional[int] = None):
        self.name = name
        self.edge_position = edge_position
        where = f" (edge {edge_position})" if edge_position is not None else ""
        super().__init__(f"Edge references unknown vertex {name!r}{where}")


class DuplicateVertexError(GraphLoadError):
    """Raised when the same vertex name is declared twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Vertex {name!r} is declared more than once")


class GraphFormatError(GraphLoadError):
    """Raised when parsing a textual graph description fails."""


__all__ = [
    "WdgraphError",
    "GraphLoadError",
    "UnresolvedVertexError",
    "DuplicateVertexError",
    "GraphFormatError",
]
