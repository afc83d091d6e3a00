"""
Topological ordering with Kahn's algorithm.

Vertices with no unmet dependency (in-degree zero) are released through a
FIFO frontier; emitting a vertex decrements the in-degree of each successor.
If the frontier drains before every vertex is emitted, the remaining vertices
lie on or behind a cycle and no ordering exists.

References:
    - Kahn, A. B. "Topological sorting of large networks", CACM 5(11), 1962.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional

from wdgraph.diagnostics.core import assert_topological_order
from wdgraph.diagnostics.debug_mode import is_debug_enabled
from wdgraph.logging import get_logger

from .core import Graph

logger = get_logger(__name__)


class SortStatus(Enum):
    """Outcome of a topological sort."""

    ORDER_FOUND = "order_found"
    CYCLE_DETECTED = "cycle_detected"


@dataclass(frozen=True)
class TopologicalSortResult:
    """
    Result of :func:`topological_sort`.

    Attributes:
        status: ORDER_FOUND or CYCLE_DETECTED.
        order: Vertex names in topological order when found, otherwise None.
            A partial ordering is never exposed.
    """

    status: SortStatus
    order: Optional[List[str]] = None

    @property
    def found(self) -> bool:
        return self.status is SortStatus.ORDER_FOUND


def in_degrees(graph: Graph) -> List[int]:
    """
    Count incoming edges per vertex index.

    Parallel edges and self-loops each count once per edge.
    """
    indegree = [0] * graph.vertex_count()
    for index in range(graph.vertex_count()):
        for edge in graph.edges_of(index):
            indegree[edge.to_index] += 1
    return indegree


def topological_sort(graph: Graph) -> TopologicalSortResult:
    """
    Compute a topological ordering of a directed graph (Kahn's algorithm).

    Ties between vertices that reach in-degree zero together are broken by
    FIFO arrival: the initial frontier holds zero in-degree vertices in
    ascending index order and later vertices are enqueued as their last
    dependency is emitted.

    Args:
        graph: Loaded graph (not modified).

    Returns:
        TopologicalSortResult with the full ordering, or CYCLE_DETECTED when
        the graph has a cycle (including self-loops).

    Complexity: O(V + E).

    Example:
        >>> G = Graph.from_description(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1)])
        >>> topological_sort(G).order
        ['A', 'B', 'C']
    """
    indegree = in_degrees(graph)
    frontier: Deque[int] = deque(
        index for index, count in enumerate(indegree) if count == 0
    )
    order: List[int] = []

    while frontier:
        current = frontier.popleft()
        order.append(current)

        for edge in graph.edges_of(current):
            indegree[edge.to_index] -= 1
            if indegree[edge.to_index] == 0:
                frontier.append(edge.to_index)

    if len(order) != graph.vertex_count():
        logger.debug(
            "Cycle detected: emitted %d of %d vertices", len(order), graph.vertex_count()
        )
        return TopologicalSortResult(SortStatus.CYCLE_DETECTED)

    names = [graph.name_of(index) for index in order]

    if is_debug_enabled():
        assert_topological_order(graph, names)

    return TopologicalSortResult(SortStatus.ORDER_FOUND, names)
