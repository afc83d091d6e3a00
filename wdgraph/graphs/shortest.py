"""
Single-source shortest paths: lazy-deletion Dijkstra.

The frontier is a binary heap of candidate paths (from, to, cost). Stale
candidates are not removed when a better one appears; they are discarded
when popped if their target has already been settled. This trades a larger
heap for not needing a decrease-key operation.

Edge costs must be non-negative. This is not checked: with negative costs
the reported distances are not guaranteed to be minimal.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from wdgraph.diagnostics.core import assert_shortest_paths
from wdgraph.diagnostics.debug_mode import is_debug_enabled
from wdgraph.logging import get_logger

from .core import Graph
from .utils import FrontierEntry, frontier_sort_key, reconstruct_path

logger = get_logger(__name__)

Distance = Union[int, float]

INFINITY: float = math.inf


class PathStatus(Enum):
    """Outcome of a shortest-path computation."""

    OK = "ok"
    SOURCE_NOT_FOUND = "source_not_found"


@dataclass
class PathRecord:
    """
    Working state for one vertex while Dijkstra runs.

    ``predecessor`` is None both for the source (which is settled) and for
    vertices not yet reached (which are not).
    """

    settled: bool = False
    distance: Distance = INFINITY
    predecessor: Optional[int] = None


@dataclass(frozen=True)
class PathEntry:
    """
    Reported shortest path to one vertex.

    Attributes:
        reachable: Whether the vertex can be reached from the source.
        distance: Minimum total cost, or ``math.inf`` when unreachable.
        path: Vertex names from the source to this vertex inclusive, or None
            when unreachable. The source itself reports ``[source]``.
    """

    reachable: bool
    distance: Distance = INFINITY
    path: Optional[List[str]] = None


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Result of :func:`dijkstra`.

    Attributes:
        status: OK, or SOURCE_NOT_FOUND when the source name is unknown.
        source: The requested source name.
        entries: Mapping vertex name -> PathEntry, in vertex index order.
            Empty when the source was not found.
    """

    status: PathStatus
    source: str
    entries: Dict[str, PathEntry] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status is PathStatus.OK

    def distance_to(self, name: str) -> Distance:
        """Return the distance to ``name`` (``math.inf`` if unreachable)."""
        return self.entries[name].distance

    def path_to(self, name: str) -> Optional[List[str]]:
        """Return the path to ``name`` or None if unreachable."""
        return self.entries[name].path

    def reachable_names(self) -> List[str]:
        """Return the names of all reachable vertices, source included."""
        return [name for name, entry in self.entries.items() if entry.reachable]


def _push(frontier: List[Tuple[Tuple[int, int, int], FrontierEntry]], entry: FrontierEntry) -> None:
    heapq.heappush(frontier, (frontier_sort_key(entry), entry))


def shortest_path_table(graph: Graph, source: int) -> List[PathRecord]:
    """
    Run lazy-deletion Dijkstra from a source index and return the path table.

    The frontier is seeded with the source's outgoing edges. The loop stops
    when the frontier empties or every vertex is settled. Equal-cost
    candidates pop in ``frontier_sort_key`` order (cost, target index,
    source index).

    Args:
        graph: Loaded graph with non-negative costs (not modified).
        source: Valid source vertex index.

    Returns:
        One PathRecord per vertex index. Unreachable vertices stay
        unsettled at infinite distance.

    Complexity: O(E log E) with a binary heap.
    """
    n = graph.vertex_count()
    table = [PathRecord() for _ in range(n)]
    table[source] = PathRecord(settled=True, distance=0, predecessor=None)
    settled_count = 1

    frontier: List[Tuple[Tuple[int, int, int], FrontierEntry]] = []
    for edge in graph.edges_of(source):
        _push(frontier, FrontierEntry(source, edge.to_index, edge.cost))

    while frontier and settled_count < n:
        _, candidate = heapq.heappop(frontier)
        target = table[candidate.to_index]

        # Lazy deletion: a cheaper candidate already settled this vertex
        if target.settled:
            continue

        target.settled = True
        target.distance = candidate.cost
        target.predecessor = candidate.from_index
        settled_count += 1

        for edge in graph.edges_of(candidate.to_index):
            if not table[edge.to_index].settled:
                _push(
                    frontier,
                    FrontierEntry(candidate.to_index, edge.to_index, candidate.cost + edge.cost),
                )

    return table


def dijkstra(graph: Graph, source: str) -> ShortestPathResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes the shortest distance and path from ``source`` to every vertex
    of a graph with non-negative edge costs.

    Args:
        graph: Loaded graph (not modified).
        source: Name of the source vertex.

    Returns:
        ShortestPathResult with one PathEntry per vertex, or status
        SOURCE_NOT_FOUND (and no entries) when ``source`` is not a vertex.

    Example:
        >>> G = Graph.from_description(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2)])
        >>> result = dijkstra(G, "A")
        >>> result.distance_to("C"), result.path_to("C")
        (3, ['A', 'B', 'C'])
    """
    source_index = graph.resolve_index(source)
    if source_index is None:
        logger.debug("Shortest paths requested from unknown vertex %r", source)
        return ShortestPathResult(PathStatus.SOURCE_NOT_FOUND, source)

    table = shortest_path_table(graph, source_index)
    predecessor = [record.predecessor for record in table]

    entries: Dict[str, PathEntry] = {}
    for index, record in enumerate(table):
        name = graph.name_of(index)
        if not record.settled:
            entries[name] = PathEntry(reachable=False)
            continue
        path = [graph.name_of(i) for i in reconstruct_path(predecessor, source_index, index)]
        entries[name] = PathEntry(reachable=True, distance=record.distance, path=path)

    unreachable = sum(1 for record in table if not record.settled)
    if unreachable:
        logger.debug("%d of %d vertices unreachable from %r", unreachable, len(table), source)

    result = ShortestPathResult(PathStatus.OK, source, entries)

    if is_debug_enabled():
        assert_shortest_paths(graph, result)

    return result
