"""
Minimum spanning tree: Kruskal's algorithm over a disjoint-set forest.

Directed edges are treated as undirected connections. Both directions of a
symmetric pair are candidates; whichever is considered first joins the two
components and the other is then rejected as redundant.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from wdgraph.diagnostics.core import assert_spanning_tree
from wdgraph.diagnostics.debug_mode import is_debug_enabled
from wdgraph.logging import get_logger

from .core import Graph
from .utils import edge_sort_key, flatten_edges

logger = get_logger(__name__)


class DisjointSet:
    """
    Union-Find (Disjoint Set) over indices 0..size-1 with path compression
    and union by rank.

    Used by Kruskal's algorithm for cycle detection.

    Attributes:
        component_count: Number of disjoint components currently in the forest.
    """

    def __init__(self, size: int):
        """
        Initialize ``size`` singleton components.

        Args:
            size: Number of elements.
        """
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self.component_count = size

    def find(self, x: int) -> int:
        """
        Find the representative of x's component, compressing the path.

        Args:
            x: Element index.

        Returns:
            Root index of the component.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Point every node on the path directly at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def connected(self, a: int, b: int) -> bool:
        """Return True if a and b are in the same component."""
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the components containing a and b using union by rank.

        Merging two elements already in the same component changes nothing.

        Args:
            a: First element.
            b: Second element.

        Returns:
            True if exactly one component remains afterwards.
        """
        root_a = self.find(a)
        root_b = self.find(b)

        if root_a != root_b:
            if self.rank[root_a] < self.rank[root_b]:
                root_a, root_b = root_b, root_a
            self.parent[root_b] = root_a
            if self.rank[root_a] == self.rank[root_b]:
                self.rank[root_a] += 1
            self.component_count -= 1

        return self.component_count == 1

    def __len__(self) -> int:
        return len(self.parent)


class TreeStatus(Enum):
    """Outcome of a spanning tree construction."""

    TREE_FOUND = "tree_found"
    NOT_CONNECTED = "not_connected"


@dataclass(frozen=True)
class TreeEdge:
    """Edge accepted into a spanning tree, as stored in the graph."""

    from_name: str
    to_name: str
    cost: int


@dataclass(frozen=True)
class SpanningTreeResult:
    """
    Result of :func:`kruskal_mst`.

    Attributes:
        status: TREE_FOUND, or NOT_CONNECTED when no spanning tree exists.
        edges: Accepted edges in acceptance order (empty if not connected).
        total_cost: Sum of accepted edge costs, None if not connected.
    """

    status: TreeStatus
    edges: List[TreeEdge] = field(default_factory=list)
    total_cost: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.status is TreeStatus.TREE_FOUND


def kruskal_mst(graph: Graph) -> SpanningTreeResult:
    """
    Kruskal's algorithm for a minimum spanning tree.

    Candidate edges are sorted by ``edge_sort_key`` (cost, from index, to
    index) and accepted when they join two different components. The scan
    stops as soon as a single component remains.

    Args:
        graph: Loaded graph, connected when edge directions are ignored
            (not modified).

    Returns:
        SpanningTreeResult with vertex_count - 1 edges and their total cost,
        or NOT_CONNECTED if the candidates run out first. A graph with no
        vertices has no spanning tree and reports NOT_CONNECTED; a single
        vertex is a tree with no edges.

    Complexity: O(E log E) for sorting plus near-linear union-find work.

    Example:
        >>> G = Graph.from_description(
        ...     ["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)]
        ... )
        >>> kruskal_mst(G).total_cost
        3
    """
    n = graph.vertex_count()
    if n == 0:
        logger.debug("Spanning tree requested for an empty graph")
        return SpanningTreeResult(TreeStatus.NOT_CONNECTED)

    forest = DisjointSet(n)
    accepted: List[TreeEdge] = []
    complete = n == 1

    for edge in sorted(flatten_edges(graph), key=edge_sort_key):
        if complete:
            break
        if forest.find(edge.from_index) == forest.find(edge.to_index):
            continue
        accepted.append(
            TreeEdge(graph.name_of(edge.from_index), graph.name_of(edge.to_index), edge.cost)
        )
        complete = forest.union(edge.from_index, edge.to_index)

    if not complete:
        logger.debug(
            "Graph is not connected: %d components remain", forest.component_count
        )
        return SpanningTreeResult(TreeStatus.NOT_CONNECTED)

    result = SpanningTreeResult(
        TreeStatus.TREE_FOUND, accepted, sum(edge.cost for edge in accepted)
    )

    if is_debug_enabled():
        assert_spanning_tree(graph, result)

    return result
