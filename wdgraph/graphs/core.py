"""
Core graph data structures.

Provides VertexIndex (name <-> dense index table) and Graph, a weighted
directed graph stored as an adjacency list indexed by vertex. Graphs are
bulk-loaded from vertex names and (from_name, to_name, cost) triples; a load
replaces the previous graph as a whole.

Complexity:
    - VertexIndex.resolve: O(1) expected
    - Graph.load: O(V + E)
    - Graph.edges_of: O(deg(v))
"""

from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from wdgraph.exceptions import DuplicateVertexError, GraphLoadError, UnresolvedVertexError
from wdgraph.logging import get_logger

logger = get_logger(__name__)

EdgeTriple = Tuple[str, str, int]


class Edge(NamedTuple):
    """Outgoing edge stored in the adjacency list of its source vertex."""

    to_index: int
    cost: int


class VertexIndex:
    """
    Bidirectional mapping between vertex names and indices 0..n-1.

    Indices follow declaration order and never change for the lifetime of
    the table.

    Raises:
        DuplicateVertexError: If a name appears more than once.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: List[str] = []
        self._index: Dict[str, int] = {}

        for name in names:
            if name in self._index:
                raise DuplicateVertexError(name)
            self._index[name] = len(self._names)
            self._names.append(name)

    def resolve(self, name: str) -> Optional[int]:
        """
        Return the index of ``name``, or None if it is not in the table.

        Never raises for unknown names; callers use the None result to
        detect malformed edges.
        """
        return self._index.get(name)

    def name_of(self, index: int) -> str:
        """
        Return the name stored at ``index``.

        Raises:
            IndexError: If index is outside [0, len).
        """
        if not 0 <= index < len(self._names):
            raise IndexError(f"Vertex index {index} out of range (0..{len(self._names) - 1})")
        return self._names[index]

    def names(self) -> List[str]:
        """Return all names in index order (a copy)."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"VertexIndex({self._names!r})"


class Graph:
    """
    Weighted directed graph with adjacency-list representation.

    Parallel edges between the same ordered pair are kept as distinct
    entries and self-loops are ordinary edges. The graph is only ever
    replaced wholesale through :meth:`load`; algorithms read it and never
    mutate it.

    Attributes:
        adjacency: List indexed by source vertex of its outgoing edges, in
            load order.

    Example:
        >>> G = Graph.from_description(["A", "B"], [("A", "B", 3)])
        >>> G.edges_of(G.resolve_index("A"))
        (Edge(to_index=1, cost=3),)
    """

    def __init__(self):
        """Initialize an empty graph."""
        self._vertices = VertexIndex()
        self.adjacency: List[List[Edge]] = []

    @classmethod
    def from_description(
        cls, vertex_names: Iterable[str], edges: Iterable[EdgeTriple]
    ) -> "Graph":
        """Create a graph and load it from names and edge triples."""
        graph = cls()
        graph.load(vertex_names, edges)
        return graph

    def load(self, vertex_names: Iterable[str], edges: Iterable[EdgeTriple]) -> None:
        """
        Replace the graph with the given vertices and edges.

        Every endpoint name is resolved before the adjacency structure is
        built, and the new state is committed only once the whole description
        has been validated. On failure the previously loaded graph is left
        exactly as it was.

        Args:
            vertex_names: Unique vertex names, in index order.
            edges: (from_name, to_name, cost) triples. Costs must be ints.

        Raises:
            DuplicateVertexError: If a vertex name is repeated.
            UnresolvedVertexError: If an edge names an unknown vertex.
            GraphLoadError: If an edge is not a triple or its cost is not an int.
        """
        try:
            vertices = VertexIndex(vertex_names)
            resolved = self._resolve_edges(vertices, edges)
        except GraphLoadError as exc:
            logger.warning("Rejected graph load: %s", exc)
            raise

        adjacency: List[List[Edge]] = [[] for _ in range(len(vertices))]
        for from_index, to_index, cost in resolved:
            adjacency[from_index].append(Edge(to_index, cost))

        self._vertices = vertices
        self.adjacency = adjacency
        logger.debug("Loaded graph with %d vertices and %d edges", len(vertices), len(resolved))

    @staticmethod
    def _resolve_edges(
        vertices: VertexIndex, edges: Iterable[EdgeTriple]
    ) -> List[Tuple[int, int, int]]:
        resolved = []
        for position, edge in enumerate(edges):
            try:
                from_name, to_name, cost = edge
            except (TypeError, ValueError):
                raise GraphLoadError(
                    f"Edge {position} must be a (from, to, cost) triple, got {edge!r}"
                ) from None

            if isinstance(cost, bool) or not isinstance(cost, int):
                raise GraphLoadError(
                    f"Edge {position} ({from_name} -> {to_name}) has non-integer cost {cost!r}"
                )

            from_index = vertices.resolve(from_name)
            if from_index is None:
                raise UnresolvedVertexError(from_name, position)
            to_index = vertices.resolve(to_name)
            if to_index is None:
                raise UnresolvedVertexError(to_name, position)

            resolved.append((from_index, to_index, cost))
        return resolved

    def resolve_index(self, name: str) -> Optional[int]:
        """Return the index of vertex ``name``, or None if absent."""
        return self._vertices.resolve(name)

    def name_of(self, index: int) -> str:
        """Return the name of the vertex at ``index``."""
        return self._vertices.name_of(index)

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def vertex_names(self) -> List[str]:
        """Return vertex names in index order."""
        return self._vertices.names()

    def edge_count(self) -> int:
        """Return the number of edges, counting parallel edges separately."""
        return sum(len(out) for out in self.adjacency)

    def edges_of(self, index: int) -> Tuple[Edge, ...]:
        """
        Return the outgoing edges of vertex ``index`` in load order.

        Raises:
            IndexError: If index is not a valid vertex index.
        """
        if not 0 <= index < len(self.adjacency):
            raise IndexError(f"Vertex index {index} out of range")
        return tuple(self.adjacency[index])

    def edges(self) -> List[EdgeTriple]:
        """
        Return every edge as a (from_name, to_name, cost) triple.

        Edges are grouped by source index and keep load order within a
        source, so the result reproduces the loaded edge multiset.
        """
        names = self._vertices.names()
        return [
            (names[from_index], names[edge.to_index], edge.cost)
            for from_index, out in enumerate(self.adjacency)
            for edge in out
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
