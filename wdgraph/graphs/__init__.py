"""
Graph algorithms package for wdgraph.

This package provides:
- Graph data structures (Graph, VertexIndex, Edge)
- Topological sorting (Kahn)
- Single-source shortest paths (lazy-deletion Dijkstra)
- Minimum spanning trees (Kruskal over DisjointSet)

Algorithms never modify the graph and report structural outcomes (cycles,
unreachable vertices, disconnected graphs) through tagged result objects.
Ties are broken by vertex index for reproducibility.
"""

from .core import Edge, Graph, VertexIndex
from .mst import DisjointSet, SpanningTreeResult, TreeEdge, TreeStatus, kruskal_mst
from .shortest import (
    INFINITY,
    PathEntry,
    PathRecord,
    PathStatus,
    ShortestPathResult,
    dijkstra,
    shortest_path_table,
)
from .topological import SortStatus, TopologicalSortResult, in_degrees, topological_sort
from .utils import (
    CandidateEdge,
    FrontierEntry,
    cost_matrix,
    edge_sort_key,
    flatten_edges,
    frontier_sort_key,
    reconstruct_path,
)

__all__ = [
    "Edge",
    "Graph",
    "VertexIndex",
    "topological_sort",
    "in_degrees",
    "SortStatus",
    "TopologicalSortResult",
    "dijkstra",
    "shortest_path_table",
    "INFINITY",
    "PathStatus",
    "PathRecord",
    "PathEntry",
    "ShortestPathResult",
    "kruskal_mst",
    "DisjointSet",
    "TreeStatus",
    "TreeEdge",
    "SpanningTreeResult",
    "FrontierEntry",
    "CandidateEdge",
    "frontier_sort_key",
    "edge_sort_key",
    "flatten_edges",
    "reconstruct_path",
    "cost_matrix",
]

# Example usage:
# from wdgraph.graphs import Graph, dijkstra
#
# G = Graph.from_description(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2)])
# result = dijkstra(G, "A")
# result.path_to("C")  # ['A', 'B', 'C']
