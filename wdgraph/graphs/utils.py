"""
Utility functions for graph algorithms.

Provides the records and explicit ordering keys used by the shortest-path
frontier and the spanning-tree edge sort, edge flattening, predecessor-chain
path reconstruction and a dense cost matrix view.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .core import Graph


class FrontierEntry(NamedTuple):
    """Candidate path reaching ``to_index`` via ``from_index`` at total ``cost``."""

    from_index: int
    to_index: int
    cost: int


class CandidateEdge(NamedTuple):
    """Directed edge considered by the spanning-tree builder."""

    from_index: int
    to_index: int
    cost: int


def frontier_sort_key(entry: FrontierEntry) -> Tuple[int, int, int]:
    """
    Total order for shortest-path frontier entries.

    Entries compare by accumulated cost, then target index, then source
    index, so equal-cost candidates pop in a reproducible order.

    Example:
        >>> entries = [FrontierEntry(0, 2, 5), FrontierEntry(3, 1, 5)]
        >>> [e.to_index for e in sorted(entries, key=frontier_sort_key)]
        [1, 2]
    """
    return entry.cost, entry.to_index, entry.from_index


def edge_sort_key(edge: CandidateEdge) -> Tuple[int, int, int]:
    """Total order for spanning-tree candidates: (cost, from_index, to_index)."""
    return edge.cost, edge.from_index, edge.to_index


def flatten_edges(graph: Graph) -> List[CandidateEdge]:
    """
    Flatten the adjacency structure into a list of candidate edges.

    Every directed edge appears once; parallel edges and both directions of
    a symmetric pair are all kept.

    Args:
        graph: Loaded graph.

    Returns:
        List of CandidateEdge in adjacency order (unsorted).
    """
    return [
        CandidateEdge(from_index, edge.to_index, edge.cost)
        for from_index in range(graph.vertex_count())
        for edge in graph.edges_of(from_index)
    ]


def reconstruct_path(
    predecessor: Sequence[Optional[int]], source: int, target: int
) -> List[int]:
    """
    Reconstruct the index path from ``source`` to ``target``.

    Walks predecessor links backwards from target until reaching the source,
    whose predecessor is None, then reverses.

    Args:
        predecessor: Predecessor per vertex index; None marks the source and
            vertices never reached.
        source: Source vertex index.
        target: Settled target vertex index.

    Returns:
        List of indices from source to target, inclusive. ``[source]`` when
        target is the source.

    Raises:
        ValueError: If the chain from target does not end at the source or
            revisits a vertex.

    Example:
        >>> reconstruct_path([None, 0, 1], 0, 2)
        [0, 1, 2]
    """
    path = [target]
    seen = {target}
    current = target
    while current != source:
        previous = predecessor[current]
        if previous is None:
            raise ValueError(f"Vertex {target} is not linked to source {source} by predecessors")
        if previous in seen:
            raise ValueError(f"Predecessor chain from vertex {target} contains a cycle")
        seen.add(previous)
        path.append(previous)
        current = previous

    path.reverse()
    return path


def cost_matrix(graph: Graph) -> np.ndarray:
    """
    Compute the dense (n, n) cost matrix of a graph.

    ``C[i, j]`` is the cheapest edge cost from i to j, ``inf`` when there is
    no edge. The diagonal is 0 unless a self-loop is cheaper.

    Args:
        graph: Loaded graph.

    Returns:
        Float numpy array in vertex index order.

    Example:
        >>> G = Graph.from_description(["A", "B"], [("A", "B", 4)])
        >>> float(cost_matrix(G)[0, 1])
        4.0
    """
    n = graph.vertex_count()
    C = np.full((n, n), np.inf)
    np.fill_diagonal(C, 0.0)

    for edge in flatten_edges(graph):
        if edge.cost < C[edge.from_index, edge.to_index]:
            C[edge.from_index, edge.to_index] = edge.cost

    return C
