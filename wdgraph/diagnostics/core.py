"""Validators and reference computations for graph algorithm results."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from typing import TYPE_CHECKING, Dict, List, Sequence

import numpy as np

from wdgraph.graphs.core import Graph
from wdgraph.graphs.utils import cost_matrix

if TYPE_CHECKING:
    from wdgraph.graphs.mst import SpanningTreeResult
    from wdgraph.graphs.shortest import ShortestPathResult


def _require_index(graph: Graph, name: str) -> int:
    index = graph.resolve_index(name)
    if index is None:
        raise ValueError(f"Vertex {name!r} is not in the graph.")
    return index


def assert_topological_order(graph: Graph, order: Sequence[str]) -> None:
    """
    Assert that ``order`` is a topological ordering of ``graph``.

    Parameters
    ----------
    graph:
        Graph the ordering was computed for.
    order:
        Vertex names.

    Raises
    ------
    ValueError
        If a vertex is missing or repeated, or some edge u -> v has v placed
        before (or at) u.
    """
    if len(order) != graph.vertex_count() or len(set(order)) != len(order):
        raise ValueError(
            f"Ordering must list each of the {graph.vertex_count()} vertices exactly once, "
            f"got {len(order)} entries."
        )

    position = {_require_index(graph, name): pos for pos, name in enumerate(order)}
    for from_index in range(graph.vertex_count()):
        for edge in graph.edges_of(from_index):
            if position[from_index] >= position[edge.to_index]:
                raise ValueError(
                    f"Edge {graph.name_of(from_index)} -> {graph.name_of(edge.to_index)} "
                    "violates the ordering."
                )


def path_cost(graph: Graph, names: Sequence[str]) -> int:
    """
    Compute the cost of a path, using the cheapest edge for each hop.

    Parameters
    ----------
    graph:
        Graph containing the path.
    names:
        Vertex names along the path. A single name is the empty path.

    Returns
    -------
    int
        Sum of the hop costs (0 for a single vertex).

    Raises
    ------
    ValueError
        If the path is empty or some hop has no edge.
    """
    if not names:
        raise ValueError("A path must contain at least one vertex.")

    total = 0
    indices = [_require_index(graph, name) for name in names]
    for from_index, to_index in zip(indices, indices[1:]):
        costs = [edge.cost for edge in graph.edges_of(from_index) if edge.to_index == to_index]
        if not costs:
            raise ValueError(
                f"No edge {graph.name_of(from_index)} -> {graph.name_of(to_index)} in the graph."
            )
        total += min(costs)
    return total


def assert_shortest_paths(graph: Graph, result: "ShortestPathResult") -> None:
    """
    Assert that a shortest-path result is internally consistent.

    Every reachable entry must carry a real path from the source whose cost
    equals the reported distance; unreachable entries must carry no path and
    an infinite distance. Optimality is not checked here; compare against
    :func:`relaxation_distances` for that.

    Raises
    ------
    ValueError
        If any entry is inconsistent.
    """
    if not result.found:
        return

    if list(result.entries) != graph.vertex_names():
        raise ValueError("Shortest-path result must have one entry per vertex.")

    source_entry = result.entries[result.source]
    if source_entry.distance != 0 or source_entry.path != [result.source]:
        raise ValueError(f"Source {result.source!r} must have distance 0 and a self path.")

    for name, entry in result.entries.items():
        if not entry.reachable:
            if entry.path is not None or not math.isinf(entry.distance):
                raise ValueError(f"Unreachable vertex {name!r} must have no path.")
            continue
        if entry.path is None or entry.path[0] != result.source or entry.path[-1] != name:
            raise ValueError(f"Path to {name!r} must run from {result.source!r} to {name!r}.")
        cost = path_cost(graph, entry.path)
        if cost != entry.distance:
            raise ValueError(
                f"Path to {name!r} costs {cost} but distance {entry.distance} was reported."
            )


def assert_spanning_tree(graph: Graph, result: "SpanningTreeResult") -> None:
    """
    Assert that a spanning-tree result is a spanning tree of ``graph``.

    Checks that there are vertex_count - 1 edges, each present in the graph
    with the stated cost, that they connect every vertex (hence form a tree)
    and that the total cost matches.

    Raises
    ------
    ValueError
        If any check fails.
    """
    if not result.found:
        return

    n = graph.vertex_count()
    if len(result.edges) != n - 1:
        raise ValueError(f"A spanning tree of {n} vertices needs {n - 1} edges, got {len(result.edges)}.")

    available = defaultdict(int)
    for from_name, to_name, cost in graph.edges():
        available[(from_name, to_name, cost)] += 1

    neighbours: Dict[int, List[int]] = defaultdict(list)
    for edge in result.edges:
        key = (edge.from_name, edge.to_name, edge.cost)
        if available[key] == 0:
            raise ValueError(f"Tree edge {key} is not an edge of the graph.")
        available[key] -= 1
        a = _require_index(graph, edge.from_name)
        b = _require_index(graph, edge.to_name)
        neighbours[a].append(b)
        neighbours[b].append(a)

    seen = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for nxt in neighbours[current]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    if len(seen) != n:
        raise ValueError("Tree edges do not connect every vertex.")

    if result.total_cost != sum(edge.cost for edge in result.edges):
        raise ValueError("Reported total cost does not match the tree edges.")


def relaxation_distances(graph: Graph, source: str) -> np.ndarray:
    """
    Reference single-source distances by dense min-plus relaxation.

    Runs Bellman-Ford style relaxation on the cost matrix: n - 1 rounds of
    ``d = min(d, min_i(d[i] + C[i, :]))``. Independent of the heap-based
    solver, so it can be used to check its optimality.

    Parameters
    ----------
    graph:
        Graph to evaluate.
    source:
        Source vertex name.

    Returns
    -------
    np.ndarray
        Float distances in vertex index order, ``inf`` where unreachable.

    Raises
    ------
    ValueError
        If ``source`` is not a vertex.
    """
    start = _require_index(graph, source)
    C = cost_matrix(graph)
    dist = np.full(graph.vertex_count(), np.inf)
    dist[start] = 0.0

    for _ in range(max(graph.vertex_count() - 1, 0)):
        updated = np.minimum(dist, (dist[:, None] + C).min(axis=0))
        if np.array_equal(updated, dist):
            break
        dist = updated

    return dist
