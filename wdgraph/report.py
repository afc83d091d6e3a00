"""Human-readable reports for graphs and algorithm results.

The ``format_*`` functions return text for programmatic use; the ``print_*``
variants write the same text to a file (stdout by default).
"""

from __future__ import annotations

import sys
from typing import IO, Any, Dict, Optional

from wdgraph.graphs.core import Graph
from wdgraph.graphs.mst import SpanningTreeResult
from wdgraph.graphs.shortest import ShortestPathResult
from wdgraph.graphs.topological import TopologicalSortResult

PATH_ARROW = " --> "


def format_topological_sort(result: TopologicalSortResult) -> str:
    """
    Render a topological sort result.

    Parameters
    ----------
    result:
        Result of :func:`~wdgraph.graphs.topological_sort`.

    Returns
    -------
    str
        ``Topological Sort:`` followed by the ordering joined with arrows, or
        a line stating that the graph cannot be sorted.
    """
    lines = ["Topological Sort:"]
    if result.found:
        lines.append(PATH_ARROW.join(result.order))
    else:
        lines.append("This graph cannot be topologically sorted.")
    return "\n".join(lines)


def format_shortest_paths(result: ShortestPathResult) -> str:
    """
    Render a shortest-path result, one line per vertex.

    Reachable vertices show their distance and path, unreachable ones
    ``no path``.
    """
    if not result.found:
        return f"Vertex '{result.source}' is not in the graph."

    lines = [f"Shortest paths from {result.source}:"]
    for name, entry in result.entries.items():
        if entry.reachable:
            lines.append(f"  {name}: {entry.distance} ({PATH_ARROW.join(entry.path)})")
        else:
            lines.append(f"  {name}: no path")
    return "\n".join(lines)


def format_spanning_tree(result: SpanningTreeResult) -> str:
    """Render a spanning tree result with its edges and total cost."""
    lines = ["Minimum Spanning Tree:"]
    if not result.found:
        lines.append("This graph is not connected; no spanning tree exists.")
        return "\n".join(lines)

    for edge in result.edges:
        lines.append(f"  {edge.from_name} -- {edge.to_name} ({edge.cost})")
    lines.append(f"Total cost: {result.total_cost}")
    return "\n".join(lines)


def graph_summary(graph: Graph) -> Dict[str, Any]:
    """
    Generate a summary dictionary for a graph.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing:
        - n_vertices: int
        - n_edges: int
        - n_self_loops: int
        - n_parallel_edges: int (edges beyond the first per ordered pair)
        - min_cost / max_cost: int, or None for a graph without edges
    """
    edges = graph.edges()
    pairs = {(from_name, to_name) for from_name, to_name, _ in edges}
    costs = [cost for _, _, cost in edges]

    return {
        "n_vertices": graph.vertex_count(),
        "n_edges": len(edges),
        "n_self_loops": sum(1 for from_name, to_name, _ in edges if from_name == to_name),
        "n_parallel_edges": len(edges) - len(pairs),
        "min_cost": min(costs) if costs else None,
        "max_cost": max(costs) if costs else None,
    }


def _emit(text: str, file: Optional[IO[str]]) -> None:
    print(text, file=sys.stdout if file is None else file)


def print_topological_sort(result: TopologicalSortResult, file: Optional[IO[str]] = None) -> None:
    """Print :func:`format_topological_sort` output."""
    _emit(format_topological_sort(result), file)


def print_shortest_paths(result: ShortestPathResult, file: Optional[IO[str]] = None) -> None:
    """Print :func:`format_shortest_paths` output."""
    _emit(format_shortest_paths(result), file)


def print_spanning_tree(result: SpanningTreeResult, file: Optional[IO[str]] = None) -> None:
    """Print :func:`format_spanning_tree` output."""
    _emit(format_spanning_tree(result), file)


def print_graph_summary(graph: Graph, file: Optional[IO[str]] = None) -> None:
    """
    Pretty-print a graph summary to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use graph_summary() instead.
    """
    summary = graph_summary(graph)
    lines = [
        "Graph Summary",
        "=" * 50,
        f"Vertices: {summary['n_vertices']}",
        f"Edges: {summary['n_edges']}",
        f"Self-loops: {summary['n_self_loops']}",
        f"Parallel edges: {summary['n_parallel_edges']}",
    ]
    if summary["n_edges"]:
        lines.append(f"Cost range: {summary['min_cost']} .. {summary['max_cost']}")
    _emit("\n".join(lines), file)
