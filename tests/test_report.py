"""Tests for graph and result reports."""

import io

from wdgraph.graphs import Graph, dijkstra, kruskal_mst, topological_sort
from wdgraph.report import (
    format_shortest_paths,
    format_spanning_tree,
    format_topological_sort,
    graph_summary,
    print_graph_summary,
    print_shortest_paths,
    print_spanning_tree,
    print_topological_sort,
)


def test_format_topological_sort():
    """Test a found ordering."""
    G = Graph.from_description(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1)])
    assert format_topological_sort(topological_sort(G)) == "Topological Sort:\nA --> B --> C"


def test_format_topological_sort_cycle(cycle_graph):
    """Test the cycle message."""
    text = format_topological_sort(topological_sort(cycle_graph))
    assert text == "Topological Sort:\nThis graph cannot be topologically sorted."


def test_format_shortest_paths():
    """Test reachable and unreachable lines."""
    G = Graph.from_description(["A", "B", "C"], [("A", "B", 4)])
    text = format_shortest_paths(dijkstra(G, "A"))
    assert text.splitlines() == [
        "Shortest paths from A:",
        "  A: 0 (A)",
        "  B: 4 (A --> B)",
        "  C: no path",
    ]


def test_format_shortest_paths_unknown_source(cycle_graph):
    """Test the unknown source message."""
    assert format_shortest_paths(dijkstra(cycle_graph, "Q")) == "Vertex 'Q' is not in the graph."


def test_format_spanning_tree(triangle_graph):
    """Test tree edges and total."""
    text = format_spanning_tree(kruskal_mst(triangle_graph))
    assert text.splitlines() == [
        "Minimum Spanning Tree:",
        "  X -- Y (1)",
        "  Y -- Z (2)",
        "Total cost: 3",
    ]


def test_format_spanning_tree_not_connected():
    """Test the disconnected message."""
    G = Graph.from_description(["A", "B"], [])
    assert format_spanning_tree(kruskal_mst(G)).splitlines()[1] == (
        "This graph is not connected; no spanning tree exists."
    )


def test_print_variants_write_to_file(cycle_graph, triangle_graph):
    """Test that print_* write the formatted text plus a newline."""
    out = io.StringIO()
    print_topological_sort(topological_sort(cycle_graph), file=out)
    print_shortest_paths(dijkstra(cycle_graph, "A"), file=out)
    print_spanning_tree(kruskal_mst(triangle_graph), file=out)

    expected = "\n".join(
        [
            format_topological_sort(topological_sort(cycle_graph)),
            format_shortest_paths(dijkstra(cycle_graph, "A")),
            format_spanning_tree(kruskal_mst(triangle_graph)),
        ]
    )
    assert out.getvalue() == expected + "\n"


def test_print_defaults_to_stdout(capsys, cycle_graph):
    """Test that print_* use stdout when no file is given."""
    print_topological_sort(topological_sort(cycle_graph))
    assert "cannot be topologically sorted" in capsys.readouterr().out


def test_graph_summary_empty():
    """Test summary of an empty graph."""
    summary = graph_summary(Graph())
    assert summary == {
        "n_vertices": 0,
        "n_edges": 0,
        "n_self_loops": 0,
        "n_parallel_edges": 0,
        "min_cost": None,
        "max_cost": None,
    }


def test_graph_summary_counts():
    """Test self-loop and parallel edge counts."""
    G = Graph.from_description(
        ["A", "B"], [("A", "B", 3), ("A", "B", 5), ("A", "B", 1), ("B", "B", 0), ("B", "A", 9)]
    )
    summary = graph_summary(G)
    assert summary["n_vertices"] == 2
    assert summary["n_edges"] == 5
    assert summary["n_self_loops"] == 1
    assert summary["n_parallel_edges"] == 2
    assert summary["min_cost"] == 0
    assert summary["max_cost"] == 9


def test_print_graph_summary(cycle_graph):
    """Test that print_graph_summary writes its lines."""
    out = io.StringIO()
    print_graph_summary(cycle_graph, file=out)
    output = out.getvalue()
    assert "Graph Summary" in output
    assert "Vertices: 4" in output
    assert "Edges: 5" in output
    assert "Cost range: 2 .. 7" in output
