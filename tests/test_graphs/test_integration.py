"""Integration tests for the graphs package within wdgraph."""


# Test that graphs integrates properly with the main wdgraph package
def test_graphs_import_from_main():
    """Test that graph types and algorithms can be imported from wdgraph."""
    from wdgraph import Graph, dijkstra, kruskal_mst, topological_sort

    assert Graph is not None
    assert dijkstra is not None
    assert kruskal_mst is not None
    assert topological_sort is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import wdgraph

    graph_exports = {
        "Graph",
        "VertexIndex",
        "Edge",
        "topological_sort",
        "dijkstra",
        "kruskal_mst",
        "DisjointSet",
        "reconstruct_path",
        "cost_matrix",
        "SortStatus",
        "PathStatus",
        "TreeStatus",
    }

    all_exports = set(wdgraph.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"


def test_graphs_no_circular_imports():
    """Test that importing graphs and diagnostics in either order works."""
    from wdgraph.diagnostics import assert_spanning_tree, relaxation_distances
    from wdgraph.graphs import Graph, dijkstra

    G = Graph.from_description(["A", "B"], [("A", "B", 3)])
    assert dijkstra(G, "A").distance_to("B") == 3
    assert relaxation_distances(G, "A")[1] == 3
    assert assert_spanning_tree is not None


def test_load_then_run_everything():
    """Test loading from text and running all three algorithms on one graph."""
    from wdgraph import (
        SortStatus,
        dijkstra,
        kruskal_mst,
        load_graph_string,
        topological_sort,
    )

    G = load_graph_string(
        """
        4
        springfield stlouis denver elpaso
        5
        springfield stlouis 2
        stlouis denver 6
        denver elpaso 5
        elpaso springfield 7
        elpaso stlouis 4
        """
    )

    assert topological_sort(G).status is SortStatus.CYCLE_DETECTED

    paths = dijkstra(G, "springfield")
    assert paths.distance_to("elpaso") == 13
    assert paths.path_to("elpaso") == ["springfield", "stlouis", "denver", "elpaso"]

    tree = kruskal_mst(G)
    assert tree.found
    assert tree.total_cost == 11
