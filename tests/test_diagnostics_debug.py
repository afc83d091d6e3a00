"""Tests for debug mode functionality."""

import pytest

import wdgraph.graphs.mst as mst_module
import wdgraph.graphs.shortest as shortest_module
from wdgraph.diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from wdgraph.graphs import (
    CandidateEdge,
    PathRecord,
    dijkstra,
    kruskal_mst,
    topological_sort,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    # Back to previous (False in this block)
    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    # Back to True
    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test that the previous mode is restored when the block raises."""
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_valid_results_pass_in_debug_mode(cycle_graph, dag_graph, airport_graph) -> None:
    """Test that correct results are accepted by the debug checks."""
    with debug_context(True):
        assert topological_sort(dag_graph).found
        assert dijkstra(cycle_graph, "A").distance_to("D") == 13
        assert kruskal_mst(airport_graph).total_cost == 5078


def test_corrupted_path_table_caught_in_debug_mode(cycle_graph, monkeypatch) -> None:
    """Test that an inconsistent shortest-path table fails in debug mode only."""

    def bad_table(graph, source):
        table = [PathRecord(True, 0, None)] + [PathRecord(True, 1, 0) for _ in range(3)]
        return table

    monkeypatch.setattr(shortest_module, "shortest_path_table", bad_table)

    # Without debug mode the wrong distance goes unnoticed
    assert dijkstra(cycle_graph, "A").distance_to("C") == 1

    with debug_context(True):
        with pytest.raises(ValueError, match="costs 2 but distance 1"):
            dijkstra(cycle_graph, "A")


def test_corrupted_tree_caught_in_debug_mode(triangle_graph, monkeypatch) -> None:
    """Test that a tree built from edges not in the graph fails in debug mode."""

    def fake_edges(graph):
        return [CandidateEdge(0, 1, 1), CandidateEdge(1, 2, 99)]

    monkeypatch.setattr(mst_module, "flatten_edges", fake_edges)

    assert kruskal_mst(triangle_graph).total_cost == 100

    with debug_context(True):
        with pytest.raises(ValueError, match="is not an edge of the graph"):
            kruskal_mst(triangle_graph)
