"""Benchmark graph algorithms on random graphs."""

import time
from typing import Dict

import numpy as np

import wdgraph as wg


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> wg.Graph:
    """Build a symmetric random graph with a spanning path so it is connected."""
    rng = np.random.default_rng(seed)
    names = [f"v{i}" for i in range(n_vertices)]
    edges = []
    for i in range(n_vertices - 1):
        cost = int(rng.integers(1, 100))
        edges.append((names[i], names[i + 1], cost))
        edges.append((names[i + 1], names[i], cost))
    for _ in range(n_edges):
        a, b = (int(x) for x in rng.integers(0, n_vertices, size=2))
        cost = int(rng.integers(1, 100))
        edges.append((names[a], names[b], cost))
        edges.append((names[b], names[a], cost))
    return wg.Graph.from_description(names, edges)


def benchmark_algorithms(n_vertices: int, n_edges: int, n_repeats: int = 5) -> Dict[str, float]:
    """Benchmark topological sort, Dijkstra and Kruskal.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of random undirected connections (each stored twice).
        n_repeats: Number of timed runs per algorithm.

    Returns:
        Dictionary with mean timing results.
    """
    G = random_graph(n_vertices, n_edges)

    # Warmup
    wg.dijkstra(G, "v0")

    timings = {}
    for label, run in [
        ("topological_sort", lambda: wg.topological_sort(G)),
        ("dijkstra", lambda: wg.dijkstra(G, "v0")),
        ("kruskal_mst", lambda: wg.kruskal_mst(G)),
    ]:
        start = time.perf_counter()
        for _ in range(n_repeats):
            run()
        end = time.perf_counter()
        timings[f"{label}_sec"] = (end - start) / n_repeats

    return {"n_vertices": n_vertices, "n_edges": G.edge_count(), **timings}


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n in [100, 1000, 10000]:
        results = benchmark_algorithms(n_vertices=n, n_edges=4 * n)
        print(f"{n} vertices, {results['n_edges']} edges:")
        print(f"  Topological sort: {results['topological_sort_sec']*1e3:.2f} ms")
        print(f"  Dijkstra:         {results['dijkstra_sec']*1e3:.2f} ms")
        print(f"  Kruskal:          {results['kruskal_mst_sec']*1e3:.2f} ms")
