"""Pytest configuration and shared fixtures for wdgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph fixtures
- Small named graphs reused across test modules
- A factory for random graphs with non-negative integer costs
"""

import os
from typing import Callable

import numpy as np
import pytest

from wdgraph.diagnostics import set_debug_enabled
from wdgraph.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def cycle_graph() -> Graph:
    """A -> B -> C -> D -> A with a chord D -> B."""
    return Graph.from_description(
        ["A", "B", "C", "D"],
        [("A", "B", 2), ("B", "C", 6), ("C", "D", 5), ("D", "A", 7), ("D", "B", 4)],
    )


@pytest.fixture
def triangle_graph() -> Graph:
    """Symmetric triangle X, Y, Z whose minimum spanning tree costs 3."""
    return Graph.from_description(
        ["X", "Y", "Z"],
        [
            ("X", "Y", 1),
            ("Y", "X", 1),
            ("Y", "Z", 2),
            ("Z", "Y", 2),
            ("X", "Z", 10),
            ("Z", "X", 10),
        ],
    )


@pytest.fixture
def airport_graph() -> Graph:
    """Symmetric flight distances between five airports."""
    routes = [
        ("MCO", "LGA", 1099),
        ("MCO", "PVD", 1355),
        ("MCO", "LAX", 2360),
        ("LGA", "SFO", 2224),
        ("PVD", "LAX", 2400),
        ("LAX", "SFO", 400),
    ]
    edges = []
    for a, b, cost in routes:
        edges.append((a, b, cost))
        edges.append((b, a, cost))
    return Graph.from_description(["MCO", "LGA", "PVD", "LAX", "SFO"], edges)


@pytest.fixture
def dag_graph() -> Graph:
    """Course prerequisites forming a DAG."""
    return Graph.from_description(
        ["intro", "data", "algo", "systems", "compilers", "capstone"],
        [
            ("intro", "data", 1),
            ("intro", "systems", 1),
            ("data", "algo", 1),
            ("algo", "compilers", 1),
            ("systems", "compilers", 1),
            ("compilers", "capstone", 1),
            ("algo", "capstone", 1),
        ],
    )


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random graphs with vertices v0..v{n-1}.

    Args of the returned callable:
        n: Number of vertices.
        m: Number of directed edges (parallel edges and self-loops allowed).
        max_cost: Costs are drawn uniformly from [0, max_cost].
        symmetric: If True, each drawn edge is added in both directions.
    """

    def make(n: int, m: int, max_cost: int = 20, symmetric: bool = False) -> Graph:
        names = [f"v{i}" for i in range(n)]
        edges = []
        for _ in range(m):
            a, b = (int(x) for x in rng.integers(0, n, size=2))
            cost = int(rng.integers(0, max_cost + 1))
            edges.append((names[a], names[b], cost))
            if symmetric:
                edges.append((names[b], names[a], cost))
        return Graph.from_description(names, edges)

    return make
