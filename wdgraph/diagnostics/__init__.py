"""Diagnostics and debugging utilities for wdgraph."""

from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .core import (
    assert_shortest_paths,
    assert_spanning_tree,
    assert_topological_order,
    path_cost,
    relaxation_distances,
)

__all__ = [
    "assert_topological_order",
    "assert_shortest_paths",
    "assert_spanning_tree",
    "path_cost",
    "relaxation_distances",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
