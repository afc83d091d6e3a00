"""wdgraph - weighted directed graphs with topological sort, Dijkstra and Kruskal."""

__version__ = "0.1.0"

# Graph algorithms
from .graphs import (
    INFINITY,
    DisjointSet,
    Edge,
    Graph,
    PathEntry,
    PathStatus,
    ShortestPathResult,
    SortStatus,
    SpanningTreeResult,
    TopologicalSortResult,
    TreeEdge,
    TreeStatus,
    VertexIndex,
    cost_matrix,
    dijkstra,
    kruskal_mst,
    reconstruct_path,
    topological_sort,
)

# Diagnostics
from .diagnostics import (
    assert_shortest_paths,
    assert_spanning_tree,
    assert_topological_order,
    debug_context,
    is_debug_enabled,
    path_cost,
    relaxation_distances,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    DuplicateVertexError,
    GraphFormatError,
    GraphLoadError,
    UnresolvedVertexError,
    WdgraphError,
)

# Text format I/O
from .io import (
    GraphDescription,
    dump_graph_file,
    export_graph_to_text,
    load_graph_file,
    load_graph_string,
    parse_graph_file,
    parse_graph_string,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Reports
from .report import (
    format_shortest_paths,
    format_spanning_tree,
    format_topological_sort,
    graph_summary,
    print_graph_summary,
    print_shortest_paths,
    print_spanning_tree,
    print_topological_sort,
)

__all__ = [
    # Version
    "__version__",
    # Graph model
    "Graph",
    "VertexIndex",
    "Edge",
    # Topological sort
    "topological_sort",
    "SortStatus",
    "TopologicalSortResult",
    # Shortest paths
    "dijkstra",
    "INFINITY",
    "PathStatus",
    "PathEntry",
    "ShortestPathResult",
    "reconstruct_path",
    # Minimum spanning tree
    "kruskal_mst",
    "DisjointSet",
    "TreeStatus",
    "TreeEdge",
    "SpanningTreeResult",
    "cost_matrix",
    # Diagnostics
    "assert_topological_order",
    "assert_shortest_paths",
    "assert_spanning_tree",
    "path_cost",
    "relaxation_distances",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "WdgraphError",
    "GraphLoadError",
    "UnresolvedVertexError",
    "DuplicateVertexError",
    "GraphFormatError",
    # Text format I/O
    "GraphDescription",
    "parse_graph_string",
    "parse_graph_file",
    "load_graph_string",
    "load_graph_file",
    "export_graph_to_text",
    "dump_graph_file",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Reports
    "format_topological_sort",
    "format_shortest_paths",
    "format_spanning_tree",
    "graph_summary",
    "print_topological_sort",
    "print_shortest_paths",
    "print_spanning_tree",
    "print_graph_summary",
]
