"""Example: Route Planning with wdgraph

Loads small road and flight networks from the text description format and
runs topological sort, Dijkstra shortest paths and Kruskal spanning trees.
"""

import os
import tempfile

import wdgraph as wg

ROADS = """\
# Four cities joined by one-way roads
4
springfield stlouis denver elpaso
5
springfield stlouis 2
stlouis denver 6
denver elpaso 5
elpaso springfield 7
elpaso stlouis 4
"""

FLIGHTS = [
    ("MCO", "LGA", 1099),
    ("MCO", "PVD", 1355),
    ("MCO", "LAX", 2360),
    ("LGA", "SFO", 2224),
    ("PVD", "LAX", 2400),
    ("LAX", "SFO", 400),
]


def example_road_network():
    """Example: Shortest driving routes between cities."""
    print("=" * 60)
    print("Example 1: Road Network")
    print("=" * 60)

    G = wg.load_graph_string(ROADS)
    wg.print_graph_summary(G)
    print()

    # One-way roads form a cycle, so there is no topological ordering
    wg.print_topological_sort(wg.topological_sort(G))
    print()

    wg.print_shortest_paths(wg.dijkstra(G, "springfield"))
    print()

    # Unknown cities are reported, not raised
    wg.print_shortest_paths(wg.dijkstra(G, "chicago"))
    print()


def example_flight_network():
    """Example: Cheapest set of flights connecting every airport."""
    print("=" * 60)
    print("Example 2: Flight Network")
    print("=" * 60)

    edges = []
    for a, b, miles in FLIGHTS:
        edges.append((a, b, miles))
        edges.append((b, a, miles))
    G = wg.Graph.from_description(["MCO", "LGA", "PVD", "LAX", "SFO"], edges)

    with wg.debug_context(True):
        tree = wg.kruskal_mst(G)
    wg.print_spanning_tree(tree)
    print()

    # Round trip through a description file
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "flights.txt")
        wg.dump_graph_file(G, path)
        reloaded = wg.load_graph_file(path)
    result = wg.dijkstra(reloaded, "MCO")
    print(f"MCO to SFO: {result.distance_to('SFO')} miles via {' --> '.join(result.path_to('SFO'))}")
    print()


def example_course_plan():
    """Example: Ordering courses by their prerequisites."""
    print("=" * 60)
    print("Example 3: Course Prerequisites")
    print("=" * 60)

    G = wg.Graph.from_description(
        ["intro", "data", "algo", "systems", "compilers", "capstone"],
        [
            ("intro", "data", 1),
            ("intro", "systems", 1),
            ("data", "algo", 1),
            ("algo", "compilers", 1),
            ("systems", "compilers", 1),
            ("compilers", "capstone", 1),
        ],
    )
    wg.print_topological_sort(wg.topological_sort(G))

    # A directed graph read as undirected connections still spans
    print(f"Spanning tree cost: {wg.kruskal_mst(G).total_cost}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Route Planning - wdgraph Examples")
    print("=" * 60 + "\n")

    example_road_network()
    example_flight_network()
    example_course_plan()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
