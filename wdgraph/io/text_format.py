"""Textual graph description reader and writer.

The description is a stream of whitespace-separated tokens:

    <vertex count n>
    <name 1> ... <name n>
    <edge count m>
    <from 1> <to 1> <cost 1>
    ...
    <from m> <to m> <cost m>

Line breaks are not significant, costs are integers and ``#`` starts a
comment running to the end of the line. Example::

    4
    springfield
    stlouis
    denver
    elpaso
    5
    springfield stlouis 2
    stlouis denver 6
    denver elpaso 5
    elpaso springfield 7
    elpaso stlouis 4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from wdgraph.exceptions import GraphFormatError
from wdgraph.graphs.core import EdgeTriple, Graph
from wdgraph.logging import get_logger

from .utils import parse_cost, parse_count, strip_comments

logger = get_logger(__name__)


@dataclass
class GraphDescription:
    """
    Parsed, not yet resolved graph description.

    Attributes:
        vertex_names: Names in declaration order.
        edges: (from_name, to_name, cost) triples in declaration order.
    """

    vertex_names: List[str] = field(default_factory=list)
    edges: List[EdgeTriple] = field(default_factory=list)


class _TokenStream:
    """Cursor over the token list that reports truncation precisely."""

    def __init__(self, tokens: List[str]):
        self.tokens = tokens
        self.position = 0

    def next(self, what: str) -> str:
        if self.position >= len(self.tokens):
            raise GraphFormatError(
                f"Unexpected end of input: expected {what} at token {self.position}."
            )
        token = self.tokens[self.position]
        self.position += 1
        return token


def parse_graph_string(text: str) -> GraphDescription:
    """
    Parse a textual graph description.

    Parameters
    ----------
    text : str
        Description text.

    Returns
    -------
    GraphDescription
        Vertex names and edge triples, unvalidated against each other.

    Raises
    ------
    GraphFormatError
        If a count or cost is malformed, the input is truncated, or tokens
        remain after the last edge.
    """
    stream = _TokenStream(strip_comments(text))

    n_vertices = parse_count(stream.next("a vertex count"), "a vertex count", stream.position - 1)
    names = [stream.next(f"vertex name {i + 1} of {n_vertices}") for i in range(n_vertices)]

    n_edges = parse_count(stream.next("an edge count"), "an edge count", stream.position - 1)
    edges: List[EdgeTriple] = []
    for i in range(n_edges):
        label = f"edge {i + 1} of {n_edges}"
        from_name = stream.next(f"the source vertex of {label}")
        to_name = stream.next(f"the target vertex of {label}")
        cost = parse_cost(stream.next(f"the cost of {label}"), stream.position - 1)
        edges.append((from_name, to_name, cost))

    if stream.position != len(stream.tokens):
        raise GraphFormatError(
            f"Unexpected trailing input at token {stream.position}: "
            f"{stream.tokens[stream.position]!r}."
        )

    return GraphDescription(names, edges)


def parse_graph_file(path: str) -> GraphDescription:
    """
    Parse a textual graph description file.

    Parameters
    ----------
    path : str
        Path to the description file.

    Returns
    -------
    GraphDescription
        Parsed description.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    GraphFormatError
        If the file cannot be decoded or is malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph description file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphFormatError(f"Error reading graph description file {path}: {e}") from e

    return parse_graph_string(content)


def load_graph_string(text: str, graph: Optional[Graph] = None) -> Graph:
    """
    Parse a description and load it into a graph.

    Parameters
    ----------
    text : str
        Description text.
    graph : Graph, optional
        Graph to reload. Its previous contents are replaced only if the
        whole description parses and resolves. A new graph is created when
        omitted.

    Returns
    -------
    Graph
        The loaded graph.

    Raises
    ------
    GraphLoadError
        If the description is malformed or references unknown vertices.
    """
    description = parse_graph_string(text)
    if graph is None:
        graph = Graph()
    graph.load(description.vertex_names, description.edges)
    return graph


def load_graph_file(path: str, graph: Optional[Graph] = None) -> Graph:
    """
    Read a description file and load it into a graph.

    See :func:`load_graph_string` for the reload contract.
    """
    description = parse_graph_file(path)
    if graph is None:
        graph = Graph()
    graph.load(description.vertex_names, description.edges)
    logger.debug("Loaded graph description from %s", path)
    return graph


def export_graph_to_text(graph: Graph) -> str:
    """
    Write a graph in the textual description format.

    Vertex names and edges are written one per line, edges grouped by source
    vertex in load order, so loading the output reproduces the graph.

    Parameters
    ----------
    graph : Graph
        Graph to export.

    Returns
    -------
    str
        Description text ending in a newline.

    Raises
    ------
    GraphFormatError
        If a vertex name is empty or contains whitespace or ``#`` and so
        could not be read back as a single token.
    """
    for name in graph.vertex_names():
        if "#" in name or name.split() != [name]:
            raise GraphFormatError(f"Vertex name {name!r} cannot be written as a single token.")

    lines = [str(graph.vertex_count())]
    lines.extend(graph.vertex_names())

    edges = graph.edges()
    lines.append(str(len(edges)))
    lines.extend(f"{from_name} {to_name} {cost}" for from_name, to_name, cost in edges)

    return "\n".join(lines) + "\n"


def dump_graph_file(graph: Graph, path: str) -> None:
    """Write :func:`export_graph_to_text` output to ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(export_graph_to_text(graph))
