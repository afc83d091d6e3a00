"""Reading and writing the textual graph description format."""

from .text_format import (
    GraphDescription,
    dump_graph_file,
    export_graph_to_text,
    load_graph_file,
    load_graph_string,
    parse_graph_file,
    parse_graph_string,
)

__all__ = [
    "GraphDescription",
    "parse_graph_string",
    "parse_graph_file",
    "load_graph_string",
    "load_graph_file",
    "export_graph_to_text",
    "dump_graph_file",
]
