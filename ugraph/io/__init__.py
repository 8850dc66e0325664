"""Text I/O for ugraph.

Reads and writes graphs in a whitespace-delimited format: the vertex count,
then ``v1 v2`` pairs (or ``v1 v2 weight`` triples) until end of input.

Quick Start
-----------
>>> from ugraph.io import read_graph, read_weighted_graph, write_graph
>>>
>>> graph = read_graph("edges.txt")
>>> weighted = read_weighted_graph("weighted_edges.txt")
>>> write_graph(weighted, "copy.txt", weighted=True)
"""

from ._text import (
    iter_tokens,
    parse_graph,
    read_graph,
    read_weighted_graph,
    write_graph,
)

__all__ = [
    "iter_tokens",
    "parse_graph",
    "read_graph",
    "read_weighted_graph",
    "write_graph",
]
