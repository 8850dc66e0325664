"""ugraph: an in-memory undirected graph over integer vertices.

ugraph provides:
- UndirectedGraph, backed by an adjacency matrix for O(1) edge tests and
  per-vertex adjacency lists for O(degree) traversal
- A reader and writer for a whitespace-delimited edge-list format
- A shared error taxonomy, JSON-serializable loader config and package logger
"""

__version__ = "1.0.0"

from . import core, io, types, utils

from .core import (
    DataError,
    InvalidVertexCountError,
    LoaderConfig,
    MalformedTokenError,
    TruncatedInputError,
    UGraphError,
    ValidationError,
    VertexOutOfRangeError,
)
from .io import parse_graph, read_graph, read_weighted_graph, write_graph
from .types import UndirectedGraph

__all__ = [
    # Version
    "__version__",
    # Types
    "UndirectedGraph",
    # I/O
    "parse_graph",
    "read_graph",
    "read_weighted_graph",
    "write_graph",
    # Config
    "LoaderConfig",
    # Exceptions
    "UGraphError",
    "ValidationError",
    "DataError",
    "InvalidVertexCountError",
    "VertexOutOfRangeError",
    "MalformedTokenError",
    "TruncatedInputError",
    # Modules
    "core",
    "io",
    "types",
    "utils",
]
