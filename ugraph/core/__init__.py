"""Core components for ugraph.

Provides:
- Exceptions: the error taxonomy shared by the graph and its loader
- Config: flat JSON-backed settings base class
- LoaderConfig: options for the text loader
"""

from .config import Config, LoaderConfig
from .exceptions import (
    DataError,
    InvalidVertexCountError,
    MalformedTokenError,
    TruncatedInputError,
    UGraphError,
    ValidationError,
    VertexOutOfRangeError,
)

__all__ = [
    # Configuration
    "Config",
    "LoaderConfig",
    # Exceptions
    "UGraphError",
    "ValidationError",
    "DataError",
    "InvalidVertexCountError",
    "VertexOutOfRangeError",
    "MalformedTokenError",
    "TruncatedInputError",
]
