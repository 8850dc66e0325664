"""Type classes for ugraph."""

from .math import UndirectedGraph

__all__ = [
    "UndirectedGraph",
]
