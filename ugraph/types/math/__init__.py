from ._undirected import UndirectedGraph

__all__ = [
    "UndirectedGraph",
]
