"""Undirected graph over integer vertices with matrix and list storage.

Vertices are labeled ``0..n-1``. Each edge is recorded in four places that are
always updated together:

- a boolean adjacency matrix, written only at ``[max(u, v), min(u, v)]``;
- per-vertex adjacency lists, in insertion order, mirrored on both endpoints;
- a weight matrix, mirrored at ``[u, v]`` and ``[v, u]``;
- per-vertex degree counters.
"""

from __future__ import annotations

import operator
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
import scipy.sparse as sparse

from ugraph.core.exceptions import InvalidVertexCountError, VertexOutOfRangeError
from ugraph.utils import get_logger

logger = get_logger()

__all__ = ["UndirectedGraph"]


class UndirectedGraph:
    """Simple undirected graph with O(1) edge tests and O(degree) traversal.

    Self-loops are ignored and inserting an edge that already exists, in
    either argument order, changes nothing (its first weight is kept). There
    is no single-edge removal; :meth:`clear` drops every edge at once.

    Attributes:
        n_vertices (int): Number of vertices, fixed for the graph's lifetime.

    Example:
        >>> g = UndirectedGraph(4)
        >>> g.add_edge(0, 1)
        True
        >>> g.add_edge_weight(2, 1, 2.5)
        True
        >>> g.is_connected(1, 0), g.weight(1, 2), g.weight(0, 3)
        (True, 2.5, None)
        >>> g.neighbors(1)
        (0, 2)
    """

    def __init__(self, n_vertices: int):
        """Creates a graph with ``n_vertices`` vertices and no edges.

        Args:
            n_vertices: Number of vertices. Must be a non-negative integer.

        Raises:
            InvalidVertexCountError: If ``n_vertices`` is negative or not an
                integer.
        """
        if isinstance(n_vertices, bool) or not isinstance(n_vertices, Integral):
            raise InvalidVertexCountError(n_vertices)
        if n_vertices < 0:
            raise InvalidVertexCountError(n_vertices)

        self.n_vertices = int(n_vertices)
        self._allocate()

        logger.debug(f"UndirectedGraph initialized: {self.n_vertices} vertices")

    @classmethod
    def from_tokens(cls, tokens, weighted: bool = False) -> UndirectedGraph:
        """Builds a graph from the whitespace-delimited load format.

        Args:
            tokens: Text, a text stream, or an iterable of lines. The first
                token is the vertex count, followed by ``v1 v2`` pairs (or
                ``v1 v2 weight`` triples when ``weighted``).
            weighted: Whether edges carry an explicit weight.

        Returns:
            UndirectedGraph: The populated graph.
        """
        # Delayed import, ugraph.io depends on this module
        from ugraph.io import parse_graph

        return parse_graph(tokens, weighted=weighted)

    @classmethod
    def from_edges(
        cls,
        edges: np.ndarray | Iterable[Tuple[int, int]] | Iterable[Tuple[int, int, float]],
        n_vertices: int,
        default_weight: float = 1.0,
    ) -> UndirectedGraph:
        """Builds a graph from an edge list.

        Args:
            edges: ``(u, v)`` or ``(u, v, weight)`` tuples, inserted in order,
                or an array of shape ``(n_edges, 2)`` or ``(n_edges, 3)``.
                Array vertex columns may be float as long as the values are
                whole numbers.
            n_vertices: Total number of vertices.
            default_weight: Weight for edges given without one.

        Raises:
            ValueError: If an edge has neither 2 nor 3 entries.
            VertexOutOfRangeError: If a vertex is not a whole number in
                ``[0, n_vertices)``.
        """
        if isinstance(edges, np.ndarray):
            edges = cls._edge_rows(edges)

        graph = cls(n_vertices)
        for edge in edges:
            if len(edge) == 2:
                graph.add_edge_weight(edge[0], edge[1], default_weight)
            elif len(edge) == 3:
                graph.add_edge_weight(*edge)
            else:
                raise ValueError(f"Edges must have 2 or 3 entries, got {len(edge)}")
        return graph

    @staticmethod
    def _edge_rows(edges_array: np.ndarray) -> List[tuple]:
        # Rows of a mixed vertex/weight array share one dtype, usually float64
        edges_array = np.asarray(edges_array)
        if edges_array.ndim == 1:
            if edges_array.size == 0:
                return []
            edges_array = edges_array.reshape(1, -1)
        if edges_array.ndim != 2 or edges_array.shape[1] not in (2, 3):
            raise ValueError(f"Edges must have 2 or 3 columns, got shape {edges_array.shape}")

        rows = []
        for row in edges_array.tolist():
            u, v = (int(x) if isinstance(x, float) and x.is_integer() else x for x in row[:2])
            rows.append((u, v, *row[2:]))
        return rows

    def _validate_vertex(self, v) -> int:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise VertexOutOfRangeError(v, self.n_vertices)
        v = operator.index(v)
        if v < 0 or v >= self.n_vertices:
            raise VertexOutOfRangeError(v, self.n_vertices)
        return v

    @staticmethod
    def _canonical(u: int, v: int) -> Tuple[int, int]:
        return (u, v) if u > v else (v, u)

    @property
    def n_edges(self) -> int:
        """Number of distinct undirected edges."""
        return self._n_edges

    def order(self) -> int:
        """Number of vertices."""
        return self.n_vertices

    def size(self) -> int:
        """Number of edges."""
        return self._n_edges

    def degree(self, v: int) -> int:
        """Number of edges incident to ``v``."""
        v = self._validate_vertex(v)
        return int(self._degrees[v])

    def add_edge(self, u: int, v: int) -> bool:
        """Adds edge ``{u, v}`` with weight 1.0. See :meth:`add_edge_weight`."""
        return self.add_edge_weight(u, v, 1.0)

    def add_edge_weight(self, u: int, v: int, weight: float) -> bool:
        """Adds edge ``{u, v}`` carrying ``weight``.

        Both vertices and the weight are checked before any storage is
        touched, so a failed call leaves the graph unchanged.

        Args:
            u: One endpoint.
            v: The other endpoint.
            weight: Edge weight, anything ``float()`` accepts.

        Returns:
            bool: True if the edge was inserted, False if it was a self-loop
            or already present.

        Raises:
            VertexOutOfRangeError: If ``u`` or ``v`` is not in
                ``[0, n_vertices)``.
        """
        u = self._validate_vertex(u)
        v = self._validate_vertex(v)
        weight = float(weight)

        if u == v:
            return False

        hi, lo = self._canonical(u, v)
        if self._adjacency[hi, lo]:
            return False

        self._adjacency[hi, lo] = True
        self._weights[u, v] = weight
        self._weights[v, u] = weight
        self._edges[u].append(v)
        self._edges[v].append(u)
        self._degrees[u] += 1
        self._degrees[v] += 1
        self._n_edges += 1
        return True

    def is_connected(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` share an edge. Symmetric in its arguments."""
        u = self._validate_vertex(u)
        v = self._validate_vertex(v)
        hi, lo = self._canonical(u, v)
        return bool(self._adjacency[hi, lo])

    def weight(self, u: int, v: int) -> Optional[float]:
        """Weight of edge ``{u, v}``, or None if the vertices are not connected."""
        if not self.is_connected(u, v):
            return None
        return float(self._weights[u, v])

    def neighbors(self, v: int) -> Tuple[int, ...]:
        """Neighbors of ``v`` in the order their edges were added."""
        v = self._validate_vertex(v)
        return tuple(self._edges[v])

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """Yields every edge once as ``(hi, lo, weight)`` with ``hi > lo``.

        Edges come out row by row of the lower triangle, so the order depends
        only on the edge set and not on insertion order.
        """
        for hi in range(self.n_vertices):
            for lo in np.flatnonzero(self._adjacency[hi, :hi]):
                lo = int(lo)
                yield hi, lo, float(self._weights[hi, lo])

    def to_adjacency_matrix(
        self,
        weighted: bool = False,
        sparse_fmt: bool = False,
    ) -> np.ndarray | sparse.csr_matrix:
        """Convert to a symmetric adjacency matrix (dense or sparse).

        Args:
            weighted: Fill connected cells with edge weights instead of True.
            sparse_fmt: Return a ``scipy.sparse.csr_matrix``.
        """
        mask = self._adjacency | self._adjacency.T
        if weighted:
            mat = np.where(mask, self._weights, 0.0)
        else:
            mat = mask

        if sparse_fmt:
            return sparse.csr_matrix(mat)
        return mat

    def clear(self) -> None:
        """Removes all edges, keeping the vertex count."""
        self._allocate()
        logger.debug(f"UndirectedGraph cleared: {self.n_vertices} vertices")

    def _allocate(self) -> None:
        n = self.n_vertices
        self._n_edges = 0
        self._degrees = np.zeros(n, dtype=np.int64)
        self._adjacency = np.zeros((n, n), dtype=bool)
        self._edges: List[List[int]] = [[] for _ in range(n)]
        self._weights = np.zeros((n, n), dtype=np.float64)

    def __len__(self) -> int:
        return self.n_vertices

    def __contains__(self, edge) -> bool:
        try:
            u, v = edge
            return self.is_connected(u, v)
        except (TypeError, ValueError, VertexOutOfRangeError):
            return False

    def __repr__(self) -> str:
        return f"UndirectedGraph(n_vertices={self.n_vertices}, n_edges={self._n_edges})"
