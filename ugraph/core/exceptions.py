"""Custom exceptions for ugraph.

This module defines all custom exceptions raised by the graph and its loader.
"""


class UGraphError(Exception):
    """Base exception class for all ugraph errors."""

    pass


class ValidationError(UGraphError):
    """Raised when an argument passed to the graph fails validation."""

    pass


class DataError(UGraphError):
    """Raised when input data handed to the loader cannot be used.

    Carries the 1-based position of the offending token when known.
    """

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)
        self.position = position


class InvalidVertexCountError(ValidationError, ValueError):
    """Raised when a graph is sized with a negative or non-integer count.

    Examples
    --------
    >>> from ugraph import UndirectedGraph
    >>> UndirectedGraph(-1)
    Traceback (most recent call last):
    ...
    ugraph.core.exceptions.InvalidVertexCountError: Vertex count must be a non-negative integer, got -1
    """

    def __init__(self, value):
        super().__init__(f"Vertex count must be a non-negative integer, got {value!r}")
        self.value = value


class VertexOutOfRangeError(ValidationError, IndexError):
    """Raised when a vertex argument falls outside ``[0, n_vertices)``.

    Negative indices are rejected rather than wrapped.
    """

    def __init__(self, vertex, n_vertices: int, position: int | None = None):
        message = f"Vertex {vertex!r} out of range [0, {n_vertices})"
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)
        self.vertex = vertex
        self.n_vertices = n_vertices
        self.position = position


class MalformedTokenError(DataError, ValueError):
    """Raised when a token does not parse as the expected number.

    Bytes that fail to decode are reported with ``token`` set to the raw bytes.
    """

    def __init__(self, token: str | bytes, expected: str, position: int | None = None):
        super().__init__(f"Expected {expected}, got {token!r}", position)
        self.token = token
        self.expected = expected


class TruncatedInputError(DataError):
    """Raised when the token stream ends in the middle of a record."""

    pass
