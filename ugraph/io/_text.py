"""Reader and writer for the whitespace-delimited graph format.

The format is a flat token stream: the vertex count first, then one record per
edge until the input runs out. Records are ``v1 v2`` pairs, or ``v1 v2 weight``
triples for weighted graphs. Any whitespace, newlines included, separates
tokens; there are no comments or headers.

Loading is all-or-nothing. The graph is built privately and only returned once
the whole stream has been consumed, so a malformed or truncated input never
leaves a half-populated graph behind.
"""

import re
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Tuple, Union

from ugraph.core.config import LoaderConfig
from ugraph.core.exceptions import (
    InvalidVertexCountError,
    MalformedTokenError,
    TruncatedInputError,
    UGraphError,
    VertexOutOfRangeError,
)
from ugraph.types.math import UndirectedGraph
from ugraph.utils import get_logger

logger = get_logger()

__all__ = [
    "iter_tokens",
    "parse_graph",
    "read_graph",
    "read_weighted_graph",
    "write_graph",
]

TextSource = Union[str, IO[str], Iterable[str]]
Token = Tuple[str, int]

# ASCII-only number syntax. int() and float() also take "1_0" and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def iter_tokens(source: TextSource) -> Iterator[Token]:
    """Split text into whitespace-delimited tokens.

    Args:
        source: A string, an open text stream, or any iterable of lines.

    Yields:
        Tuple[str, int]: Each token with its 1-based position in the stream.
    """
    lines = source.splitlines() if isinstance(source, str) else source

    position = 0
    for line in lines:
        for token in line.split():
            position += 1
            yield token, position


def _parse_int(token: str, position: int) -> int:
    if not _INT_RE.fullmatch(token):
        raise MalformedTokenError(token, "an integer vertex", position)
    return int(token)


def _parse_float(token: str, position: int) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise MalformedTokenError(token, "a floating-point weight", position)
    return float(token)


def _build(tokens: Iterator[Token], weighted: bool, default_weight: float) -> UndirectedGraph:
    first = next(tokens, None)
    if first is None:
        raise TruncatedInputError("Input is empty, expected a vertex count", 1)

    count_token, _ = first
    if not _INT_RE.fullmatch(count_token):
        raise InvalidVertexCountError(count_token)
    n_vertices = int(count_token)

    graph = UndirectedGraph(n_vertices)
    record_len = 3 if weighted else 2
    record = []
    skipped = 0

    for token, position in tokens:
        if len(record) < 2:
            record.append((_parse_int(token, position), position))
        else:
            record.append((_parse_float(token, position), position))

        if len(record) < record_len:
            continue

        (u, u_pos), (v, v_pos) = record[0], record[1]
        weight = record[2][0] if weighted else default_weight
        record = []

        try:
            inserted = graph.add_edge_weight(u, v, weight)
        except VertexOutOfRangeError as e:
            bad_pos = u_pos if e.vertex == u else v_pos
            raise VertexOutOfRangeError(e.vertex, e.n_vertices, bad_pos) from None

        if not inserted:
            skipped += 1

    if record:
        raise TruncatedInputError(
            f"Input ended inside an edge record: got {len(record)} of {record_len} values",
            record[-1][1],
        )

    if skipped:
        logger.debug(f"Ignored {skipped} duplicate or self-loop edge record(s)")

    return graph


def parse_graph(
    source: TextSource,
    weighted: Optional[bool] = None,
    config: Optional[LoaderConfig] = None,
) -> UndirectedGraph:
    """Build a graph from text in the load format.

    Args:
        source: A string, an open text stream, or any iterable of lines.
        weighted: Read ``v1 v2 weight`` triples. Overrides ``config.weighted``
            when given.
        config: Loader options. Defaults to ``LoaderConfig()``.

    Returns:
        UndirectedGraph: The populated graph.

    Raises:
        InvalidVertexCountError: If the first token is not a non-negative
            integer.
        MalformedTokenError: If a vertex or weight token does not parse, or
            the stream is not valid text in its encoding.
        TruncatedInputError: If the input is empty or ends mid-record.
        VertexOutOfRangeError: If an edge names a vertex outside
            ``[0, n)``.

    Example:
        >>> g = parse_graph("4\\n0 1\\n1 2\\n2 3\\n")
        >>> g.order(), g.size(), g.degree(1)
        (4, 3, 2)
    """
    if config is None:
        config = LoaderConfig()
    if weighted is None:
        weighted = config.weighted

    try:
        return _build(iter_tokens(source), weighted, config.default_weight)
    except UnicodeDecodeError as e:
        error = MalformedTokenError(e.object[e.start : e.end], f"{e.encoding} text")
        logger.warning(f"Graph load aborted: {error}")
        raise error from e
    except UGraphError as e:
        logger.warning(f"Graph load aborted: {e}")
        raise


def read_graph(path: str | Path, config: Optional[LoaderConfig] = None) -> UndirectedGraph:
    """Read a graph from a file in the load format.

    Reads pairs unless ``config.weighted`` is set.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if config is None:
        config = LoaderConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    logger.debug(f"Reading graph file: {path}")

    with open(path, "r", encoding=config.encoding) as f:
        graph = parse_graph(f, config=config)

    logger.info(f"Graph loaded from {path}: {graph.order()} vertices, {graph.size()} edges")
    return graph


def read_weighted_graph(path: str | Path, config: Optional[LoaderConfig] = None) -> UndirectedGraph:
    """Read a graph whose edges are ``v1 v2 weight`` triples."""
    if config is None:
        config = LoaderConfig(weighted=True)
    elif not config.weighted:
        config = LoaderConfig.from_dict({**config.to_dict(), "weighted": True})

    return read_graph(path, config=config)


def write_graph(
    graph: UndirectedGraph,
    target: str | Path | IO[str],
    weighted: bool = False,
    encoding: str = "utf-8",
    default_weight: float = 1.0,
) -> None:
    """Write a graph in the load format.

    The vertex count goes on the first line, then one edge per line in the
    order of :meth:`UndirectedGraph.edges`. Reading the output back gives the
    same edge set and weights, but neighbor order follows the written order
    rather than the original insertion order.

    Pairs carry no weight, so an unweighted write is refused when any edge
    weighs something other than ``default_weight``. Nothing is written in
    that case.

    Args:
        graph: Graph to write.
        target: File path, or an open text stream.
        weighted: Append each edge's weight to its line.
        encoding: Encoding used when ``target`` is a path.
        default_weight: Weight a reader assigns to pairs. Only checked when
            ``weighted`` is False.

    Raises:
        ValueError: If ``weighted`` is False and an edge weight differs from
            ``default_weight``.
    """
    if not weighted:
        dropped = sum(1 for _, _, w in graph.edges() if w != default_weight)
        if dropped:
            raise ValueError(
                f"{dropped} edge(s) have weights other than {default_weight!r}; "
                "write with weighted=True to keep them"
            )

    if hasattr(target, "write"):
        _write_records(graph, target, weighted)
        return

    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding) as f:
        _write_records(graph, f, weighted)

    logger.info(f"Graph written to {path}: {graph.order()} vertices, {graph.size()} edges")


def _write_records(graph: UndirectedGraph, stream: IO[str], weighted: bool) -> None:
    stream.write(f"{graph.order()}\n")
    for u, v, weight in graph.edges():
        if weighted:
            stream.write(f"{u} {v} {weight!r}\n")
        else:
            stream.write(f"{u} {v}\n")
