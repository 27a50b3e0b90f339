"""Edge-list parsers for the text graph formats read into CSR graphs.

Each parser expects a text stream positioned just after the file header.
It returns the coordinate (COO) edge list as ``(src, dst)`` tuples, or
``(src, dst, weight)`` tuples for the weighted formats. Vertex ids are
zero-based.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from csrgraph.algorithm import UniqueMap

__all__ = [
    "parse_market_edges",
    "parse_market_label_edges",
    "parse_dimacs9_edges",
    "parse_konect_edges",
    "parse_netrepo_edges",
    "parse_dimacs10_edges",
    "parse_snap_edges",
    "parse_weighted_market_edges",
    "parse_weighted_snap_edges",
]


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def next(self) -> str:
        """Return the next token, crossing line boundaries if needed."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise ValueError("unexpected end of input")
            self._pending = line.split()
            self._pending.reverse()
        return self._pending.pop()

    def next_int(self) -> int:
        return int(self.next())

    def skip_line(self) -> None:
        """Discard whatever is left of the current line."""
        self._pending = []

    def skip_comment_lines(self, prefix: str) -> None:
        """Drop whole lines starting with ``prefix`` before the next token."""
        if self._pending:
            return
        while True:
            line = self._stream.readline()
            if not line:
                return
            if not line.startswith(prefix):
                self._pending = line.split()
                self._pending.reverse()
                if self._pending:
                    return


def parse_market_edges(stream: TextIO, num_lines: int) -> list[tuple[int, int]]:
    """Read ``num_lines`` one-based ``src dst`` pairs of a Matrix Market body."""
    tokens = _Tokens(stream)
    edges = []
    for _ in range(num_lines):
        src = tokens.next_int()
        dst = tokens.next_int()
        edges.append((src - 1, dst - 1))
        tokens.skip_line()
    return edges


def parse_market_label_edges(stream: TextIO, num_lines: int) -> list[tuple[int, int]]:
    """Read ``num_lines`` pairs of vertex labels, numbering labels by first use."""
    tokens = _Tokens(stream)
    labels = UniqueMap()
    edges = []
    for _ in range(num_lines):
        label1 = tokens.next()
        label2 = tokens.next()
        edges.append((labels.insert(label1), labels.insert(label2)))
        tokens.skip_line()
    return edges


def parse_dimacs9_edges(stream: TextIO) -> list[tuple[int, int]]:
    """Read every ``a src dst ...`` arc line of a DIMACS 9th challenge file."""
    edges = []
    for line in stream:
        if not line.startswith("a"):
            continue
        fields = line.split()
        if len(fields) < 3:
            raise ValueError(f"malformed arc line: {line.rstrip()!r}")
        edges.append((int(fields[1]) - 1, int(fields[2]) - 1))
    return edges


def parse_konect_edges(stream: TextIO, num_lines: int) -> list[tuple[int, int]]:
    """Read ``num_lines`` one-based ``src dst`` pairs of a KONECT body."""
    tokens = _Tokens(stream)
    edges = []
    for _ in range(num_lines):
        src = tokens.next_int()
        dst = tokens.next_int()
        edges.append((src - 1, dst - 1))
    return edges


def parse_netrepo_edges(stream: TextIO) -> tuple[list[tuple[int, int]], int]:
    """Read one-based ``src,dst`` lines up to the end of the stream.

    Returns the edge list and the number of distinct vertex ids seen.
    """
    seen = UniqueMap()
    edges = []
    for line in stream:
        fields = line.replace(",", " ").split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"malformed edge line: {line.rstrip()!r}")
        src, dst = int(fields[0]), int(fields[1])
        seen.insert(src)
        seen.insert(dst)
        edges.append((src - 1, dst - 1))
    return edges, len(seen)


def parse_dimacs10_edges(stream: TextIO, num_lines: int) -> list[tuple[int, int]]:
    """Read ``num_lines`` adjacency lines; line ``i`` lists the neighbours of ``i``."""
    edges = []
    for src in range(num_lines):
        line = stream.readline()
        if not line:
            raise ValueError("unexpected end of input")
        edges.extend((src, int(token) - 1) for token in line.split())
    return edges


def parse_snap_edges(stream: TextIO, num_lines: int) -> list[tuple[int, int]]:
    """Read ``num_lines`` SNAP pairs after ``#`` comments, renumbering ids densely."""
    tokens = _Tokens(stream)
    tokens.skip_comment_lines("#")
    ids = UniqueMap()
    edges = []
    for _ in range(num_lines):
        v1 = tokens.next_int()
        v2 = tokens.next_int()
        edges.append((ids.insert(v1), ids.insert(v2)))
    return edges


def parse_weighted_market_edges(
    stream: TextIO, num_lines: int, weight_type: Callable = int
) -> list[tuple[int, int, object]]:
    """Read ``num_lines`` one-based ``src dst weight`` triples of a Matrix Market body."""
    tokens = _Tokens(stream)
    edges = []
    for _ in range(num_lines):
        src = tokens.next_int()
        dst = tokens.next_int()
        weight = weight_type(tokens.next())
        edges.append((src - 1, dst - 1, weight))
        tokens.skip_line()
    return edges


def parse_weighted_snap_edges(
    stream: TextIO, num_lines: int, weight_type: Callable = int
) -> list[tuple[int, int, object]]:
    """Read ``num_lines`` SNAP ``src dst weight`` triples, renumbering ids densely."""
    tokens = _Tokens(stream)
    tokens.skip_comment_lines("#")
    ids = UniqueMap()
    edges = []
    for _ in range(num_lines):
        v1 = tokens.next_int()
        v2 = tokens.next_int()
        weight = weight_type(tokens.next())
        edges.append((ids.insert(v1), ids.insert(v2), weight))
    return edges