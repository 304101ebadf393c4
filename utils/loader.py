"""
Module used to read graphs from, and write answers to, the text protocol.

Input: a header line "n m" followed by m lines "u v", each an undirected
edge between 0-indexed vertices. Any whitespace separates the tokens.

Output: either the LexBFS order on one line, or the chordality verdict.
"""

import logging
import os
from typing import TextIO

import numpy as np

from constants import CHORDAL, NOT_CHORDAL
from localtypes import OrderingLike
from utils.graph import Graph

logger = logging.getLogger(__name__)


def parse_graph(text: str) -> Graph:
    """
    Parse a graph from its textual description.

    Raises:
        ValueError: on missing or non-integer tokens, or negative counts.
        IndexError: on an edge endpoint outside [0, n).
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Expected a header 'n m'")

    try:
        values = np.array(tokens, dtype=np.int64)
    except ValueError as error:
        raise ValueError(f"Graph input contains a non-integer token: {error}") from error

    n, m = int(values[0]), int(values[1])
    if n < 0 or m < 0:
        raise ValueError(f"Counts must be non-negative, got n={n}, m={m}")

    body = values[2:]
    if len(body) < 2 * m:
        raise ValueError(f"Expected {m} edges, found {len(body) // 2}")
    if len(body) > 2 * m:
        logger.warning(f"Ignoring {len(body) - 2 * m} tokens after the last edge")

    edges = body[: 2 * m].reshape(m, 2)
    out_of_range = (edges < 0) | (edges >= n)
    if out_of_range.any():
        row = int(np.argmax(out_of_range.any(axis=1)))
        u, v = edges[row]
        raise IndexError(f"Edge {row} ({u}, {v}) out of range for {n} vertices")

    return Graph.from_edges(n, edges.tolist())


def read_graph(source: str | os.PathLike | TextIO) -> Graph:
    """Read a graph from a file path or an open text stream."""
    if hasattr(source, "read"):
        return parse_graph(source.read())
    with open(source, "r") as file:
        return parse_graph(file.read())


def format_ordering(ordering: OrderingLike) -> str:
    return " ".join(str(vertex) for vertex in ordering) + "\n"


def format_chordality(chordal: bool) -> str:
    return (CHORDAL if chordal else NOT_CHORDAL) + "\n"
