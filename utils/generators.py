"""
Small graph families, mostly for testing.

Families:
    path_graph(n)      - 0 - 1 - ... - (n-1)
    cycle_graph(n)     - path closed by the edge (n-1, 0)
    complete_graph(n)  - every pair of distinct vertices

Random trees:
    prufer_to_tree(sequence)          - Decode a Prüfer sequence
    random_labelled_tree(n, seed)     - Uniform over the n^(n-2) labelled trees
"""

import heapq
from collections.abc import Sequence

import numpy as np

from localtypes import Vertex
from utils.graph import Graph


def path_graph(n: int) -> Graph:
    return Graph.from_edges(n, ((v, v + 1) for v in range(n - 1)))


def cycle_graph(n: int) -> Graph:
    """Cycle on n >= 3 vertices."""
    if n < 3:
        raise ValueError(f"A simple cycle needs at least 3 vertices, got {n}")
    return Graph.from_edges(n, ((v, (v + 1) % n) for v in range(n)))


def complete_graph(n: int) -> Graph:
    return Graph.from_edges(n, ((u, v) for u in range(n) for v in range(u + 1, n)))


def prufer_to_tree(sequence: Sequence[Vertex]) -> Graph:
    """
    Decode a Prüfer sequence into the labelled tree it encodes.

    A sequence of length k describes a tree on n = k + 2 vertices. At each
    step the smallest remaining leaf is joined to the next entry.

    Raises:
        IndexError: if an entry lies outside [0, n).
    """
    n = len(sequence) + 2
    degree = [1] * n
    for vertex in sequence:
        if not 0 <= vertex < n:
            raise IndexError(f"Prüfer entry {vertex} out of range for {n} vertices")
        degree[vertex] += 1

    leaves = [v for v in range(n) if degree[v] == 1]
    heapq.heapify(leaves)

    edges = []
    for vertex in sequence:
        leaf = heapq.heappop(leaves)
        edges.append((vertex, leaf))
        degree[vertex] -= 1
        degree[leaf] -= 1
        if degree[vertex] == 1:
            heapq.heappush(leaves, vertex)

    last = heapq.heappop(leaves)
    edges.append((last, heapq.heappop(leaves)))
    return Graph.from_edges(n, edges)


def random_labelled_tree(n: int, seed: int | None = None) -> Graph:
    """
    Uniformly random labelled tree on n vertices.

    Trees are uniform among labelled trees, not among their shapes.
    """
    if n <= 1:
        return Graph.from_edges(n, ())
    rng = np.random.default_rng(seed)
    sequence = rng.integers(0, n, size=n - 2).tolist()
    return prufer_to_tree(sequence)
