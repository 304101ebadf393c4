"""
Chordality test by perfect elimination ordering verification.

A graph is chordal iff the reverse of any LexBFS order is a perfect
elimination ordering: for every vertex v, the neighbors of v visited
before it form a clique. Rose, Tarjan and Lueker check this in linear
time by comparing v's earlier neighbors with those of its parent p, the
latest-visited of them. The graph is chordal iff, for every v, all of
earlier(v) except p is adjacent to p.

The ordering handed to ChordalityChecker.is_chordal must be a LexBFS order
of that same graph. This is not checked: for any other ordering the answer
is undefined.
"""

from __future__ import annotations

import logging

from constants import UNPLACED
from localtypes import Ordering, OrderingLike, Vertex
from utils.graph import Graph

from .lexbfs import lexbfs

logger = logging.getLogger(__name__)


class ChordalityChecker:
    """Rose-Tarjan-Lueker test of a LexBFS order."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        # Elimination forest of the latest check
        self.parents: dict[Vertex, Vertex | None] = {}

    def is_chordal(self, ordering: OrderingLike) -> bool:
        """
        Decide whether the graph is chordal.

        Args:
            ordering: A LexBFS order of the graph.

        Returns:
            bool: True iff every vertex passes the parent test.
        """
        adjacency = self.graph.adjacency
        index = [UNPLACED] * len(self.graph)
        for step, vertex in enumerate(ordering):
            index[vertex] = step

        # attributed[u] == v once u has been counted in earlier(v)
        attributed = [UNPLACED] * len(self.graph)
        self.parents = {}

        for vertex in ordering:
            rank = index[vertex]
            parent_rank = UNPLACED
            size = 0
            for neighbor in adjacency[vertex]:
                if index[neighbor] < rank:
                    attributed[neighbor] = vertex
                    size += 1
                    parent_rank = max(parent_rank, index[neighbor])

            if parent_rank == UNPLACED:
                self.parents[vertex] = None
                continue

            parent = ordering[parent_rank]
            self.parents[vertex] = parent
            for neighbor in adjacency[parent]:
                if attributed[neighbor] == vertex:
                    size -= 1

            if size != 1:
                logger.debug(
                    f"Vertex {vertex} has earlier neighbors not adjacent to its parent {parent}"
                )
                return False

        return True


def is_chordal(graph: Graph, ordering: OrderingLike | None = None) -> bool:
    """
    Decide whether a graph is chordal.

    When no ordering is given, a LexBFS order is computed first.
    """
    if ordering is None:
        ordering = lexbfs(graph)
    return ChordalityChecker(graph).is_chordal(ordering)


def perfect_elimination_ordering(graph: Graph) -> Ordering | None:
    """
    A perfect elimination ordering of the graph, or None if it is not chordal.

    In the returned ordering, the neighbors of each vertex that come after
    it form a clique.
    """
    ordering = lexbfs(graph)
    if not ChordalityChecker(graph).is_chordal(ordering):
        return None
    return tuple(reversed(ordering))
