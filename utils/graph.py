"""
Undirected graphs over the vertices 0..n-1.

A Graph is built once from its edge list and never modified afterwards.
Each undirected edge appears in the neighbor sequence of both endpoints,
in input order, which fixes the neighbor iteration order used by LexBFS.

The algorithms assume a simple graph (no self-loops, no parallel edges).
This is a caller precondition: such edges are stored as given.
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from localtypes import Adjacency, Edge, Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Graph:
    """Immutable undirected adjacency structure."""

    adjacency: Adjacency
    edge_list: tuple[Edge, ...]

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """
        Build a graph on n vertices from undirected edges.

        Args:
            n: Number of vertices.
            edges: Pairs (u, v) with 0 <= u, v < n.

        Returns:
            Graph: the adjacency structure.

        Raises:
            ValueError: if n is negative.
            IndexError: if an endpoint lies outside [0, n).
        """
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")

        neighbors: list[list[Vertex]] = [[] for _ in range(n)]
        edge_list: list[Edge] = []
        for u, v in edges:
            u, v = int(u), int(v)
            # Negative indices would silently wrap around
            if not (0 <= u < n and 0 <= v < n):
                raise IndexError(f"Edge ({u}, {v}) out of range for {n} vertices")
            neighbors[u].append(v)
            neighbors[v].append(u)
            edge_list.append((u, v))

        logger.debug(f"Graph built: {n} vertices, {len(edge_list)} edges")
        return cls(tuple(tuple(row) for row in neighbors), tuple(edge_list))

    def __len__(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        return len(self.edge_list)

    def vertices(self) -> range:
        return range(len(self.adjacency))

    def neighbors(self, vertex: Vertex) -> tuple[Vertex, ...]:
        return self.adjacency[vertex]

    def edges(self) -> Iterator[Edge]:
        """Yields each undirected edge once, in input order."""
        return iter(self.edge_list)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        # Scan the shorter side
        if len(self.adjacency[u]) > len(self.adjacency[v]):
            u, v = v, u
        return v in self.adjacency[u]


def connected_components(graph: Graph) -> frozenset[frozenset[Vertex]]:
    """
    Extract the connected components of an undirected graph.

    Args:
        graph: The graph to decompose.

    Returns:
        frozenset[frozenset[Vertex]]: set of connected components of the graph
    """

    seen: set[Vertex] = set()
    components: set[frozenset[Vertex]] = set()

    # Guarantees all the vertices are at least visited once
    for vertex in graph.vertices():
        # Avoid visiting an already seen component
        if vertex in seen:
            continue

        component = {vertex}
        seen.add(vertex)
        # Breadth-first traversal
        queue = deque([vertex])
        while queue:
            current = queue.popleft()
            for neighbor in graph.neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    component.add(neighbor)
                    queue.append(neighbor)

        components.add(frozenset(component))
    return frozenset(components)
