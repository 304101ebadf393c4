"""
Type definitions for graph ordering operations.

This module contains the custom types used throughout the library,
organized by their primary use cases.
"""

from collections.abc import Sequence
from typing import TypeAlias

# Graph representations
Vertex: TypeAlias = int  # Vertices are the integers 0..n-1
Edge: TypeAlias = tuple[Vertex, Vertex]  # Undirected, (u, v) and (v, u) are the same edge
Adjacency: TypeAlias = tuple[tuple[Vertex, ...], ...]  # adjacency[v] -> neighbors of v

# Orderings
Ordering: TypeAlias = tuple[Vertex, ...]  # ordering[step] -> vertex
InversePosition: TypeAlias = tuple[int, ...]  # position[vertex] -> step
OrderingLike: TypeAlias = Sequence[Vertex]

# Partition refinement
ClassId: TypeAlias = int  # Index of a class in the partition's arena
