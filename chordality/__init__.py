"""
Lexicographic breadth-first search and chordality testing.

**Partition refinement** (partition.py)
    Ordered chain of disjoint vertex classes, refined in place.
    - PartitionRefinement(n): one class holding 0..n-1
    - pivot_front / mark_candidate / commit_splits

**LexBFS** (lexbfs.py)
    Linear-time lexicographic breadth-first search.
    - LexBfsEngine(graph).run() -> ordering
    - lexbfs(graph) -> ordering

**Perfect elimination orderings** (peo.py)
    Rose-Tarjan-Lueker chordality test on a LexBFS order.
    - ChordalityChecker(graph).is_chordal(ordering) -> bool
    - is_chordal(graph, ordering=None) -> bool
    - perfect_elimination_ordering(graph) -> ordering | None
"""

from .lexbfs import (
    LexBfsEngine,
    lexbfs,
)
from .partition import (
    PartitionClass,
    PartitionRefinement,
    VertexLocator,
)
from .peo import (
    ChordalityChecker,
    is_chordal,
    perfect_elimination_ordering,
)

__all__ = [
    # Partition refinement
    "PartitionClass",
    "PartitionRefinement",
    "VertexLocator",
    # LexBFS
    "LexBfsEngine",
    "lexbfs",
    # Chordality
    "ChordalityChecker",
    "is_chordal",
    "perfect_elimination_ordering",
]
