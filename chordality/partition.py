"""
Partition refinement over the vertices of a graph.

The structure holds the not-yet-visited vertices as an ordered chain of
disjoint classes. Each class is a contiguous segment of vertices sharing
the same lexicographic signature, and earlier classes in the chain take
priority over later ones.

Classes live in an arena (a growable list) and refer to each other by
index, with NO_CLASS as the absent-marker. Classes split but never merge,
so at most one class is created per pivot per touched class, and no more
than n classes exist over a whole run.

Operations:
    pivot_front()      - Remove and return the first vertex of the head class
    mark_candidate(u)  - Move u to the marked tail of its class
    commit_splits()    - Split every touched class, marked part first

Example:
    >>> partition = PartitionRefinement(3)
    >>> partition.pivot_front()
    0
    >>> partition.mark_candidate(2)
    >>> partition.commit_splits()
    >>> partition.classes()
    ((2,), (1,))
"""

import logging
from dataclasses import dataclass

from constants import NO_CLASS
from localtypes import ClassId, Vertex

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PartitionClass:
    """
    A run of unvisited vertices with identical signatures.

    The live vertices are items[:size]. Entries past size are vertices
    that were pivoted out of this class or relocated to a newer class.
    """

    items: list[Vertex]
    size: int
    prev: ClassId = NO_CLASS
    next: ClassId = NO_CLASS


@dataclass(slots=True)
class VertexLocator:
    """Where a vertex currently sits: owning class and index in its items."""

    owner: ClassId
    position: int


class PartitionRefinement:
    """
    Ordered partition of the unvisited vertices 0..n-1.

    Marked counts only exist between a scan's first mark_candidate and the
    following commit_splits, in the touched mapping.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")

        self._classes: list[PartitionClass] = []
        self._locators: list[VertexLocator] = [VertexLocator(0, v) for v in range(n)]
        self._visited: list[bool] = [False] * n
        self._touched: dict[ClassId, int] = {}
        self._remaining = n

        if n:
            self._classes.append(PartitionClass(list(range(n)), n))
            self._head: ClassId = 0
            self._tail: ClassId = 0
        else:
            self._head = self._tail = NO_CLASS

    def __len__(self) -> int:
        """Number of unvisited vertices."""
        return self._remaining

    @property
    def class_count(self) -> int:
        """Number of classes created so far, exhausted ones included."""
        return len(self._classes)

    @property
    def head(self) -> ClassId:
        return self._head

    @property
    def tail(self) -> ClassId:
        return self._tail

    def is_visited(self, vertex: Vertex) -> bool:
        return self._visited[vertex]

    def locate(self, vertex: Vertex) -> VertexLocator:
        return self._locators[vertex]

    def classes(self) -> tuple[tuple[Vertex, ...], ...]:
        """Live segments of every class, in priority order."""
        segments = []
        current = self._head
        while current != NO_CLASS:
            cls = self._classes[current]
            segments.append(tuple(cls.items[: cls.size]))
            current = cls.next
        return tuple(segments)

    def _swap(self, cls: PartitionClass, i: int, j: int) -> None:
        """Exchange two slots of a class and keep both locators in sync."""
        if i == j:
            return
        a, b = cls.items[i], cls.items[j]
        cls.items[i], cls.items[j] = b, a
        self._locators[a].position = j
        self._locators[b].position = i

    def pivot_front(self) -> Vertex:
        """
        Remove the first vertex of the head class from the live set.

        The pivot is swapped to the end of the live segment and the class
        shrinks by one. An exhausted head class is unlinked and its
        successor becomes the head.

        Raises:
            IndexError: if every vertex has already been visited.
        """
        if self._head == NO_CLASS:
            raise IndexError("pivot_front called on an exhausted partition")

        head = self._classes[self._head]
        pivot = head.items[0]
        self._swap(head, 0, head.size - 1)
        head.size -= 1
        self._visited[pivot] = True
        self._remaining -= 1

        if head.size == 0:
            successor = head.next
            head.next = NO_CLASS
            if successor == NO_CLASS:
                self._tail = NO_CLASS
            else:
                self._classes[successor].prev = NO_CLASS
            self._head = successor

        return pivot

    def mark_candidate(self, vertex: Vertex) -> None:
        """
        Move an unvisited vertex into the marked tail of its class.

        Visited vertices are skipped, as are vertices alone in their class,
        which cannot be split any further. Marking a vertex twice within one
        scan (a parallel edge) leaves it marked once.
        """
        if self._visited[vertex]:
            return

        locator = self._locators[vertex]
        cls = self._classes[locator.owner]
        if cls.size == 1:
            return

        marked = self._touched.get(locator.owner, 0)
        # The marked sub-segment is items[size - marked : size]
        boundary = cls.size - marked - 1
        if locator.position > boundary:
            return
        self._swap(cls, locator.position, boundary)
        self._touched[locator.owner] = marked + 1

    def commit_splits(self) -> None:
        """
        Split every class touched since the last commit.

        The marked vertices form a new class inserted right before the
        class they came from: they were adjacent to the latest pivot, so
        their signature is lexicographically greater. A class whose every
        vertex was marked keeps its place unchanged.
        """
        for class_id, marked in self._touched.items():
            cls = self._classes[class_id]
            if marked == cls.size:
                continue

            start = cls.size - marked
            segment = cls.items[start : cls.size]
            new_id = len(self._classes)
            self._classes.append(PartitionClass(segment, marked, cls.prev, class_id))
            for position, vertex in enumerate(segment):
                locator = self._locators[vertex]
                locator.owner = new_id
                locator.position = position

            if cls.prev == NO_CLASS:
                self._head = new_id
            else:
                self._classes[cls.prev].next = new_id
            cls.prev = new_id
            cls.size = start

            logger.debug(f"Split class {class_id}: {marked} vertices moved to class {new_id}")

        self._touched.clear()
