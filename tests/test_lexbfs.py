"""Tests for chordality/lexbfs.py"""

import random
from itertools import combinations

import pytest

from chordality import LexBfsEngine, lexbfs
from utils.generators import complete_graph, cycle_graph, path_graph, random_labelled_tree
from utils.graph import Graph


def random_graph(n: int, density: float, seed: int) -> Graph:
    rng = random.Random(seed)
    return Graph.from_edges(
        n, [(u, v) for u, v in combinations(range(n), 2) if rng.random() < density]
    )


def is_lexbfs_order(graph: Graph, ordering) -> bool:
    """
    Four-point condition: for a < b < c with ac in E and ab not in E,
    some d < a has db in E and dc not in E.
    """
    n = len(ordering)
    for i, j, k in combinations(range(n), 3):
        a, b, c = ordering[i], ordering[j], ordering[k]
        if graph.has_edge(a, c) and not graph.has_edge(a, b):
            if not any(
                graph.has_edge(ordering[h], b) and not graph.has_edge(ordering[h], c)
                for h in range(i)
            ):
                return False
    return True


class TestLexBfsEngine:
    def test_single_vertex(self):
        assert LexBfsEngine(Graph.from_edges(1, [])).run() == (0,)

    def test_empty_graph(self):
        assert LexBfsEngine(Graph.from_edges(0, [])).run() == ()

    def test_path(self):
        """0 - 1 - 2 - 3 is visited in order."""
        assert LexBfsEngine(path_graph(4)).run() == (0, 1, 2, 3)

    def test_disconnected(self):
        """Once 0 is exhausted, the search continues into another component."""
        graph = Graph.from_edges(4, [(2, 3)])
        assert LexBfsEngine(graph).run() == (0, 3, 2, 1)

    def test_cycle(self):
        assert LexBfsEngine(cycle_graph(4)).run() == (0, 3, 1, 2)

    def test_inverse_position(self):
        engine = LexBfsEngine(cycle_graph(5))
        order = engine.run()
        assert engine.order == order
        assert all(engine.position[v] == step for step, v in enumerate(order))

    def test_single_use(self):
        engine = LexBfsEngine(path_graph(3))
        engine.run()
        with pytest.raises(RuntimeError, match="single-use"):
            engine.run()

    def test_fresh_engines_agree(self):
        graph = random_graph(15, 0.3, seed=7)
        assert LexBfsEngine(graph).run() == LexBfsEngine(graph).run()
        assert lexbfs(graph) == LexBfsEngine(graph).run()

    def test_self_loop_does_not_crash(self):
        graph = Graph.from_edges(3, [(0, 0), (0, 1), (1, 2)])
        assert sorted(lexbfs(graph)) == [0, 1, 2]

    def test_parallel_edges_do_not_crash(self):
        graph = Graph.from_edges(4, [(0, 2), (0, 2), (2, 3)])
        assert sorted(lexbfs(graph)) == [0, 1, 2, 3]


class TestLexBfsProperties:
    @pytest.mark.parametrize("seed", range(25))
    def test_random_graph_permutation(self, seed):
        graph = random_graph(10, 0.35, seed)
        order = lexbfs(graph)
        assert sorted(order) == list(range(10))

    @pytest.mark.parametrize("seed", range(25))
    def test_random_graph_is_lexbfs(self, seed):
        graph = random_graph(9, 0.4, seed)
        assert is_lexbfs_order(graph, lexbfs(graph))

    @pytest.mark.parametrize("seed", range(10))
    def test_random_tree_is_lexbfs(self, seed):
        graph = random_labelled_tree(10, seed=seed)
        assert is_lexbfs_order(graph, lexbfs(graph))

    def test_complete_graph_keeps_initial_order_of_first(self):
        order = lexbfs(complete_graph(5))
        assert order[0] == 0
        assert sorted(order) == list(range(5))

    def test_oracle_rejects_non_lexbfs_order(self):
        """0 - 1 - 2 - 3: visiting 3 before 1 breaks the four-point condition."""
        assert not is_lexbfs_order(path_graph(4), (0, 2, 1, 3))
