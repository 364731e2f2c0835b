import random

import pytest

from algobasics.spanning import is_bipartite, kruskal, max_bipartite_matching, prim

EXAMPLE = [(1, 2, 1), (1, 3, 2), (1, 4, 3), (2, 3, 2), (3, 4, 4)]


def _random_graph(seed, n, m):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n), rng.randint(-5, 20)) for _ in range(m)]


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_example_spanning_tree_weight(algorithm):
    assert algorithm(4, EXAMPLE) == 6


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_disconnected_graph_has_no_tree(algorithm):
    assert algorithm(4, [(1, 2, 1), (3, 4, 1)]) is None


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_single_node_weighs_nothing(algorithm):
    assert algorithm(1, []) == 0


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_tree_weight_is_sum_of_its_edges(algorithm):
    edges = [(1, 2, 7), (2, 3, -4), (2, 4, 9), (4, 5, 3)]
    assert algorithm(5, edges) == sum(w for _, _, w in edges)


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_parallel_edges_keep_lightest(algorithm):
    assert algorithm(2, [(1, 2, 10), (2, 1, 3), (1, 2, 8)]) == 3


@pytest.mark.parametrize("seed", range(20))
def test_prim_and_kruskal_agree(seed):
    edges = _random_graph(seed, 7, 12)
    assert prim(7, edges) == kruskal(7, edges)


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_spanning_rejects_unknown_node(algorithm):
    with pytest.raises(ValueError):
        algorithm(3, [(1, 4, 1)])


def test_even_cycle_is_bipartite():
    assert is_bipartite(4, [(1, 3), (1, 4), (2, 3), (2, 4)]) is True


def test_odd_cycle_is_not_bipartite():
    assert is_bipartite(3, [(1, 2), (2, 3), (3, 1)]) is False


def test_self_loop_is_not_bipartite():
    assert is_bipartite(2, [(1, 2), (2, 2)]) is False


def test_odd_cycle_in_second_component_is_found():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    assert is_bipartite(5, edges) is False


def test_graph_without_edges_is_bipartite():
    assert is_bipartite(5, []) is True


def test_bipartite_rejects_unknown_node():
    with pytest.raises(ValueError):
        is_bipartite(2, [(0, 1)])


def test_matching_example():
    assert max_bipartite_matching(2, 2, [(1, 1), (1, 2), (2, 1), (2, 2)]) == 2


@pytest.mark.parametrize("n1,n2", [(1, 4), (3, 3), (5, 2), (4, 6)])
def test_complete_bipartite_matching(n1, n2):
    edges = [(a, b) for a in range(1, n1 + 1) for b in range(1, n2 + 1)]
    assert max_bipartite_matching(n1, n2, edges) == min(n1, n2)


def test_matching_needs_augmenting_path():
    edges = [(1, 1), (1, 2), (2, 1)]
    assert max_bipartite_matching(2, 2, edges) == 2


def test_matching_without_edges_is_empty():
    assert max_bipartite_matching(3, 3, []) == 0


def test_matching_shared_right_node():
    edges = [(1, 1), (2, 1), (3, 1)]
    assert max_bipartite_matching(3, 1, edges) == 1


@pytest.mark.parametrize("seed", range(10))
def test_matching_bounded_by_sides_and_edges(seed):
    rng = random.Random(seed)
    edges = [(rng.randint(1, 6), rng.randint(1, 5)) for _ in range(8)]
    size = max_bipartite_matching(6, 5, edges)
    assert 1 <= size <= min(6, 5, len({a for a, _ in edges}), len({b for _, b in edges}))


def test_matching_rejects_unknown_node():
    with pytest.raises(ValueError):
        max_bipartite_matching(2, 2, [(1, 3)])


def test_matching_rejects_negative_count():
    with pytest.raises(ValueError):
        max_bipartite_matching(-1, 2, [])