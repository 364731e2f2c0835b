import pytest

from algobasics.sorting import (
    count_inversions,
    heap_smallest,
    kth_smallest,
    merge_sort,
    quick_sort,
)

SAMPLES = [
    [],
    [7],
    [3, 1, 2, 3, 1],
    [5, 4, 3, 2, 1],
    list(range(20)),
    [(i * 37) % 101 - 50 for i in range(200)],
    [2] * 15,
]


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_matches_sorted(values):
    original = list(values)
    assert quick_sort(values) == sorted(values)
    assert values == original


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_inversions_example():
    assert count_inversions([2, 3, 4, 5, 6, 1]) == 5


@pytest.mark.parametrize("n", [1, 2, 10, 57])
def test_inversions_of_reversed_run(n):
    assert count_inversions(range(n, 0, -1)) == n * (n - 1) // 2
    assert count_inversions(range(n)) == 0


def test_inversions_ignore_equal_values():
    assert count_inversions([4] * 9) == count_inversions([])


@pytest.mark.parametrize("values", [v for v in SAMPLES if v])
def test_kth_smallest_matches_sorted(values):
    ordered = sorted(values)
    for k in range(1, len(values) + 1):
        assert kth_smallest(values, k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([1, 2, 3], k)


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_smallest_prefix(values):
    for m in range(len(values) + 1):
        assert heap_smallest(values, m) == sorted(values)[:m]


def test_heap_smallest_too_many():
    with pytest.raises(ValueError):
        heap_smallest([1, 2], 3)