import pytest

from algobasics.arrays import (
    apply_range_additions,
    count_merged_intervals,
    count_three_way_splits,
    covered_flags,
    discretized_range_sums,
    prefix_sums,
    range_sums,
    submatrix_sums,
)


def test_prefix_sums_invariants():
    values = [3, -1, 4, 1, -5, 9]
    sums = prefix_sums(values)
    assert len(sums) == len(values) + 1
    assert sums[0] == 0 and sums[-1] == sum(values)
    assert [b - a for a, b in zip(sums, sums[1:])] == values


def test_range_sums_match_slices():
    values = [2, 1, 3, 6, 4]
    queries = [(1, 2), (1, 3), (2, 4), (5, 5), (1, 5)]
    assert range_sums(values, queries) == [sum(values[l - 1:r]) for l, r in queries]


@pytest.mark.parametrize("query", [(0, 2), (3, 2), (1, 6)])
def test_range_sums_bad_query(query):
    with pytest.raises(IndexError):
        range_sums([1, 2, 3, 4, 5], [query])


def test_range_additions_example():
    ops = [(1, 3, 1), (3, 5, 1), (1, 6, 1)]
    assert apply_range_additions([1, 2, 2, 1, 2, 1], ops) == [3, 4, 5, 3, 4, 2]


def test_range_additions_whole_and_none():
    values = [5, -2, 0, 7]
    assert apply_range_additions(values, []) == values
    assert apply_range_additions(values, [(1, len(values), 10)]) == [v + 10 for v in values]


def test_range_additions_bad_range():
    with pytest.raises(IndexError):
        apply_range_additions([1, 2], [(2, 3, 1)])


def test_submatrix_sums_match_slices():
    matrix = [[1, 7, 2, 4], [3, 6, 2, 8], [2, 1, 2, 3]]
    queries = [(1, 1, 2, 2), (2, 1, 3, 4), (1, 3, 3, 4), (3, 2, 3, 2)]
    expected = [
        sum(sum(row[y1 - 1:y2]) for row in matrix[x1 - 1:x2])
        for x1, y1, x2, y2 in queries
    ]
    assert submatrix_sums(matrix, queries) == expected


def test_submatrix_sums_rejects_ragged():
    with pytest.raises(ValueError):
        submatrix_sums([[1, 2], [3]], [])


def test_three_way_split_example():
    assert count_three_way_splits([1, 2, 3, 0, 3]) == 2


def test_three_way_split_impossible_cases():
    assert count_three_way_splits([1, 2]) == count_three_way_splits([])
    assert count_three_way_splits([1, 1, 1, 1]) == count_three_way_splits([1])


def test_covered_flags_example():
    assert covered_flags([0, 3, 0, 0, 1, 3]) == [1, 1, 0, 1, 1, 1]


def test_covered_flags_zero_and_full():
    assert covered_flags([0] * 4) == [0] * 4
    assert covered_flags([1] * 4) == [1] * 4


def test_covered_flags_negative():
    with pytest.raises(ValueError):
        covered_flags([1, -1])


def test_discretized_example():
    additions = [(1, 2), (3, 6), (7, 5)]
    queries = [(1, 3), (4, 6), (7, 8)]
    assert discretized_range_sums(additions, queries) == [8, 0, 5]


def test_discretized_matches_definition():
    additions = [(-1000000000, 4), (5, 1), (5, 2), (999, -3), (1000000000, 7)]
    queries = [(-1000000000, 1000000000), (0, 10), (6, 998), (5, 999)]
    expected = [sum(c for x, c in additions if l <= x <= r) for l, r in queries]
    assert discretized_range_sums(additions, queries) == expected


def test_merged_intervals_example():
    assert count_merged_intervals([(1, 2), (2, 4), (5, 6), (7, 8), (7, 9)]) == 3


def test_merged_intervals_disjoint_and_nested():
    disjoint = [(10, 11), (1, 2), (4, 5)]
    assert count_merged_intervals(disjoint) == len(disjoint)
    nested = [(1, 100), (2, 3), (50, 60), (99, 100)]
    assert count_merged_intervals(nested) == count_merged_intervals([(1, 100)])
    assert count_merged_intervals([]) == 0