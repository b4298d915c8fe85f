import itertools

import pytest
from combiseq.core import config
from combiseq.core.config import Settings
from combiseq.functional.combinatorics import choose, multichoose
from combiseq.functional.enumerators import multisets, partition_all, subsets


@pytest.fixture
def shallow_limit(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(MAX_RECURSION_DEPTH=4))


def test_subsets_of_three():
    result = subsets([1, 2, 3])
    assert result == [
        (1, 2, 3),
        (1, 2),
        (1, 3),
        (1,),
        (2, 3),
        (2,),
        (3,),
        (),
    ]
    assert len(set(result)) == 8


def test_subsets_preserve_order_and_match_itertools():
    data = "abcde"
    expected = {
        combo for r in range(len(data) + 1) for combo in itertools.combinations(data, r)
    }
    result = subsets(data)
    assert set(result) == expected
    assert len(result) == 2 ** len(data)


def test_subsets_size_bounds():
    result = subsets(range(5), 2, 3)
    assert all(2 <= len(s) <= 3 for s in result)
    assert len(result) == choose(5, 2) + choose(5, 3)


def test_subsets_exact_size():
    assert subsets([1, 2, 3], 2, 2) == [(1, 2), (1, 3), (2, 3)]


def test_subsets_min_larger_than_input():
    assert subsets([1, 2], 3) == []


def test_subsets_empty_input():
    assert subsets([]) == [()]


@pytest.mark.parametrize("min_size, max_size", [(-1, 2), (0, -1), (3, 1)])
def test_subsets_invalid_bounds_give_no_results(min_size, max_size):
    assert subsets([1, 2, 3], min_size, max_size) == []


def test_multisets_of_two():
    assert multisets("ab", max_size=2) == [
        ("a", "a"),
        ("a", "b"),
        ("a",),
        ("b", "b"),
        ("b",),
        (),
    ]


def test_multisets_match_itertools():
    data = "abc"
    for size in range(4):
        result = multisets(data, size, size)
        assert result == list(itertools.combinations_with_replacement(data, size))
        assert len(result) == multichoose(len(data), size)


def test_multisets_minimum_reached_by_reuse():
    assert multisets([7], 3, 3) == [(7, 7, 7)]


def test_multisets_empty_input():
    assert multisets([]) == [()]
    assert multisets([], 1, 2) == []


@pytest.mark.parametrize("min_size, max_size", [(-1, 2), (0, -2), (2, 1)])
def test_multisets_invalid_bounds_give_no_results(min_size, max_size):
    assert multisets([1, 2], min_size, max_size) == []


def test_partition_all_two_by_two():
    result = partition_all([1, 2, 3, 4], 2, 2)
    assert len(result) == choose(4, 2) == 6
    assert len(set(result)) == 6
    for first, second in result:
        assert sorted(first + second) == [1, 2, 3, 4]
        assert list(first) == sorted(first)
        assert list(second) == sorted(second)
    assert result[0] == ((1, 2), (3, 4))
    assert result[-1] == ((3, 4), (1, 2))


def test_partition_all_three_groups():
    result = partition_all("abcd", 1, 1, 2)
    # 4! / (1! 1! 2!)
    assert len(result) == 12
    assert (("a",), ("b",), ("c", "d")) in result
    assert (("d",), ("c",), ("a", "b")) in result


def test_partition_all_with_empty_group():
    assert partition_all([1, 2], 0, 2) == [((), (1, 2))]


def test_partition_all_sizes_must_cover_input():
    assert partition_all([1, 2, 3], 1, 1) == []
    assert partition_all([1, 2], 2, 1) == []


def test_partition_all_negative_size():
    assert partition_all([1, 2], 3, -1) == []


def test_partition_all_empty_input():
    assert partition_all([], 0, 0) == [((), ())]
    assert partition_all([]) == [()]
    assert partition_all([], 1) == []


def test_recursion_limit_is_enforced(shallow_limit):
    with pytest.raises(ValueError, match="recursion|limit"):
        subsets(range(5))
    with pytest.raises(ValueError, match="limit"):
        partition_all(range(5), 5)
    with pytest.raises(ValueError, match="limit"):
        multisets(range(5), max_size=1)


def test_recursion_limit_allows_small_inputs(shallow_limit):
    assert len(subsets(range(4))) == 16
    assert multisets([1, 2], max_size=2)[0] == (1, 1)


def test_multisets_depth_follows_input_length(shallow_limit):
    # Large sizes over few elements stay within a depth of 4
    result = multisets([1, 2], 0, 10)
    assert len(result) == sum(multichoose(2, size) for size in range(11))
    assert result[0] == (1,) * 10
    assert multisets([], 0, 10) == [()]


def test_multisets_large_size_under_default_limit():
    result = multisets([1], 0, 600)
    assert len(result) == 601
    assert result[0] == (1,) * 600
    assert result[-1] == ()
