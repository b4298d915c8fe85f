import pytest
from combiseq.functional.control import (
    any_match,
    any_while,
    fold_until,
    fold_while,
    repeat,
    repeat_first,
)


def test_fold_while_stops_once_condition_fails():
    visited = []

    def add(acc, e):
        visited.append(e)
        return acc + e

    result = fold_while([1, 2, 3, 4, 5], 0, lambda acc: acc < 3, add)

    assert result == 3
    # Elements after the stopping point are never folded in
    assert visited == [1, 2]


def test_fold_while_full_fold_when_condition_holds():
    assert fold_while(range(5), 0, lambda acc: True, lambda acc, e: acc + e) == 10


def test_fold_while_empty_returns_base():
    assert fold_while([], "base", lambda acc: True, lambda acc, e: acc + e) == "base"


def test_fold_while_false_from_start_returns_base():
    assert fold_while([1, 2], 100, lambda acc: acc < 0, lambda acc, e: acc + e) == 100


def test_fold_until_negates_condition():
    result = fold_until([5, 5, 5, 5], 0, lambda acc: acc >= 10, lambda acc, e: acc + e)
    assert result == 10


def test_any_match():
    assert any_match([1, 3, 4], lambda e: e % 2 == 0)
    assert not any_match([1, 3, 5], lambda e: e % 2 == 0)
    assert not any_match([], lambda e: True)


def test_any_match_short_circuits():
    seen = []

    def cond(e):
        seen.append(e)
        return e == 2

    assert any_match([1, 2, 3, 4], cond)
    assert seen == [1, 2]


def test_any_while_finds_match_before_bound():
    assert any_while([1, 2, 3, 10], lambda e: e < 5, lambda e: e == 3)


def test_any_while_gives_up_at_bound():
    assert not any_while([1, 2, 10, 3], lambda e: e < 5, lambda e: e == 3)


def test_any_while_does_not_test_match_on_stopping_element():
    tested = []

    def match(e):
        tested.append(e)
        return e == 10

    assert not any_while([1, 10, 2], lambda e: e < 5, match)
    assert tested == [1]


def test_any_while_empty():
    assert not any_while([], lambda e: True, lambda e: True)


def test_repeat_reaches_fixed_point():
    assert repeat(1, lambda x: x < 100, lambda x: x * 2) == 128


def test_repeat_condition_false_initially():
    assert repeat(5, lambda x: x < 0, lambda x: x + 1) == 5


def test_repeat_does_not_grow_stack():
    # Far beyond the default recursion limit
    assert repeat(0, lambda x: x < 100_000, lambda x: x + 1) == 100_000


def test_repeat_collatz_steps():
    def step(state):
        n, steps = state
        return (n // 2 if n % 2 == 0 else 3 * n + 1), steps + 1

    _, steps = repeat((27, 0), lambda s: s[0] != 1, step)
    assert steps == 111


def test_repeat_first_always_folds_once():
    assert repeat_first(5, lambda x: x + 1, lambda x: x < 0) == 6
    assert repeat(5, lambda x: x < 0, lambda x: x + 1) == 5


@pytest.mark.parametrize("base, expected", [(1, 16), (16, 32), (17, 34)])
def test_repeat_first_matches_do_while(base, expected):
    assert repeat_first(base, lambda x: x * 2, lambda x: x < 16) == expected
