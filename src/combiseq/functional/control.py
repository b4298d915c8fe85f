"""Conditional folds and fixed-point iteration.

These combinators generalise ``functools.reduce`` and ``any`` with an extra
stopping condition, and provide a loop-based fixed-point iterator that never
grows the call stack no matter how many steps it takes.

Example:
    >>> fold_while([1, 2, 3, 4], 0, lambda acc: acc < 3, lambda acc, e: acc + e)
    3
    >>> repeat(1, lambda x: x < 100, lambda x: x * 2)
    128
"""

from typing import Callable, Iterable, TypeVar

from combiseq.core.types import Predicate, T

__all__ = [
    "fold_while",
    "fold_until",
    "any_match",
    "any_while",
    "repeat",
    "repeat_first",
]

S = TypeVar("S")


def fold_while(
    seq: Iterable[T],
    base: S,
    cond: Callable[[S], bool],
    fold: Callable[[S, T], S],
) -> S:
    """Fold left to right for as long as the accumulator satisfies ``cond``.

    ``cond`` is checked before each element is folded in. The first time it
    fails the fold stops and the accumulator is returned as is; the remaining
    elements are never visited.

    Args:
        seq: Elements to fold.
        base: Initial accumulator.
        cond: Condition on the accumulator for folding to continue.
        fold: ``(accumulator, element) -> accumulator``.

    Returns:
        The accumulator after the last element folded in.
    """
    acc = base
    for element in seq:
        if not cond(acc):
            break
        acc = fold(acc, element)
    return acc


def fold_until(
    seq: Iterable[T],
    base: S,
    cond: Callable[[S], bool],
    fold: Callable[[S, T], S],
) -> S:
    """Fold left to right until the accumulator satisfies ``cond``."""
    return fold_while(seq, base, lambda acc: not cond(acc), fold)


def any_match(seq: Iterable[T], cond: Predicate) -> bool:
    """Return whether any element satisfies ``cond``, stopping at the first hit."""
    return any(cond(element) for element in seq)


def any_while(seq: Iterable[T], loop_cond: Predicate, match_cond: Predicate) -> bool:
    """Search for an element matching ``match_cond`` while ``loop_cond`` holds.

    The scan gives up at the first element failing ``loop_cond``; that element
    is not tested against ``match_cond``.

    Args:
        seq: Elements to scan.
        loop_cond: Bound on the search, checked first for every element.
        match_cond: Condition being searched for.

    Returns:
        True if a visited element matched before the search gave up.

    Example:
        >>> any_while([1, 2, 7, 3], lambda e: e < 5, lambda e: e == 3)
        False
    """

    def step(state, element):
        if not loop_cond(element):
            return False, False
        return True, match_cond(element)

    _, matched = fold_while(
        seq,
        (True, False),
        lambda state: state[0] and not state[1],
        step,
    )
    return matched


def repeat(base: S, cond: Callable[[S], bool], fold: Callable[[S], S]) -> S:
    """Apply ``fold`` to the state for as long as ``cond`` holds.

    The caller is responsible for ``cond`` eventually failing; there is no
    internal iteration limit.

    Args:
        base: Starting state.
        cond: Condition for another iteration.
        fold: ``state -> state``.

    Returns:
        The first state for which ``cond`` is false.
    """
    state = base
    while cond(state):
        state = fold(state)
    return state


def repeat_first(base: S, fold: Callable[[S], S], cond: Callable[[S], bool]) -> S:
    """Like :func:`repeat`, but ``fold`` runs once before the first check."""
    return repeat(fold(base), cond, fold)
