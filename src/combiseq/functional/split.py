"""Split-context traversal and the enumerations derived from it.

The core primitive is :func:`split_map`, which walks a sequence once from
left to right and hands the mapper, for every position, the elements before
it, the element itself and the elements after it. Most of the other functions
here are ``split_map`` with a different combining function:

    - **lens_map**: replace one element at a time.
    - **split_all**: every way to cut the sequence in two.
    - **remove_each**: drop one element at a time.
    - **stepped** / **stepped_right**: every suffix / every prefix.

``pair_ends`` and ``prefix_correspondence`` are symmetric walks that do not
need the full context.

Note:
    Contexts are built with tuple slicing, so a full traversal costs time
    quadratic in the sequence length. Generic immutable sequences offer no
    constant-time incremental prefix, and the sizes these enumerations are
    used with keep that cost small.

Example:
    >>> split_all([1, 2])
    [((), (1, 2)), ((1,), (2,)), ((1, 2), ())]
"""

import operator
from typing import Any, Callable, List, Sequence, Tuple

from combiseq.core.types import Mapper, SplitContext, SplitMapper, T, U, as_tuple
from combiseq.functional.control import repeat

__all__ = [
    "split_map",
    "split_contexts",
    "lens_map",
    "split_all",
    "remove_each",
    "stepped",
    "stepped_right",
    "pair_ends",
    "prefix_correspondence",
]


def split_map(seq: Sequence[T], mapper: SplitMapper) -> List[U]:
    """Map every element with access to its left and right neighbours.

    Args:
        seq: Sequence to traverse.
        mapper: ``(left, current, right) -> result``, called exactly once per
            position in ascending order. ``left`` and ``right`` are tuples in
            original order.

    Returns:
        One result per position, in position order.
    """
    items = as_tuple(seq)
    return [
        mapper(items[:i], current, items[i + 1 :]) for i, current in enumerate(items)
    ]


def split_contexts(seq: Sequence[T]) -> List[SplitContext]:
    """Return the ``(left, current, right)`` context of every position."""
    return split_map(seq, SplitContext)


def lens_map(seq: Sequence[T], mapper: Mapper) -> List[Tuple[T, ...]]:
    """Create one copy of ``seq`` per position with only that element mapped.

    Example:
        >>> lens_map([1, 2], lambda e: e * 10)
        [(10, 2), (1, 20)]
    """
    return split_map(seq, lambda left, current, right: (*left, mapper(current), *right))


def split_all(seq: Sequence[T]) -> List[Tuple[Tuple[T, ...], Tuple[T, ...]]]:
    """Return every ``(prefix, suffix)`` split of ``seq``.

    There are ``len(seq) + 1`` split points. The first ``len(seq)`` come from
    cutting just before each element; the last one keeps the whole sequence
    as the prefix.
    """
    items = as_tuple(seq)
    splits = split_map(items, lambda left, current, right: (left, (current, *right)))
    splits.append((items, ()))
    return splits


def remove_each(seq: Sequence[T]) -> List[Tuple[T, ...]]:
    """Create one copy of ``seq`` per position with that element removed."""
    return split_map(seq, lambda left, _, right: left + right)


def stepped(seq: Sequence[T]) -> List[Tuple[T, ...]]:
    """Return every suffix of ``seq``, starting from the whole sequence."""
    return split_map(seq, lambda _, current, right: (current, *right))


def stepped_right(seq: Sequence[T]) -> List[Tuple[T, ...]]:
    """Return every non-empty prefix of ``seq``, shortest first."""
    return split_map(seq, lambda left, current, _: (*left, current))


def pair_ends(seq: Sequence[T]) -> List[Tuple[T, T]]:
    """Pair element ``k`` with element ``n - 1 - k`` working inwards.

    The sequence and its reverse are consumed from the front together, for
    ``ceil(n / 2)`` steps. In an odd-length sequence the middle element is
    paired with itself.

    Example:
        >>> pair_ends("abcde")
        [('a', 'e'), ('b', 'd'), ('c', 'c')]
    """
    items = as_tuple(seq)
    steps = (len(items) + 1) // 2
    return list(zip(items[:steps], reversed(items)))


def prefix_correspondence(
    seq: Sequence[T],
    other: Sequence[Any],
    cond: Callable[[T, Any], bool] = operator.eq,
) -> int:
    """Count how many leading elements of two sequences correspond.

    Both sequences are walked in lock-step and the walk stops at the first
    pair failing ``cond`` or when either sequence runs out.

    Args:
        seq: First sequence.
        other: Second sequence, may hold a different element type.
        cond: ``(a, b) -> bool`` correspondence test, equality by default.

    Returns:
        Length of the corresponding prefix.

    Example:
        >>> prefix_correspondence([1, 2, 3], [1, 2, 9])
        2
    """
    limit = min(len(seq), len(other))
    return repeat(0, lambda i: i < limit and cond(seq[i], other[i]), lambda i: i + 1)
