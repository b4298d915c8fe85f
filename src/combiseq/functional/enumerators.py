"""Recursive combinatorial enumerators.

Each enumerator walks a choice tree over the head of the remaining input and
materializes every leaf:

    - **subsets**: include the head once or skip it.
    - **multisets**: take the head some number of times, then move on.
    - **partition_all**: hand the head to one of the labelled groups.

Results preserve the relative order of the input and no result is produced
twice, since every result corresponds to exactly one path through the tree.
Negative bounds or sizes are answered with an empty list, meaning there is no
way to satisfy them.

The recursion walks indices into a single tuple instead of slicing off tails.
Its depth grows with the input, so inputs deeper than
``settings.MAX_RECURSION_DEPTH`` are rejected up front.

Note:
    Output size is exponential in the input length (``subsets`` of ``n``
    elements yields up to ``2**n`` results). Bounding the input is up to the
    caller.

Example:
    >>> subsets([1, 2, 3], 2)
    [(1, 2, 3), (1, 2), (1, 3), (2, 3)]
    >>> partition_all("abc", 1, 2)
    [(('a',), ('b', 'c')), (('b',), ('a', 'c')), (('c',), ('a', 'b'))]
"""

from typing import List, Optional, Sequence, Tuple

from combiseq.core import config
from combiseq.core.types import T, as_tuple
from combiseq.functional.control import any_match
from combiseq.functional.positional import map_range
from combiseq.logger.logger import get_logger

__all__ = ["subsets", "multisets", "partition_all"]

logger = get_logger(__name__)

Partition = Tuple[Tuple[T, ...], ...]


def _check_depth(operation: str, depth: int) -> None:
    limit = config.settings.MAX_RECURSION_DEPTH
    if depth > limit:
        logger.warning(f"{operation}: recursion depth {depth} exceeds limit {limit}")
        raise ValueError(
            f"{operation} would recurse {depth} levels deep, more than the "
            f"configured limit of {limit}."
        )


def subsets(
    seq: Sequence[T], min_size: int = 0, max_size: Optional[int] = None
) -> List[Tuple[T, ...]]:
    """Enumerate the order-preserving subsets of ``seq`` within a size range.

    Subsets containing the head element come before those without it, at
    every level of the recursion.

    Args:
        seq: Source sequence.
        min_size: Smallest subset to produce.
        max_size: Largest subset to produce, ``len(seq)`` when omitted.

    Returns:
        Every subset whose length lies in ``[min_size, max_size]``. Empty if
        either bound is negative or ``min_size > max_size``.

    Raises:
        ValueError: If ``seq`` is longer than the recursion limit allows.
    """
    items = as_tuple(seq)
    max_size = len(items) if max_size is None else max_size
    if min_size < 0 or max_size < 0 or min_size > max_size:
        return []
    _check_depth("subsets", len(items))

    def choose_from(i: int, lo: int, hi: int) -> List[Tuple[T, ...]]:
        remaining = len(items) - i
        if lo > remaining:
            return []
        if hi == 0 or remaining == 0:
            return [()]
        head = items[i]
        with_head = [(head, *rest) for rest in choose_from(i + 1, lo - 1, hi - 1)]
        return with_head + choose_from(i + 1, lo, hi)

    result = choose_from(0, min_size, max_size)
    logger.debug(f"subsets: {len(result)} results from {len(items)} elements")
    return result


def multisets(
    seq: Sequence[T], min_size: int = 0, max_size: Optional[int] = None
) -> List[Tuple[T, ...]]:
    """Enumerate order-preserving selections where elements may repeat.

    Taking the head leaves it available to be taken again, skipping it moves
    on for good. Since any element can be reused, only running out of
    elements can make ``min_size`` unreachable.

    Args:
        seq: Source sequence.
        min_size: Smallest multiset to produce.
        max_size: Largest multiset to produce, ``len(seq)`` when omitted.

    Returns:
        Every multiset whose length lies in ``[min_size, max_size]``. Empty if
        either bound is negative or ``min_size > max_size``.

    Raises:
        ValueError: If ``seq`` is longer than the recursion limit allows.

    Example:
        >>> multisets("ab", max_size=2)
        [('a', 'a'), ('a', 'b'), ('a',), ('b', 'b'), ('b',), ()]
    """
    items = as_tuple(seq)
    max_size = len(items) if max_size is None else max_size
    if min_size < 0 or max_size < 0 or min_size > max_size:
        return []
    _check_depth("multisets", len(items))

    def pick_from(i: int, lo: int, hi: int) -> List[Tuple[T, ...]]:
        if i == len(items):
            return [()] if lo <= 0 else []
        head = items[i]
        picked = []
        # Most copies of the head first, one recursion level per element
        for count in range(hi, -1, -1):
            prefix = (head,) * count
            for rest in pick_from(i + 1, lo - count, hi - count):
                picked.append(prefix + rest)
        return picked

    result = pick_from(0, min_size, max_size)
    logger.debug(f"multisets: {len(result)} results from {len(items)} elements")
    return result


def partition_all(seq: Sequence[T], *sizes: int) -> List[Partition]:
    """Enumerate every way to split ``seq`` into groups of the given sizes.

    Groups are labelled by position: group ``i`` of every partition holds
    exactly ``sizes[i]`` elements, in their original relative order. The head
    element is offered to group 0 first, then group 1, and so on.

    Args:
        seq: Source sequence.
        *sizes: Required size of each group.

    Returns:
        Every partition as a tuple of groups. Empty if a size is negative or
        the sizes do not add up to ``len(seq)``. With no elements and all
        sizes zero, the single all-empty partition.

    Raises:
        ValueError: If ``seq`` is longer than the recursion limit allows.
    """
    items = as_tuple(seq)
    if any_match(sizes, lambda size: size < 0) or sum(sizes) != len(items):
        return []
    _check_depth("partition_all", len(items))

    def distribute(i: int, remaining: Tuple[int, ...]) -> List[Partition]:
        if i == len(items):
            if any_match(remaining, lambda size: size != 0):
                return []
            return [tuple(() for _ in remaining)]
        head = items[i]
        partitions = []
        for group, size in enumerate(remaining):
            if size == 0:
                continue
            rest = remaining[:group] + (size - 1,) + remaining[group + 1 :]
            partitions.extend(
                map_range(p, group, mapper=lambda members: (head, *members))
                for p in distribute(i + 1, rest)
            )
        return partitions

    result = distribute(0, sizes)
    logger.debug(
        f"partition_all: {len(result)} partitions of {len(items)} elements "
        f"into sizes {sizes}"
    )
    return result
