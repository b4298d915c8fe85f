"""Index-based transformations of a sequence.

Ranges are closed: ``start`` and ``stop`` are both included, and ``stop``
defaults to ``start`` so a single index can be given on its own. Ranges that
fall outside the sequence raise ``IndexError`` rather than being clamped.
"""

from itertools import cycle, islice
from typing import List, Optional, Sequence, Tuple

from combiseq.core.types import Index, Mapper, Predicate, T, as_tuple

__all__ = [
    "map_range",
    "map_if",
    "take_range",
    "remove_range",
    "rotate",
    "rotate_all",
    "cyclic_pad",
]


def _resolve_range(size: int, start: int, stop: Optional[int]) -> Tuple[int, int]:
    stop = start if stop is None else stop
    if start < 0 or stop < start or stop >= size:
        raise IndexError(
            f"Range [{start}, {stop}] is out of bounds for a sequence of length {size}."
        )
    return start, stop


def map_range(
    seq: Sequence[T], start: Index, stop: Optional[Index] = None, *, mapper: Mapper
) -> Tuple[T, ...]:
    """Map only the elements at indices ``start`` to ``stop`` inclusive.

    Args:
        seq: Source sequence.
        start: First index to map.
        stop: Last index to map, ``start`` when omitted.
        mapper: ``element -> element``.

    Returns:
        A sequence of the same length with the range mapped.

    Raises:
        IndexError: If the range is empty or leaves the sequence.
    """
    items = as_tuple(seq)
    start, stop = _resolve_range(len(items), start, stop)
    return (
        items[:start]
        + tuple(mapper(e) for e in items[start : stop + 1])
        + items[stop + 1 :]
    )


def map_if(seq: Sequence[T], cond: Predicate, mapper: Mapper) -> Tuple[T, ...]:
    """Map the elements satisfying ``cond``, keeping the others in place."""
    return tuple(mapper(e) if cond(e) else e for e in seq)


def take_range(
    seq: Sequence[T], start: Index, stop: Optional[Index] = None
) -> Tuple[T, ...]:
    """Keep only the elements at indices ``start`` to ``stop`` inclusive.

    Raises:
        IndexError: If the range is empty or leaves the sequence.
    """
    items = as_tuple(seq)
    start, stop = _resolve_range(len(items), start, stop)
    return items[start : stop + 1]


def remove_range(
    seq: Sequence[T], start: Index, stop: Optional[Index] = None
) -> Tuple[T, ...]:
    """Drop the elements at indices ``start`` to ``stop`` inclusive.

    Raises:
        IndexError: If the range is empty or leaves the sequence.
    """
    items = as_tuple(seq)
    start, stop = _resolve_range(len(items), start, stop)
    return items[:start] + items[stop + 1 :]


def rotate(seq: Sequence[T], n: int = 1) -> Tuple[T, ...]:
    """Rotate ``seq`` cyclically by ``n`` places.

    A positive ``n`` moves the last ``n`` elements to the front, a negative
    ``n`` moves the first ``-n`` elements to the back. ``n`` is reduced modulo
    the length of the sequence.

    Raises:
        ValueError: If ``seq`` is empty.

    Example:
        >>> rotate([1, 2, 3, 4], 1)
        (4, 1, 2, 3)
        >>> rotate([1, 2, 3, 4], -1)
        (2, 3, 4, 1)
    """
    items = as_tuple(seq)
    if not items:
        raise ValueError("Cannot rotate an empty sequence.")
    cut = len(items) - n % len(items)
    return items[cut:] + items[:cut]


def rotate_all(seq: Sequence[T]) -> List[Tuple[T, ...]]:
    """Return every rotation of ``seq``, starting with ``seq`` itself."""
    items = as_tuple(seq)
    return [rotate(items, n) for n in range(len(items))]


def cyclic_pad(seq: Sequence[T], size: int) -> Tuple[T, ...]:
    """Build a sequence of exactly ``size`` elements by cycling through ``seq``.

    Raises:
        ValueError: If ``seq`` is empty and more elements than it holds are
            requested.

    Example:
        >>> cyclic_pad("ab", 5)
        ('a', 'b', 'a', 'b', 'a')
    """
    items = as_tuple(seq)
    if size <= len(items):
        return items[: max(size, 0)]
    if not items:
        raise ValueError(f"Cannot pad an empty sequence to {size} elements.")
    return tuple(islice(cycle(items), size))
