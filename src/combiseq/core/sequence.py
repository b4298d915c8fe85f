"""Fluent, immutable sequence wrapper.

``Seq`` exposes the functional API as methods so operations can be chained:

    >>> Seq([1, 2, 3, 4]).rotate(1).take_range(0, 1)
    Seq((4, 1))

Methods that produce a single sequence return a new ``Seq``. Enumerations,
folds and searches return the same values as their free-function
counterparts in :mod:`combiseq.functional`.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from combiseq.core.types import Index, Mapper, Predicate, SplitContext, SplitMapper, T
from combiseq.functional import control, enumerators, positional, split

__all__ = ["Seq"]


class Seq(Sequence[T]):
    """An ordered, immutable collection with combinatorial operations.

    Example:
        >>> Seq("abc").remove_each()
        [('b', 'c'), ('a', 'c'), ('a', 'b')]
        >>> Seq([1, 2, 3]).subsets(2, 2)
        [(1, 2), (1, 3), (2, 3)]
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()):
        self._items: Tuple[T, ...] = tuple(items)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Seq(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Seq):
            return self._items == other._items
        if isinstance(other, tuple):
            return self._items == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __add__(self, other: Iterable[T]) -> "Seq[T]":
        return Seq(self._items + tuple(other))

    def __repr__(self) -> str:
        return f"Seq({self._items!r})"

    def to_tuple(self) -> Tuple[T, ...]:
        return self._items

    # ------------------------------------------------------------------
    # Folds and searches
    # ------------------------------------------------------------------

    def fold_while(self, base: Any, cond: Callable, fold: Callable) -> Any:
        return control.fold_while(self._items, base, cond, fold)

    def fold_until(self, base: Any, cond: Callable, fold: Callable) -> Any:
        return control.fold_until(self._items, base, cond, fold)

    def any_match(self, cond: Predicate) -> bool:
        return control.any_match(self._items, cond)

    def any_while(self, loop_cond: Predicate, match_cond: Predicate) -> bool:
        return control.any_while(self._items, loop_cond, match_cond)

    # ------------------------------------------------------------------
    # Split contexts
    # ------------------------------------------------------------------

    def split_map(self, mapper: SplitMapper) -> "Seq":
        return Seq(split.split_map(self._items, mapper))

    def split_contexts(self) -> List[SplitContext]:
        return split.split_contexts(self._items)

    def lens_map(self, mapper: Mapper) -> List[Tuple[T, ...]]:
        return split.lens_map(self._items, mapper)

    def split_all(self) -> List[Tuple[Tuple[T, ...], Tuple[T, ...]]]:
        return split.split_all(self._items)

    def remove_each(self) -> List[Tuple[T, ...]]:
        return split.remove_each(self._items)

    def stepped(self) -> List[Tuple[T, ...]]:
        return split.stepped(self._items)

    def stepped_right(self) -> List[Tuple[T, ...]]:
        return split.stepped_right(self._items)

    def pair_ends(self) -> List[Tuple[T, T]]:
        return split.pair_ends(self._items)

    def prefix_correspondence(
        self, other: Sequence[Any], cond: Optional[Callable[[T, Any], bool]] = None
    ) -> int:
        if cond is None:
            return split.prefix_correspondence(self._items, other)
        return split.prefix_correspondence(self._items, other, cond)

    # ------------------------------------------------------------------
    # Positional transformations
    # ------------------------------------------------------------------

    def map_range(
        self, start: Index, stop: Optional[Index] = None, *, mapper: Mapper
    ) -> "Seq[T]":
        return Seq(positional.map_range(self._items, start, stop, mapper=mapper))

    def map_if(self, cond: Predicate, mapper: Mapper) -> "Seq[T]":
        return Seq(positional.map_if(self._items, cond, mapper))

    def take_range(self, start: Index, stop: Optional[Index] = None) -> "Seq[T]":
        return Seq(positional.take_range(self._items, start, stop))

    def remove_range(self, start: Index, stop: Optional[Index] = None) -> "Seq[T]":
        return Seq(positional.remove_range(self._items, start, stop))

    def rotate(self, n: int = 1) -> "Seq[T]":
        return Seq(positional.rotate(self._items, n))

    def rotate_all(self) -> List[Tuple[T, ...]]:
        return positional.rotate_all(self._items)

    def cyclic_pad(self, size: int) -> "Seq[T]":
        return Seq(positional.cyclic_pad(self._items, size))

    # ------------------------------------------------------------------
    # Combinatorial enumeration
    # ------------------------------------------------------------------

    def subsets(
        self, min_size: int = 0, max_size: Optional[int] = None
    ) -> List[Tuple[T, ...]]:
        return enumerators.subsets(self._items, min_size, max_size)

    def multisets(
        self, min_size: int = 0, max_size: Optional[int] = None
    ) -> List[Tuple[T, ...]]:
        return enumerators.multisets(self._items, min_size, max_size)

    def partition_all(self, *sizes: int) -> List[Tuple[Tuple[T, ...], ...]]:
        return enumerators.partition_all(self._items, *sizes)
