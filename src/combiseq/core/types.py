"""Reusable type definitions for combiseq.

Type Aliases:
    Predicate: Single-argument test on an element.
    Mapper: Element to element transformation.
    SplitMapper: Callable receiving ``(left, current, right)``.
    Index: A non-negative position in a sequence.
    Count: A value from the signed 64-bit counting domain.

SplitContext is the ``(left, current, right)`` view of one position in a
sequence. ``left + (current,) + right`` always equals the original sequence.
"""

from typing import Annotated, Callable, Generic, NamedTuple, Sequence, Tuple, TypeVar

import annotated_types as at

__all__ = [
    "T",
    "U",
    "Predicate",
    "Mapper",
    "SplitMapper",
    "Index",
    "Count",
    "SplitContext",
    "as_tuple",
]

T = TypeVar("T")
U = TypeVar("U")

Predicate = Callable[[T], bool]
Mapper = Callable[[T], T]
SplitMapper = Callable[[Tuple[T, ...], T, Tuple[T, ...]], U]

# A position inside a sequence
Index = Annotated[int, at.Ge(0)]

# A value from the signed 64-bit counting domain
Count = Annotated[int, at.Ge(-(2**63)), at.Le(2**63 - 1)]


class SplitContext(NamedTuple, Generic[T]):
    left: Tuple[T, ...]
    current: T
    right: Tuple[T, ...]


def as_tuple(seq: Sequence[T]) -> Tuple[T, ...]:
    """Return ``seq`` as a tuple, without copying when it already is one."""
    return seq if isinstance(seq, tuple) else tuple(seq)
