"""Closed-form combinatorial counting functions.

The functions in this module count arrangements of finite sets:

    - **Factorials**: ``factorial``, ``falling``, ``rising``,
      ``multifactorial``, ``subfactorial`` (derangements), ``permutations``.
    - **Binomials**: ``choose``, ``multichoose``, ``figurate``.
    - **Set partitions**: ``stirling2``, ``bell``, ``fubini``, ``lah``.
    - **Permutation statistics**: ``stirling1`` (cycles), ``eulerian1``
      (ascents), ``eulerian2`` (ascents of Stirling permutations).

Note:
    All arithmetic happens in NumPy's ``int64``. Results that do not fit wrap
    around silently instead of raising, for example ``factorial(21)`` is not
    ``21!``. Callers needing exact large values must keep their inputs small.
    Every function returns a plain Python ``int``.

Examples:
    >>> choose(5, 2)
    10
    >>> bell(3)
    5
    >>> stirling2(4, 2)
    7
"""

from functools import wraps
from typing import Callable

import numpy as np

from combiseq.core.types import Count

__all__ = [
    "factorial",
    "falling",
    "rising",
    "subfactorial",
    "multifactorial",
    "permutations",
    "choose",
    "multichoose",
    "figurate",
    "stirling1",
    "stirling2",
    "lah",
    "bell",
    "fubini",
    "eulerian1",
    "eulerian2",
]


def int64_domain(func: Callable[..., np.int64]) -> Callable[..., Count]:
    """Run ``func`` with int64 wraparound warnings off and return a Python int."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Count:
        with np.errstate(over="ignore", divide="ignore"):
            return int(func(*args, **kwargs))

    return wrapper


# Terms multiplied per arange block in _product
_PRODUCT_CHUNK = 1 << 16


def _product(start: int, stop: int, step: int = 1) -> np.int64:
    """Product of ``range(start, stop + 1, step)``, 1 when the range is empty.

    The range is consumed in fixed-size blocks so memory stays constant.
    Once the wrapped product hits 0 it stays 0, so the walk stops there.
    """
    result = np.int64(1)
    stride = step * _PRODUCT_CHUNK
    for lo in range(start, stop + 1, stride):
        block = np.arange(lo, min(lo + stride, stop + 1), step, dtype=np.int64)
        result = result * np.prod(block, dtype=np.int64)
        if result == 0:
            break
    return result


def _signs(size: int) -> np.ndarray:
    """``1, -1, 1, -1, ...`` of length ``size``."""
    return np.where(np.arange(size) % 2 == 0, 1, -1).astype(np.int64)


def _binomial_row(n: int, k: int) -> np.ndarray:
    """``choose(n, i)`` for ``i`` in ``0..k``."""
    return np.array([choose(n, i) for i in range(k + 1)], dtype=np.int64)


@int64_domain
def factorial(n: int) -> np.int64:
    """``n!``, with ``factorial(n) == 1`` for ``n <= 0``."""
    return _product(1, n)


@int64_domain
def falling(n: int, k: int) -> np.int64:
    """Falling factorial ``n (n-1) ... (n-k+1)``."""
    return _product(n - k + 1, n)


@int64_domain
def rising(n: int, k: int) -> np.int64:
    """Rising factorial ``n (n+1) ... (n+k-1)``."""
    return _product(n, n + k - 1)


@int64_domain
def subfactorial(n: int) -> np.int64:
    """Number of derangements of ``n`` elements.

    Uses the recurrence ``D(k) = (k - 1) (D(k - 1) + D(k - 2))`` seeded so
    that ``D(0) = 1`` and ``D(1) = 0``.
    """
    previous, current = np.int64(-2), np.int64(1)
    for k in range(n + 1):
        previous, current = current, np.int64(k - 1) * (previous + current)
    return current


@int64_domain
def multifactorial(n: int, k: int) -> np.int64:
    """``n (n-k) (n-2k) ...`` down to the smallest positive term.

    ``multifactorial(n, 2)`` is the double factorial ``n!!``.

    Raises:
        ValueError: If ``k`` is not positive.
    """
    if k <= 0:
        raise ValueError(f"Multifactorial step must be positive, got {k}.")
    if n <= 0:
        return np.int64(1)
    return _product((n - 1) % k + 1, n, k)


def permutations(n: int, k: int) -> Count:
    """Number of ordered selections of ``k`` items out of ``n``."""
    return falling(n, k)


@int64_domain
def choose(n: int, k: int) -> np.int64:
    """Binomial coefficient ``C(n, k)``.

    ``C(n, 0)`` is 1 for every ``n``, otherwise the result is zero when
    ``k < 0`` or ``k > n``. Computed as the ratio of two running products,
    cancelling the larger of ``k!`` and ``(n-k)!`` first, so the intermediate
    values stay far smaller than ``n!``.
    """
    if k == 0:
        return np.int64(1)
    if k < 0 or k > n:
        return np.int64(0)
    return _product(max(k, n - k) + 1, n) // _product(1, min(k, n - k))


def multichoose(n: int, k: int) -> Count:
    """Number of multisets of size ``k`` drawn from ``n`` kinds."""
    return choose(n + k - 1, k)


def figurate(n: int, k: int) -> Count:
    """The ``n``-th ``k``-dimensional figurate number, ``C(n + k - 1, n)``."""
    return choose(n + k - 1, n)


@int64_domain
def stirling1(n: int, k: int, signed: bool = False) -> np.int64:
    """Stirling number of the first kind.

    Counts the permutations of ``n`` elements with exactly ``k`` cycles, from
    the recurrence ``c(n, k) = c(n-1, k-1) + (n-1) c(n-1, k)``. With
    ``signed=True`` the result carries the sign ``(-1) ** (n - k)``.
    """
    if n < 0 or k < 0 or k > n:
        return np.int64(0)
    row = np.zeros(k + 1, dtype=np.int64)
    row[0] = 1
    for m in range(1, n + 1):
        row[1:] = row[:-1] + (m - 1) * row[1:]
        row[0] = 0
    value = row[k]
    return -value if signed and (n - k) % 2 else value


@int64_domain
def stirling2(n: int, k: int) -> np.int64:
    """Stirling number of the second kind.

    Counts the partitions of ``n`` elements into ``k`` non-empty blocks, via
    the finite difference formula
    ``S(n, k) = sum((-1)**i * C(k, i) * (k - i)**n for i in 0..k) / k!``.
    """
    if n < 0 or k < 0:
        return np.int64(0)
    i = np.arange(k + 1, dtype=np.int64)
    terms = _signs(k + 1) * _binomial_row(k, k) * np.power(k - i, n)
    return np.sum(terms, dtype=np.int64) // _product(1, k)


@int64_domain
def lah(n: int, k: int) -> np.int64:
    """Unsigned Lah number ``C(n-1, k-1) n! / k!``.

    Counts the partitions of ``n`` elements into ``k`` non-empty ordered
    lists.
    """
    if k == 0:
        return np.int64(1 if n == 0 else 0)
    return np.int64(choose(n - 1, k - 1)) * _product(k + 1, n)


@int64_domain
def bell(n: int) -> np.int64:
    """Number of partitions of a set of ``n`` elements."""
    return np.sum([stirling2(n, k) for k in range(n + 1)], dtype=np.int64)


@int64_domain
def fubini(n: int) -> np.int64:
    """Number of weak orderings (ordered set partitions) of ``n`` elements."""
    return np.sum(
        [np.int64(factorial(k)) * np.int64(stirling2(n, k)) for k in range(n + 1)],
        dtype=np.int64,
    )


@int64_domain
def eulerian1(n: int, k: int) -> np.int64:
    """Eulerian number ``A(n, k)``: permutations of ``n`` with ``k`` ascents.

    Uses ``A(n, k) = sum((-1)**i * C(n+1, i) * (k+1-i)**n for i in 0..k)``.
    """
    if n < 0 or k < 0:
        return np.int64(0)
    i = np.arange(k + 1, dtype=np.int64)
    terms = _signs(k + 1) * _binomial_row(n + 1, k) * np.power(k + 1 - i, n)
    return np.sum(terms, dtype=np.int64)


@int64_domain
def eulerian2(n: int, k: int) -> np.int64:
    """Second-order Eulerian number ``<<n, k>>``.

    Counts the Stirling permutations of order ``n`` with ``k`` ascents, from
    the recurrence ``<<n, k>> = (k+1) <<n-1, k>> + (2n-k-1) <<n-1, k-1>>``
    with ``<<0, 0>> = 1``.
    """
    if n < 0 or k < 0 or k > max(n - 1, 0):
        return np.int64(0)
    row = np.zeros(max(n, 1), dtype=np.int64)
    row[0] = 1
    j = np.arange(1, len(row), dtype=np.int64)
    for m in range(1, n + 1):
        row[1:] = (j + 1) * row[1:] + (2 * m - j - 1) * row[:-1]
    return row[k]
