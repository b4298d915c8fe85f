"""Functional primitives for combiseq.

Stateless, side-effect-free operations over finite ordered sequences:

    - :mod:`combiseq.functional.control`: conditional folds and fixed-point
      iteration.
    - :mod:`combiseq.functional.split`: split-context traversal and the
      enumerations built on it.
    - :mod:`combiseq.functional.positional`: index-based transformations.
    - :mod:`combiseq.functional.enumerators`: subsets, multisets and
      partitions.
    - :mod:`combiseq.functional.combinatorics`: closed-form counting.

Inputs are never mutated; every produced sequence is a new tuple.
"""
