"""Combinatorial enumeration and counting over finite sequences."""

from combiseq.core.sequence import Seq
from combiseq.core.types import SplitContext
from combiseq.functional import combinatorics
from combiseq.functional.control import (
    any_match,
    any_while,
    fold_until,
    fold_while,
    repeat,
    repeat_first,
)
from combiseq.functional.enumerators import multisets, partition_all, subsets
from combiseq.functional.positional import (
    cyclic_pad,
    map_if,
    map_range,
    remove_range,
    rotate,
    rotate_all,
    take_range,
)
from combiseq.functional.split import (
    lens_map,
    pair_ends,
    prefix_correspondence,
    remove_each,
    split_all,
    split_contexts,
    split_map,
    stepped,
    stepped_right,
)

__version__ = "0.1.0"

__all__ = [
    "Seq",
    "SplitContext",
    "combinatorics",
    "fold_while",
    "fold_until",
    "any_match",
    "any_while",
    "repeat",
    "repeat_first",
    "split_map",
    "split_contexts",
    "lens_map",
    "split_all",
    "remove_each",
    "stepped",
    "stepped_right",
    "pair_ends",
    "prefix_correspondence",
    "map_range",
    "map_if",
    "take_range",
    "remove_range",
    "rotate",
    "rotate_all",
    "cyclic_pad",
    "subsets",
    "multisets",
    "partition_all",
]
