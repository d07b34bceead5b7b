import logging

from ._combinatorics import (
    Combinations,
    CombinationsWithReplacement,
    Permutations,
    Product,
)
from ._combiners import Chain, ZipLongest
from ._core import Config, Pipeable, config_context, get_config, set_config
from ._cursor import Cursor, to_cursor
from ._filters import (
    Accumulate,
    Compress,
    DropWhile,
    FilterFalse,
    Pairwise,
    Starmap,
    TakeWhile,
)
from ._groupby import GroupBy, Grouper
from ._islice import Islice
from ._iter import Iter
from ._producers import Count, Repeat
from ._replay import Cycle, Tee, TeeBuffer, tee
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import Group

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Accumulate",
    "Chain",
    "Combinations",
    "CombinationsWithReplacement",
    "Compress",
    "Config",
    "Count",
    "Cursor",
    "Cycle",
    "DropWhile",
    "FilterFalse",
    "Group",
    "GroupBy",
    "Grouper",
    "Islice",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pairwise",
    "Permutations",
    "Pipeable",
    "Product",
    "Repeat",
    "Some",
    "Starmap",
    "TakeWhile",
    "Tee",
    "TeeBuffer",
    "ZipLongest",
    "config_context",
    "get_config",
    "set_config",
    "tee",
    "to_cursor",
]
