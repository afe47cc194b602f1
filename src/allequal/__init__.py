from . import comparers
from ._core import ArgumentNoneError, Config, Pipeable, get_config
from ._iter import Iter, Seq
from ._predicates import all_equal, all_equal_by, all_equal_by_key
from .comparers import Comparer

__all__ = [
    "ArgumentNoneError",
    "Comparer",
    "Config",
    "Iter",
    "Pipeable",
    "Seq",
    "all_equal",
    "all_equal_by",
    "all_equal_by_key",
    "comparers",
    "get_config",
]
