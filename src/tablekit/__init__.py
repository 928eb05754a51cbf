"""tablekit

Higher-order operations over dict-like containers whose keys and values can be
anything, including other containers: predicate tests, filtering, folding,
copying, merging, read-only views and structural dumps.

The functions do not validate their arguments. Passing something that is not
a mapping, or a predicate that is not callable, fails with whatever error the
call itself produces; tablekit neither catches nor wraps it. The only error
tablekit raises on its own is `ReadOnlyViewError`, for writes through a
`RawView`.
"""

__version__ = "0.1.0"

from .copying import deep_copy, extend, shallow_copy
from .dump import dump
from .errors import InvalidConfigError, ReadOnlyViewError, TableKitError
from .predicates import all_match, any_match, contains
from .shaping import filter_entries, fold, transform
from .sizing import is_empty, length
from .table import SortedTable, Table, is_container
from .views import RawView, raw

__all__ = [
    "__version__",
    "all_match",
    "any_match",
    "contains",
    "deep_copy",
    "dump",
    "extend",
    "filter_entries",
    "fold",
    "is_empty",
    "length",
    "shallow_copy",
    "raw",
    "transform",
    "RawView",
    "Table",
    "SortedTable",
    "is_container",
    "TableKitError",
    "ReadOnlyViewError",
    "InvalidConfigError",
]
