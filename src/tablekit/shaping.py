"""Operations that build a new value out of every entry of a mapping."""

from collections.abc import Callable, Mapping
from typing import Any


def filter_entries(
    mapping: Mapping[Any, Any], predicate: Callable[[Any, Any], Any]
) -> dict[Any, Any]:
    """Return a new dict holding the entries that pass `predicate`.

    Only a result that *is* ``True`` keeps an entry; other truthy results
    (``1``, ``"yes"``, a non-empty list) drop it.
    """
    return {
        key: value for key, value in mapping.items() if predicate(key, value) is True
    }


def fold(
    mapping: Mapping[Any, Any],
    initial: Any,
    fold_fn: Callable[..., Any],
    *args: Any,
) -> Any:
    """Combine every entry into a single value.

    Calls ``fold_fn(accumulator, key, value, *args)`` once per entry, feeding
    each result into the next call, and returns the last result (or `initial`
    for an empty mapping). `args` are passed unchanged to every call; bundle
    several accumulators into `initial` instead of threading them through
    `args`.

    Entries are visited in the mapping's iteration order.
    """
    accumulator = initial
    for key, value in mapping.items():
        accumulator = fold_fn(accumulator, key, value, *args)
    return accumulator


def transform(
    mapping: Mapping[Any, Any], transform_fn: Callable[[Any, Any], Any]
) -> dict[Any, Any]:
    """Return a new dict with the same keys and ``transform_fn(key, value)`` values."""
    return {key: transform_fn(key, value) for key, value in mapping.items()}
