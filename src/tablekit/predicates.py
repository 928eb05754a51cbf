"""Predicate tests over the entries of a mapping."""

from collections.abc import Callable, Mapping
from typing import Any

Predicate = Callable[[Any, Any], Any]


def all_match(mapping: Mapping[Any, Any], predicate: Predicate) -> bool:
    """Return True if every entry satisfies `predicate`.

    Stops at the first entry for which ``predicate(key, value)`` is falsy.
    An empty mapping returns True.
    """
    for key, value in mapping.items():
        if not predicate(key, value):
            return False
    return True


def any_match(mapping: Mapping[Any, Any], predicate: Predicate) -> bool:
    """Return True if at least one entry satisfies `predicate`.

    Stops at the first entry for which ``predicate(key, value)`` is truthy.
    An empty mapping returns False.
    """
    for key, value in mapping.items():
        if predicate(key, value):
            return True
    return False


def contains(mapping: Mapping[Any, Any], searched: Any) -> bool:
    """Return True if some value of `mapping` compares equal to `searched`."""
    return any_match(mapping, lambda _, value: value == searched)
