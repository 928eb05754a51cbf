"""Size probes that only rely on iteration."""

from collections.abc import Iterable
from typing import Any

_NOTHING = object()


def is_empty(mapping: Iterable[Any]) -> bool:
    """Return True if `mapping` has no entries.

    Asks the iterator for a single key instead of counting, so the cost does
    not depend on the size of the container.
    """
    return next(iter(mapping), _NOTHING) is _NOTHING


def length(mapping: Iterable[Any]) -> int:
    """Return the number of entries, counted by walking every key."""
    count = 0
    for _ in mapping:
        count += 1
    return count
