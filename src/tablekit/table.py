"""The container primitive operated on by tablekit.

Any ``dict`` is a container. `Table` adds the two optional capabilities
the copy and dump operations know how to honor:

* a *fallback* consulted by ``table[key]`` when ``key`` is not an own entry
  (a mapping, or a callable taking the key);
* an ``iter_entries()`` hook giving the order in which `dump` renders entries.

Copies of a container keep its class and its instance attributes (for `Table`,
the fallback is shared by reference), so a copied `Table` behaves exactly like
the original.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from typing import Any

Fallback = Mapping[Any, Any] | Callable[[Any], Any]


def is_container(obj: object) -> bool:
    """Return True if `obj` is a container the copy operations recurse into."""
    return isinstance(obj, dict)


def blank_like(obj: dict) -> dict:
    """Return an empty container of the same class and state as `obj`.

    The container is rebuilt through the copy protocol, so state kept outside
    the instance ``__dict__`` (such as ``defaultdict.default_factory``) survives
    along with attributes like the `Table` fallback, which are shared by
    reference. The entries are then dropped.
    """
    if type(obj) is dict:
        return {}
    new = copy.copy(obj)
    new.clear()
    return new


class Table(dict):
    """A ``dict`` with optional fallback lookup and a display-order hook.

    Args:
        *args: Positional arguments accepted by ``dict``.
        fallback: Mapping or ``callable(key)`` used to resolve keys that are
            not own entries. Only ``table[key]`` consults it; ``get``, ``in``,
            iteration and ``len`` see own entries only.
        **kwargs: Keyword entries accepted by ``dict``.
    """

    def __init__(self, *args: Any, fallback: Fallback | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.fallback = fallback

    def __missing__(self, key: Any) -> Any:
        fallback = self.fallback
        if fallback is None:
            raise KeyError(key)
        if callable(fallback) and not isinstance(fallback, Mapping):
            return fallback(key)
        return fallback[key]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"

    def iter_entries(self) -> Iterator[tuple[Any, Any]]:
        """Yield own ``(key, value)`` pairs in display order."""
        return iter(self.items())


class SortedTable(Table):
    """A `Table` that displays its entries sorted by key.

    Keys that cannot be compared with each other are ordered by type name and
    then by ``repr``.
    """

    def iter_entries(self) -> Iterator[tuple[Any, Any]]:
        try:
            keys = sorted(self.keys())
        except TypeError:
            keys = sorted(self.keys(), key=lambda k: (type(k).__name__, repr(k)))
        return ((key, dict.__getitem__(self, key)) for key in keys)
