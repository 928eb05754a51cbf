"""Copy and merge operations.

`deep_copy` and `shallow_copy` recurse only into containers (see
`tablekit.table.is_container`); anything else, including functions, read-only
views and other objects, is returned as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .table import blank_like, is_container

logger = logging.getLogger(__name__)


def deep_copy(obj: Any, seen: dict[int, Any] | None = None) -> Any:
    """Return a recursive copy of `obj`.

    Every key and value reachable from `obj` is copied. A container reached
    more than once (shared references, or a cycle back to an ancestor) is copied
    once and the same copy is reused, so the copy has the same shape as the
    original.

    Args:
        obj: The value to copy.
        seen: Maps ``id()`` of already copied containers to their copy. Leave it
            out; it is created per top-level call and threaded through the
            recursion.

    Returns:
        The copy, or `obj` itself when it is not a container.
    """
    if not is_container(obj):
        return obj
    if seen is None:
        seen = {}
    elif (copied := seen.get(id(obj))) is not None:
        logger.debug(
            "Reusing copy of already seen %s at %#x", type(obj).__name__, id(obj)
        )
        return copied

    new = blank_like(obj)
    # register before recursing so self references resolve to the new container
    seen[id(obj)] = new
    for key, value in obj.items():
        new[deep_copy(key, seen)] = deep_copy(value, seen)
    return new


def shallow_copy(obj: Any) -> Any:
    """Return a one-level copy of `obj`.

    The copy has the same class and instance state as `obj`; its values are the
    very same objects as the original's. Non-containers are returned as-is.
    """
    if not is_container(obj):
        return obj
    new = blank_like(obj)
    for key, value in obj.items():
        new[key] = value
    return new


def extend(
    target: dict[Any, Any] | None = None, *sources: Mapping[Any, Any] | None
) -> dict[Any, Any]:
    """Write the entries of every source into `target`, in order.

    Later sources win over earlier ones, and every source wins over what
    `target` already holds. ``None`` sources are skipped.

    Args:
        target: Container to update in place. A new ``dict`` is created when
            this is ``None``.
        *sources: Mappings whose entries are copied into `target`.

    Returns:
        `target` itself (or the new dict).
    """
    if target is None:
        target = {}
    logger.debug("Extending %s with %d source(s)", type(target).__name__, len(sources))
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            target[key] = value
    return target
