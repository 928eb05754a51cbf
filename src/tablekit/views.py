"""Read-only views over the own entries of a container."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, NoReturn

from .errors import ReadOnlyViewError

logger = logging.getLogger(__name__)

_ABSENT = object()


class RawView(Mapping[Any, Any]):
    """A live, read-only view of the entries stored directly in a mapping.

    For a dict target, lookups go straight to the dict's own storage, so a
    `Table` fallback (or any ``__missing__`` hook) is never consulted: a key
    that only resolves through the fallback is absent from the view. Any other
    `Mapping` (another view, for instance) is read through its own mapping
    interface. The view keeps a reference to the target, not a snapshot, so
    later changes to the target show up in the view.

    Any attempt to write through the view raises `ReadOnlyViewError`.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Mapping[Any, Any]) -> None:
        object.__setattr__(self, "_target", target)

    def __getitem__(self, key: Any) -> Any:
        target = self._target
        if not isinstance(target, dict):
            return target[key]
        # dict.__getitem__ still calls __missing__ on subclasses
        value = dict.get(target, key, _ABSENT)
        if value is _ABSENT:
            raise KeyError(key)
        return value

    def __iter__(self) -> Iterator[Any]:
        target = self._target
        return dict.__iter__(target) if isinstance(target, dict) else iter(target)

    def __len__(self) -> int:
        target = self._target
        return dict.__len__(target) if isinstance(target, dict) else len(target)

    def __contains__(self, key: object) -> bool:
        target = self._target
        if isinstance(target, dict):
            return dict.__contains__(target, key)
        return key in target

    def __setitem__(self, key: Any, value: Any) -> NoReturn:
        self._reject(key)

    def __delitem__(self, key: Any) -> NoReturn:
        self._reject(key)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        self._reject(name)

    def __delattr__(self, name: str) -> NoReturn:
        self._reject(name)

    def __repr__(self) -> str:
        target = self._target
        shown = dict.__repr__(target) if isinstance(target, dict) else repr(target)
        return f"RawView({shown})"

    @staticmethod
    def _reject(key: Any) -> NoReturn:
        logger.error("Rejected write to read-only raw view (key=%r)", key)
        raise ReadOnlyViewError(key)


def raw(target: Mapping[Any, Any]) -> RawView:
    """Return a read-only `RawView` of the own entries of `target`.

    `target` is normally a dict; other mappings, including other views, are
    accepted and read through their mapping interface.
    """
    logger.debug("Creating raw view of %s at %#x", type(target).__name__, id(target))
    return RawView(target)
