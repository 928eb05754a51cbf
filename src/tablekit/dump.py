"""Human-readable rendering of nested containers.

`dump` is meant for log lines and debugging sessions, not for round-tripping:

* strings render as a double-quoted literal with ``"`` and ``\\`` escaped,
  newlines as ``\\n``, carriage returns as ``\\r`` and any other control
  character as a three-digit decimal escape (``\\000``);
* mappings render as ``{ [key] = value,[key] = value,} `` where keys are
  always rendered flat and values are expanded until `max_depth` runs out,
  after which a nested mapping renders as ``...``;
* everything else renders through ``str()``.

There is no cycle detection. A cyclic structure repeats itself in the output
but the output stays bounded by `max_depth`.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

ELLIPSIS = "..."  # pragma: no mutate

_CONTROL_OR_QUOTE = re.compile(r'["\\\x00-\x1f\x7f]')
_NAMED_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r"}


def _escape(match: re.Match[str]) -> str:
    char = match.group()
    return _NAMED_ESCAPES.get(char) or f"\\{ord(char):03d}"


def quote(text: str) -> str:
    """Return `text` as a double-quoted literal that fits on one line."""
    return '"' + _CONTROL_OR_QUOTE.sub(_escape, text) + '"'


def _entries(mapping: Mapping[Any, Any]) -> Iterable[tuple[Any, Any]]:
    # containers may choose their own display order
    hook = getattr(mapping, "iter_entries", None)
    return hook() if callable(hook) else mapping.items()


def dump(obj: Any, max_depth: int = 1) -> str:
    """Render `obj` as text.

    Args:
        obj: Value to render.
        max_depth: How many levels of nested mappings to expand. At ``0`` (or
            below) a mapping renders as ``...``. Keys are always rendered at
            depth ``0``.

    Returns:
        The rendered text.

    Example:
        ```py
        >>> dump({"a": {"b": 1}}, 1)
        '{ ["a"] = ...,} '
        >>> dump({"a": {"b": 1}}, 2)
        '{ ["a"] = { ["b"] = 1,} ,} '
        ```
    """
    if isinstance(obj, Mapping):
        if max_depth <= 0:
            return ELLIPSIS
        parts = ["{ "]
        for key, value in _entries(obj):
            parts.append(f"[{dump(key, 0)}] = {dump(value, max_depth - 1)},")
        parts.append("} ")
        return "".join(parts)
    if isinstance(obj, str):
        return quote(obj)
    return str(obj)
