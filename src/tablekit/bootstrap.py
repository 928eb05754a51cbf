"""Composition root: build the `TableKit` namespace handed to consumers.

Applications call `bootstrap` once at start-up and pass the returned
`TableKit` to whatever needs the collection operations, instead of reaching
for module-level globals.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from . import __version__
from .config import TableKitConfig
from .copying import deep_copy, extend, shallow_copy
from .dump import dump
from .logging import (
    CONSOLE_HANDLER_NAME,
    PROJECT_PREFIX,
    config_console_handler,
    log_startup,
)
from .predicates import all_match, any_match, contains
from .shaping import filter_entries, fold, transform
from .sizing import is_empty, length
from .views import RawView, raw

logger = logging.getLogger(__name__)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class TableKit:
    """Namespace exposing every collection operation.

    The attributes are the plain functions from the ``tablekit`` modules,
    except `dump`, whose default `max_depth` comes from `config`.
    """

    config: TableKitConfig
    all_match: Callable[..., bool] = all_match
    any_match: Callable[..., bool] = any_match
    contains: Callable[..., bool] = contains
    deep_copy: Callable[..., Any] = deep_copy
    dump: Callable[..., str] = dump
    extend: Callable[..., dict] = extend
    filter_entries: Callable[..., dict] = filter_entries
    fold: Callable[..., Any] = fold
    is_empty: Callable[..., bool] = is_empty
    length: Callable[..., int] = length
    shallow_copy: Callable[..., Any] = shallow_copy
    raw: Callable[..., RawView] = raw
    transform: Callable[..., dict] = transform


def make_dump(default_depth: int) -> Callable[..., str]:
    """Return `dump` with `default_depth` as its default `max_depth`."""

    def dump_with_default(obj: Any, max_depth: int = default_depth) -> str:
        return dump(obj, max_depth)

    return dump_with_default


def attach_console_handler(config: TableKitConfig) -> logging.Handler | None:
    """Attach a Rich console handler to ``tablekit`` and `config.extra_loggers`.

    Loggers that already carry a tablekit console handler are left alone, so
    bootstrapping several namespaces does not print each record twice.

    Returns:
        The new handler, or None when every target logger already had one.
    """
    targets = [
        logging.getLogger(name) for name in (PROJECT_PREFIX, *config.extra_loggers)
    ]
    targets = [
        target
        for target in targets
        if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in target.handlers)
    ]
    if not targets:
        logger.debug("Console handler already attached; skipping")
        return None

    handler = config_console_handler(
        level=config.log_level, debug_mode=config.debug, color=config.color
    )
    level = handler.level
    for target in targets:
        target.addHandler(handler)
        target.setLevel(min(target.getEffectiveLevel(), level))
    return handler


def bootstrap(config: TableKitConfig | None = None) -> TableKit:
    """Build the `TableKit` namespace.

    Args:
        config: Settings for the namespace. Defaults to ``TableKitConfig()``.

    Returns:
        A frozen `TableKit`.
    """
    if config is None:
        config = TableKitConfig()
    if config.console_logging:
        attach_console_handler(config)

    kit = TableKit(
        config=config,
        dump=make_dump(config.dump_depth),
    )
    log_startup(logger, version=__version__, config=config)
    return kit
