"""Configuration for a `tablekit.bootstrap.TableKit` namespace.

Settings are plain values held in a frozen dataclass. Nothing is read from the
environment; callers build a `TableKitConfig` themselves (directly, or from a
dict with `TableKitConfig.from_mapping`) and hand it to
`tablekit.bootstrap.bootstrap`.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any

from .errors import InvalidConfigError

DEFAULT_DUMP_DEPTH = 1  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class TableKitConfig:
    """Settings shared by every operation of a `TableKit`.

    Attributes:
        dump_depth: Default `max_depth` used by ``TableKit.dump``.
        log_level: Level of the console handler attached by ``bootstrap``.
        console_logging: Attach a Rich console handler to the ``tablekit``
            logger when bootstrapping.
        color: Enable color in the console handler.
        debug: Switch the console handler to its debug format (DEBUG level,
            timestamps, logger names and source locations).
        extra_loggers: Names of other loggers (the host application, third-party
            libraries) that get the same console handler. Their records are
            tagged with a short ``[name]`` prefix.
    """

    dump_depth: int = DEFAULT_DUMP_DEPTH
    log_level: int = logging.WARNING
    console_logging: bool = False
    color: bool = True
    debug: bool = False
    extra_loggers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.dump_depth < 0:
            raise InvalidConfigError("dump_depth", "must be zero or positive")
        if not isinstance(self.log_level, int) or logging.getLevelName(
            self.log_level
        ).startswith("Level "):
            raise InvalidConfigError("log_level", f"unknown level {self.log_level!r}")

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "TableKitConfig":
        """Build a config from a plain dict.

        Keys that are not config fields are ignored and missing keys keep
        their defaults. ``log_level`` may be given as a level name such as
        ``"DEBUG"``.

        Raises:
            InvalidConfigError: If a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {name: value for name, value in values.items() if name in known}
        if isinstance(level := kwargs.get("log_level"), str):
            kwargs["log_level"] = parse_level(level)
        if "extra_loggers" in kwargs:
            kwargs["extra_loggers"] = tuple(kwargs["extra_loggers"])
        return cls(**kwargs)


def parse_level(name: str) -> int:
    """Convert a textual level name (case-insensitive) to its numeric value.

    Raises:
        InvalidConfigError: If `name` is not a standard logging level.
    """
    if not isinstance(lvl := getattr(logging, name.strip().upper(), None), int):
        raise InvalidConfigError("log_level", f"invalid log level {name!r}")
    return lvl
