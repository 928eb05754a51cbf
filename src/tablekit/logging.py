"""Logging helpers for applications that embed tablekit.

The library only ever logs through ``logging.getLogger(__name__)`` and never
installs handlers on import. This module provides an opt-in Rich console
handler (attached by `tablekit.bootstrap.bootstrap` when the config asks for
it) and a filter that tags records coming from other libraries.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from .config import TableKitConfig

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "tablekit"
CONSOLE_HANDLER_NAME = "tablekit-console"  # pragma: no mutate


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    tablekit loggers the prefix is an empty string. The filter always returns
    True so the record is still handled.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes timestamps and source locations; otherwise a short
    third-party prefix is applied to each message.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler, ready to attach to a logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.set_name(CONSOLE_HANDLER_NAME)

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def log_startup(logger: Logger, *, version: str, config: TableKitConfig) -> None:
    """Log a one-line summary of a freshly built namespace, plus diagnostics.

    Args:
        logger: Logger used to emit the messages.
        version: tablekit version string.
        config: The configuration the namespace was built with.
    """
    logger.info(
        "tablekit %s: dump_depth=%s, console=%s",
        version,
        config.dump_depth,
        logging.getLevelName(config.log_level) if config.console_logging else "OFF",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug(
        "Handlers: %s",
        [type(h).__name__ for h in logging.getLogger(PROJECT_PREFIX).handlers],
    )
