"""Unit tests for tablekit.logging."""

import logging

import pytest
from rich.logging import RichHandler

from tablekit.config import TableKitConfig
from tablekit.logging import (
    CONSOLE_HANDLER_NAME,
    ThirdPartyPrefixFilter,
    config_console_handler,
    log_startup,
)

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a minimal LogRecord for the given logger name."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    "name, prefix",
    [
        ("urllib3.connectionpool", "[urllib3]"),
        ("rich", "[rich]"),
        ("tablekit", ""),
        ("tablekit.copying", ""),
    ],
)
def test_third_party_prefix_filter(name, prefix):
    """Only records from other libraries get a bracketed prefix."""
    record = make_record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


def test_console_handler_defaults():
    """The default handler is a RichHandler with the prefix filter."""
    handler = config_console_handler()
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert handler.get_name() == CONSOLE_HANDLER_NAME
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)
    assert handler.formatter is not None
    fmt = handler.formatter._fmt  # pylint: disable=protected-access
    assert fmt == "%(prefix)s %(message)s"


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG level, a detailed format and no prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters
    assert "%(name)s" in handler.formatter._fmt  # pylint: disable=protected-access


def test_console_handler_without_color():
    """Disabling color gives a console without a color system."""
    assert config_console_handler(color=False).console.color_system is None


def test_console_handler_writes_to_stderr():
    """The console targets stderr."""
    assert config_console_handler().console.stderr is True


def test_log_startup(caplog):
    """log_startup emits a one-line summary and debug diagnostics."""
    caplog.set_level(logging.DEBUG, logger="tablekit.test")
    logger = logging.getLogger("tablekit.test")
    log_startup(logger, version="9.9.9", config=TableKitConfig(dump_depth=4))
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "tablekit 9.9.9: dump_depth=4, console=OFF"
    assert any(m.startswith("Python: ") for m in messages)
    assert any(m.startswith("Handlers: ") for m in messages)


def test_log_startup_reports_console_level(caplog):
    """With console logging on, the summary shows the console level."""
    caplog.set_level(logging.INFO, logger="tablekit.test")
    config = TableKitConfig(console_logging=True, log_level=logging.INFO)
    log_startup(logging.getLogger("tablekit.test"), version="1", config=config)
    assert "console=INFO" in caplog.records[0].getMessage()
