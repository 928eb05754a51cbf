"""Errors raised by tablekit."""


class TableKitError(Exception):
    """Base class for all tablekit errors."""


class ReadOnlyViewError(TableKitError, TypeError):
    """Raised when something tries to write through a read-only raw view."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Attempt to write to a read-only raw view (key={key!r}).")
        self.key = key


class InvalidConfigError(TableKitError, ValueError):
    """Raised when a configuration value is out of range or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid tablekit config ({field}): {reason}")
        self.field = field
        self.reason = reason
