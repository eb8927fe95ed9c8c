"""Exception hierarchy for the Shift_JIS to UTF-8 converter."""

from __future__ import annotations


class Shiftjis2Utf8Error(Exception):
    """Base error carrying the process exit code used by the CLI."""

    exit_code: int = 1


class UsageError(Shiftjis2Utf8Error):
    """Raised for malformed invocations detected outside of Click parsing."""

    exit_code = 2


class ConfigError(UsageError):
    """Raised when the YAML configuration file is unreadable or invalid."""


class HomeDirectoryError(Shiftjis2Utf8Error):
    """Raised when the user's home directory cannot be resolved."""


class HistoryError(Shiftjis2Utf8Error):
    """Raised when the conversion history cannot be written or removed."""


class ConversionError(Shiftjis2Utf8Error):
    """Raised when a single file cannot be converted."""


class DecodeError(ConversionError):
    """Raised when file content is not valid in the legacy encoding."""
