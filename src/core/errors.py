"""Rllq exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Readers and parsers raise low-level errors; query operations translate
them into CLI-facing errors the entry point maps onto exit codes.
"""

from __future__ import annotations


class RllqError(Exception):
    """Base exception for all Rllq failures."""


class RllqConfigError(RllqError):
    """Raised for invalid runtime configuration."""


class LtsvIoError(RllqError):
    """Raised when a line source cannot be opened or read."""


class LtsvParseError(RllqError):
    """Raised when a line does not match the ``label:value`` shape.

    Attributes:
        line_number: One-based line number of the offending line, if known.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class LtsvNoHeaderError(LtsvParseError):
    """Raised when a source ends before any non-blank line is found."""


class CliError(RllqError):
    """Base class for errors surfaced at the command boundary."""


class NotEnoughArgsError(CliError):
    """Raised when no source file argument was supplied."""

    def __init__(self) -> None:
        super().__init__("not enough arguments: expected one FILE (or '-')")


class TooManyArgsError(CliError):
    """Raised when more than one source file argument was supplied."""

    def __init__(self, count: int) -> None:
        super().__init__(f"too many arguments: expected one FILE (or '-'), got {count}")
        self.count = count


class UnknownLabelError(CliError):
    """Raised when a requested label is absent from the header record."""

    def __init__(self, label: str) -> None:
        super().__init__(f"unknown label: {label}")
        self.label = label


class QueryFailedError(CliError):
    """Raised when a lower-layer open or parse failure aborts a query."""
