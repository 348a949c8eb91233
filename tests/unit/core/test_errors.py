"""Unit tests for the error hierarchy."""

from __future__ import annotations

from core.errors import (
    CliError,
    LtsvNoHeaderError,
    LtsvParseError,
    QueryFailedError,
    RllqError,
    UnknownLabelError,
)


def test_no_header_error_is_a_parse_error() -> None:
    """Callers catching parse errors should also see empty inputs."""
    error = LtsvNoHeaderError("no ltsv record found in -", line_number=0)

    assert isinstance(error, LtsvParseError)
    assert error.line_number == 0


def test_parse_error_message_is_unprefixed() -> None:
    error = LtsvParseError("invalid ltsv item: foo", line_number=3)

    assert str(error) == "invalid ltsv item: foo"


def test_cli_errors_share_base() -> None:
    """CLI-facing errors should be catchable as one family."""
    unknown = UnknownLabelError("host")

    assert isinstance(unknown, CliError) and isinstance(unknown, RllqError)
    assert unknown.label == "host"
    assert str(unknown) == "unknown label: host"
    assert issubclass(QueryFailedError, CliError)
