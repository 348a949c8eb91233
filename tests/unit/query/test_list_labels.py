"""Unit tests for the list query."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import LtsvIoError, LtsvNoHeaderError, QueryFailedError
from query.list_labels import list_labels
from tests.fixture_paths import fake_stdin, fixture_path, write_ltsv


def test_list_labels_returns_header_labels() -> None:
    """Labels come from the first record in first-appearance order."""
    assert list_labels(fixture_path("access.ltsv")) == ["host", "status"]


def test_list_labels_reads_only_the_header(tmp_path: Path) -> None:
    """A malformed body must not affect listing."""
    source_name = write_ltsv(tmp_path, "body.ltsv", "a:1\tb:2\nbroken\n")

    assert list_labels(source_name) == ["a", "b"]


def test_list_labels_reads_standard_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", fake_stdin(b"\nx:1\ty:2\n"))

    assert list_labels("-") == ["x", "y"]


def test_list_labels_wraps_missing_file(tmp_path: Path) -> None:
    with pytest.raises(QueryFailedError) as error_info:
        list_labels(str(tmp_path / "missing.ltsv"))

    assert isinstance(error_info.value.__cause__, LtsvIoError)


def test_list_labels_wraps_empty_input() -> None:
    """Blank-only input is reported as a failed query caused by no header."""
    with pytest.raises(QueryFailedError) as error_info:
        list_labels(fixture_path("blank.ltsv"))

    assert isinstance(error_info.value.__cause__, LtsvNoHeaderError)
