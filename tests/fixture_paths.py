"""Shared fixture path helpers for tests."""

from __future__ import annotations

import io
from pathlib import Path


def fixture_path(name: str) -> str:
    """Resolve an LTSV fixture file under tests/fixtures.

    Args:
        name: File name under the fixtures root.

    Returns:
        Absolute fixture path as a source name.
    """
    return str(Path(__file__).resolve().parent / "fixtures" / name)


def write_ltsv(directory: Path, name: str, content: str) -> str:
    """Write LTSV text into ``directory`` and return its source name."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def fake_stdin(data: bytes) -> io.TextIOWrapper:
    """Build a stand-in for ``sys.stdin`` backed by raw ``data`` bytes."""
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
