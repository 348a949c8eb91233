"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RllqConfig
from core.errors import RllqConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to quiet logging and UTF-8 input."""
    monkeypatch.delenv("RLLQ_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RLLQ_INPUT_ENCODING", raising=False)

    config = RllqConfig.from_env()

    assert config.log_level == "warning"
    assert config.input_encoding == "utf-8"


def test_from_env_normalizes_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept case-insensitive levels and codec aliases."""
    monkeypatch.setenv("RLLQ_LOG_LEVEL", " DEBUG ")
    monkeypatch.setenv("RLLQ_INPUT_ENCODING", "latin1")

    config = RllqConfig.from_env()

    assert config.log_level == "debug"
    assert config.input_encoding == "iso8859-1"


def test_from_env_raises_for_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log levels."""
    monkeypatch.setenv("RLLQ_LOG_LEVEL", "loud")

    with pytest.raises(RllqConfigError):
        RllqConfig.from_env()


def test_from_env_raises_for_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for encodings Python cannot decode."""
    monkeypatch.setenv("RLLQ_INPUT_ENCODING", "not-a-codec")

    with pytest.raises(RllqConfigError):
        RllqConfig.from_env()
