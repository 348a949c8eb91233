"""Runtime configuration model for Rllq.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_INPUT_ENCODING,
    DEFAULT_LOG_LEVEL,
    INPUT_ENCODING_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RllqConfigError


@dataclass(frozen=True)
class RllqConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level of structured log events written to stderr.
        input_encoding: Text encoding used to decode line sources.
    """

    log_level: str
    input_encoding: str

    @classmethod
    def from_env(cls) -> "RllqConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RllqConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        input_encoding = _parse_encoding(os.getenv(INPUT_ENCODING_ENV_VAR, DEFAULT_INPUT_ENCODING))
        return cls(log_level=log_level, input_encoding=input_encoding)


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lower-case level name.

    Raises:
        RllqConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise RllqConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: expected one of "
            f"{SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level


def _parse_encoding(raw_value: str) -> str:
    """Validate the input encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Canonical codec name.

    Raises:
        RllqConfigError: If Python has no codec with this name.
    """
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise RllqConfigError(
            f"Invalid {INPUT_ENCODING_ENV_VAR} value: unknown encoding '{raw_value}'. "
            "Set it to a codec name such as utf-8."
        ) from error
