"""Core constants used across Rllq modules.

This module centralizes format and runtime defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

STDIN_SOURCE_NAME = "-"
DEFAULT_INPUT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
ITEM_SEPARATOR = "\t"
LABEL_SEPARATOR = ":"
GROUP_COUNT_LABEL = "count"
LOG_LEVEL_ENV_VAR = "RLLQ_LOG_LEVEL"
INPUT_ENCODING_ENV_VAR = "RLLQ_INPUT_ENCODING"
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_REPORTED_ERROR = 2
EXIT_OTHER_ERROR = 3
