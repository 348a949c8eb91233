"""Translation of reader and parser failures into query errors.

Query operations open exactly one source and never retry. Any lower-layer
failure is re-raised as ``QueryFailedError`` chained to its cause.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from core.errors import LtsvIoError, LtsvParseError, QueryFailedError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@contextmanager
def translate_source_errors(source_name: str) -> Iterator[None]:
    """Convert ``LtsvIoError`` and ``LtsvParseError`` into ``QueryFailedError``.

    Args:
        source_name: Source name used in the diagnostic.

    Raises:
        QueryFailedError: When the wrapped block fails to read or parse.
    """
    try:
        yield
    except LtsvIoError as error:
        _LOGGER.debug("source_read_failed", source=source_name, error=str(error))
        raise QueryFailedError(f"failed to read {source_name}: IO error: {error}") from error
    except LtsvParseError as error:
        _LOGGER.debug(
            "source_parse_failed",
            source=source_name,
            line_number=error.line_number,
            error=str(error),
        )
        raise QueryFailedError(
            f"failed to parse {source_name}{_line_suffix(error)}: Parse error: {error}"
        ) from error


def _line_suffix(error: LtsvParseError) -> str:
    if error.line_number is None:
        return ""
    return f" at line {error.line_number}"
