"""Line sources for LTSV input.

This module opens standard input or a named file behind one
``read_line`` capability. Sources are forward-only and not rewindable.
"""

from __future__ import annotations

from enum import Enum
import io
from pathlib import Path
import sys
from types import TracebackType
from typing import IO, Iterator, cast

from core.constants import DEFAULT_INPUT_ENCODING, STDIN_SOURCE_NAME
from core.errors import LtsvIoError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class SourceKind(Enum):
    """Where a line source reads from."""

    STDIN = "stdin"
    FILE = "file"


class LineSource:
    """Forward-only reader of text lines.

    The source owns its stream. Only a line feed ends a line. Closing releases
    a file handle; the standard input wrapper is detached so the process
    stream stays open.
    """

    def __init__(self, name: str, kind: SourceKind, stream: IO[str]) -> None:
        self.name = name
        self.kind = kind
        self._stream = stream
        self._closed = False
        self.lines_read = 0

    @property
    def closed(self) -> bool:
        """Whether the source has released its stream."""
        return self._closed

    def read_line(self) -> str | None:
        """Read the next line including its terminator.

        Returns:
            The line text, or ``None`` at end-of-stream.

        Raises:
            LtsvIoError: If the stream cannot be read or decoded.
        """
        if self._closed:
            raise LtsvIoError(f"Cannot read from {self.name}: source is closed.")
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as error:
            raise LtsvIoError(
                f"Failed to read {self.name} after line {self.lines_read}: {error}"
            ) from error
        if not line:
            return None
        self.lines_read += 1
        return line

    def close(self) -> None:
        """Release the underlying stream."""
        if self._closed:
            return
        self._closed = True
        if self.kind is SourceKind.FILE:
            self._stream.close()
        else:
            cast(io.TextIOWrapper, self._stream).detach()
        _LOGGER.debug("line_source_closed", source=self.name, lines_read=self.lines_read)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def open_line_source(name: str, encoding: str = DEFAULT_INPUT_ENCODING) -> LineSource:
    """Open a line source by name.

    Args:
        name: File path, or ``-`` for standard input.
        encoding: Text encoding for the file or standard input.

    Returns:
        An open line source; use it as a context manager.

    Raises:
        LtsvIoError: If the file cannot be opened.
    """
    if name == STDIN_SOURCE_NAME:
        _LOGGER.debug("line_source_opened", source=name, kind=SourceKind.STDIN.value)
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, newline="")
        return LineSource(name, SourceKind.STDIN, stdin)
    try:
        stream = Path(name).open("r", encoding=encoding, newline="")
    except OSError as error:
        raise LtsvIoError(f"Failed to open {name}: {error.strerror or error}") from error
    _LOGGER.debug("line_source_opened", source=name, kind=SourceKind.FILE.value)
    return LineSource(name, SourceKind.FILE, stream)
