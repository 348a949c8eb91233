"""LTSV record parsing.

Each non-blank line is one record of tab-separated ``label:value`` items.
Items split once on the first colon. Blank lines separate records and are
skipped. Malformed input always aborts the read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from core.constants import ITEM_SEPARATOR, LABEL_SEPARATOR
from core.errors import LtsvNoHeaderError, LtsvParseError
from core.logging_config import get_logger
from ltsv.line_source import LineSource

_LOGGER = get_logger(__name__)

RecordVisitor = Callable[["LtsvRecord"], None]


@dataclass(frozen=True)
class LtsvRecord:
    """One parsed LTSV line.

    Attributes:
        fields: Read-only label to value mapping.
        line: Original line text without its terminator.
        line_number: One-based position in the source, if known.
    """

    fields: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    line: str = ""
    line_number: int | None = None

    def labels(self) -> list[str]:
        """Return labels in first-appearance order."""
        return list(self.fields)

    def value(self, label: str, default: str = "") -> str:
        """Return the value for ``label`` or ``default`` when absent."""
        return self.fields.get(label, default)

    def __contains__(self, label: object) -> bool:
        return label in self.fields


def parse_line(line: str, line_number: int | None = None) -> LtsvRecord:
    """Parse one line into a record.

    Later duplicate labels overwrite earlier ones.

    Args:
        line: Raw line, with or without its terminator.
        line_number: Optional position used in error reports.

    Returns:
        Parsed record with at least one label.

    Raises:
        LtsvParseError: If any item has no colon.
    """
    text = _strip_terminator(line)
    fields: dict[str, str] = {}
    for item in text.split(ITEM_SEPARATOR):
        label, separator, value = item.partition(LABEL_SEPARATOR)
        if not separator:
            raise LtsvParseError(f"invalid ltsv item: {item}", line_number=line_number)
        fields[label] = value
    return LtsvRecord(fields=MappingProxyType(fields), line=text, line_number=line_number)


def parse_head(source: LineSource) -> LtsvRecord:
    """Parse the first non-blank line of a source.

    Args:
        source: Open line source, positioned at the start.

    Returns:
        The header record. It is also the first data record.

    Raises:
        LtsvNoHeaderError: If the source holds only blank lines.
        LtsvParseError: If the first substantive line is malformed.
        LtsvIoError: If the source cannot be read.
    """
    record = _next_record(source)
    if record is None:
        raise LtsvNoHeaderError(
            f"no ltsv record found in {source.name}", line_number=source.lines_read
        )
    _LOGGER.debug(
        "header_parsed",
        source=source.name,
        line_number=record.line_number,
        labels=record.labels(),
    )
    return record


def iter_records(source: LineSource) -> Iterator[LtsvRecord]:
    """Yield records until the source is exhausted."""
    while True:
        record = _next_record(source)
        if record is None:
            return
        yield record


def each_record(source: LineSource, visitor: RecordVisitor) -> int:
    """Invoke ``visitor`` once per record in the source.

    Args:
        source: Open line source.
        visitor: Consumer called with each parsed record.

    Returns:
        Number of records visited.

    Raises:
        LtsvParseError: On the first malformed line; earlier visits stand.
        LtsvIoError: If the source cannot be read.
    """
    count = 0
    for record in iter_records(source):
        visitor(record)
        count += 1
    return count


def _next_record(source: LineSource) -> LtsvRecord | None:
    """Read and parse the next non-blank line, or ``None`` at end-of-stream."""
    while True:
        line = source.read_line()
        if line is None:
            return None
        if _strip_terminator(line):
            return parse_line(line, line_number=source.lines_read)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
