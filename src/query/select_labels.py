"""Project requested labels out of every record.

The header is validated before any output is produced. Streaming then
continues on the same source, header first, so standard input works.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from core.constants import DEFAULT_INPUT_ENCODING, ITEM_SEPARATOR, LABEL_SEPARATOR
from core.errors import UnknownLabelError
from core.logging_config import get_logger
from ltsv.line_source import LineSource, open_line_source
from ltsv.record_parser import LtsvRecord, iter_records, parse_head
from query.source_errors import translate_source_errors

_LOGGER = get_logger(__name__)


def select_labels(
    source_name: str,
    labels: Sequence[str],
    encoding: str = DEFAULT_INPUT_ENCODING,
) -> Iterator[str]:
    """Open a source, validate ``labels`` and stream projected lines.

    Validation runs at call time; the returned iterator owns the source
    and closes it when exhausted, closed, or aborted.

    Args:
        source_name: File path, or ``-`` for standard input.
        labels: Requested labels in output order; must not be empty.
        encoding: Text encoding for named files.

    Returns:
        Lazy iterator of tab-joined ``label:value`` lines, one per record.

    Raises:
        ValueError: If ``labels`` is empty.
        UnknownLabelError: For the first requested label absent from the header.
        QueryFailedError: If the source cannot be opened or parsed.
    """
    if not labels:
        raise ValueError("select_labels requires at least one label")
    requested = tuple(labels)
    with translate_source_errors(source_name):
        source = open_line_source(source_name, encoding)
    try:
        with translate_source_errors(source_name):
            head = parse_head(source)
        _validate_labels(head, requested)
    except BaseException:
        source.close()
        raise
    return _stream_projection(source, head, requested)


def project_record(record: LtsvRecord, labels: Sequence[str]) -> str:
    """Format ``record`` as requested labels joined by tabs.

    A label missing from this record contributes an empty field.
    """
    return ITEM_SEPARATOR.join(
        f"{label}{LABEL_SEPARATOR}{record.fields[label]}" if label in record else ""
        for label in labels
    )


def _validate_labels(head: LtsvRecord, labels: Sequence[str]) -> None:
    for label in labels:
        if label not in head:
            raise UnknownLabelError(label)


def _stream_projection(
    source: LineSource,
    head: LtsvRecord,
    labels: Sequence[str],
) -> Iterator[str]:
    emitted = 0
    with source, translate_source_errors(source.name):
        yield project_record(head, labels)
        emitted += 1
        for record in iter_records(source):
            yield project_record(record, labels)
            emitted += 1
    _LOGGER.info("select_finished", source=source.name, record_count=emitted)
