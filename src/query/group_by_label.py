"""Count records per distinct value of one label."""

from __future__ import annotations

from core.constants import DEFAULT_INPUT_ENCODING
from core.logging_config import get_logger
from ltsv.line_source import open_line_source
from ltsv.record_parser import LtsvRecord, each_record
from query.source_errors import translate_source_errors

_LOGGER = get_logger(__name__)


def group_by_label(
    source_name: str,
    label: str,
    encoding: str = DEFAULT_INPUT_ENCODING,
) -> dict[str, int]:
    """Count occurrences of each value of ``label``.

    Records without ``label`` are skipped and not counted anywhere.

    Args:
        source_name: File path, or ``-`` for standard input.
        label: Grouping label.
        encoding: Text encoding for named files.

    Returns:
        Mapping from value to count, ordered by value ascending.

    Raises:
        QueryFailedError: If the source cannot be opened or parsed.
    """
    counts: dict[str, int] = {}

    def count_record(record: LtsvRecord) -> None:
        if label in record:
            value = record.fields[label]
            counts[value] = counts.get(value, 0) + 1

    with translate_source_errors(source_name):
        with open_line_source(source_name, encoding) as source:
            record_count = each_record(source, count_record)
    _LOGGER.info(
        "group_by_finished",
        source=source_name,
        label=label,
        record_count=record_count,
        group_count=len(counts),
    )
    return dict(sorted(counts.items()))
