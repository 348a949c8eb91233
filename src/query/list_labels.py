"""List the labels present in an LTSV source."""

from __future__ import annotations

from core.constants import DEFAULT_INPUT_ENCODING
from core.logging_config import get_logger
from ltsv.line_source import open_line_source
from ltsv.record_parser import parse_head
from query.source_errors import translate_source_errors

_LOGGER = get_logger(__name__)


def list_labels(source_name: str, encoding: str = DEFAULT_INPUT_ENCODING) -> list[str]:
    """Return the labels of the first record.

    Only the header line is read, so large inputs return immediately.

    Args:
        source_name: File path, or ``-`` for standard input.
        encoding: Text encoding for named files.

    Returns:
        Labels in first-appearance order within the header line.

    Raises:
        QueryFailedError: If the source cannot be opened or parsed.
    """
    with translate_source_errors(source_name):
        with open_line_source(source_name, encoding) as source:
            head = parse_head(source)
    labels = head.labels()
    _LOGGER.info("list_finished", source=source_name, label_count=len(labels))
    return labels
