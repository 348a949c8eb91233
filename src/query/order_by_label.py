"""Sort record lines by the value of one label.

The whole input is buffered because no line can be emitted before every
record has been seen.
"""

from __future__ import annotations

from core.constants import DEFAULT_INPUT_ENCODING
from core.logging_config import get_logger
from ltsv.line_source import open_line_source
from ltsv.record_parser import iter_records
from query.source_errors import translate_source_errors

_LOGGER = get_logger(__name__)


def order_by_label(
    source_name: str,
    label: str,
    encoding: str = DEFAULT_INPUT_ENCODING,
) -> list[str]:
    """Return original record lines sorted ascending by ``label``.

    The sort is stable and compares code points, which matches UTF-8 byte
    order. Records without ``label`` sort as the empty string.

    Args:
        source_name: File path, or ``-`` for standard input.
        label: Ordering label.
        encoding: Text encoding for named files.

    Returns:
        Every record line exactly once, without line terminators.

    Raises:
        QueryFailedError: If the source cannot be opened or parsed.
    """
    with translate_source_errors(source_name):
        with open_line_source(source_name, encoding) as source:
            keyed_lines = [
                (record.value(label), record.line) for record in iter_records(source)
            ]
    keyed_lines.sort(key=lambda pair: pair[0])
    _LOGGER.info(
        "order_by_finished",
        source=source_name,
        label=label,
        record_count=len(keyed_lines),
    )
    return [line for _, line in keyed_lines]
