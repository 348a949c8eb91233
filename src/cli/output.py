"""Console formatting for query results."""

from __future__ import annotations

from typing import Iterable, Mapping, TextIO

from core.constants import GROUP_COUNT_LABEL, ITEM_SEPARATOR, LABEL_SEPARATOR


def write_lines(lines: Iterable[str], stream: TextIO) -> int:
    """Write each line followed by a newline; return how many were written."""
    count = 0
    for line in lines:
        stream.write(line + "\n")
        count += 1
    return count


def format_group_counts(label: str, counts: Mapping[str, int]) -> list[str]:
    """Render group counts as ``label:value<TAB>count:N`` lines."""
    return [
        f"{label}{LABEL_SEPARATOR}{value}{ITEM_SEPARATOR}"
        f"{GROUP_COUNT_LABEL}{LABEL_SEPARATOR}{count}"
        for value, count in counts.items()
    ]
