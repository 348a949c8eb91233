"""Public SDK surface for Rllq.

This module provides a stable import path for library users.
It re-exports the query operations, record types, and errors.
"""

from __future__ import annotations

from core.config import RllqConfig
from core.errors import (
    CliError,
    LtsvIoError,
    LtsvNoHeaderError,
    LtsvParseError,
    NotEnoughArgsError,
    QueryFailedError,
    RllqError,
    TooManyArgsError,
    UnknownLabelError,
)
from ltsv.line_source import LineSource, SourceKind, open_line_source
from ltsv.record_parser import LtsvRecord, each_record, iter_records, parse_head, parse_line
from query.group_by_label import group_by_label
from query.list_labels import list_labels
from query.order_by_label import order_by_label
from query.select_labels import project_record, select_labels

__all__ = [
    "CliError",
    "LineSource",
    "LtsvIoError",
    "LtsvNoHeaderError",
    "LtsvParseError",
    "LtsvRecord",
    "NotEnoughArgsError",
    "QueryFailedError",
    "RllqConfig",
    "RllqError",
    "SourceKind",
    "TooManyArgsError",
    "UnknownLabelError",
    "each_record",
    "group_by_label",
    "iter_records",
    "list_labels",
    "open_line_source",
    "order_by_label",
    "parse_head",
    "parse_line",
    "project_record",
    "select_labels",
]
