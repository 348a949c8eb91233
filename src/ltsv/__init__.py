"""LTSV line sources and record parsing.

This package turns standard input or a named file into a stream of
label to value records, one per non-blank line.
"""
