"""LTSV query operations.

Each module implements one query over a single line source and raises
only CLI-facing errors.
"""
