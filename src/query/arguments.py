"""Source argument validation shared by all query operations."""

from __future__ import annotations

from typing import Sequence

from core.errors import NotEnoughArgsError, TooManyArgsError


def resolve_source_name(paths: Sequence[str]) -> str:
    """Return the single source name from positional arguments.

    Args:
        paths: Positional file arguments; ``-`` means standard input.

    Returns:
        The only source name.

    Raises:
        NotEnoughArgsError: If no source was given.
        TooManyArgsError: If more than one source was given.
    """
    if not paths:
        raise NotEnoughArgsError()
    if len(paths) > 1:
        raise TooManyArgsError(len(paths))
    return paths[0]
