"""Utility functions accessible from everywhere in the application."""

__all__ = ["parse_int"]

import re
from typing import Final

_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int:
    """Parse *token* as a base-10 integer.

    Unlike :func:`int`, surrounding whitespace, digit-group underscores and
    non-ASCII digits are rejected.

    :raises ValueError: If *token* is not a plain integer literal.
    """
    if not _INT_PATTERN.fullmatch(token):
        msg = f"invalid integer literal: {token!r}"
        raise ValueError(msg)
    return int(token)
