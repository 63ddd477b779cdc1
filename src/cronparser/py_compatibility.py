"""Compatibility objects for the Python versions cronparser supports."""

__all__ = ["StrEnum"]

import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum
