"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

__all__ = [
    "DEFAULT_TEXT_PADDING",
    "DEFAULT_YEAR_SPAN",
    "EXPECTED_CRON_TOKENS",
    "REQUIRED_FIELD_SPECS",
    "FieldSpec",
    "ParseStatus",
    "RuleKind",
    "year_field_spec",
]

from typing import Final, NamedTuple

from cronparser.py_compatibility import StrEnum

EXPECTED_CRON_TOKENS: Final[int] = 6
"""Five time fields plus at least one command token."""

DEFAULT_TEXT_PADDING: Final[int] = 14
DEFAULT_YEAR_SPAN: Final[int] = 20


class RuleKind(StrEnum):
    """Enum of known field syntax rules, listed in the order they are tried."""

    Wildcard = "Wildcard"
    Range = "Range"
    List = "List"


class ParseStatus(StrEnum):
    """Outcome of expanding a field that did not raise."""

    Ok = "Ok"
    NotOk = "NotOk"


class FieldSpec(NamedTuple):
    """Legal inclusive bounds of a single cron position."""

    name: str
    lower: int
    upper: int


REQUIRED_FIELD_SPECS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("minute", 0, 59),
    FieldSpec("hour", 0, 23),
    FieldSpec("day of month", 1, 31),
    FieldSpec("month", 1, 12),
    FieldSpec("day of week", 0, 7),
)


def year_field_spec(current_year: int, span: int = DEFAULT_YEAR_SPAN) -> FieldSpec:
    """Return the optional year position starting at *current_year*."""
    return FieldSpec("year", current_year, current_year + span)
