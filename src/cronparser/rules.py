"""Syntax rules used to expand a single cron field into explicit values.

Each rule pairs a detector marker with an expander. Rules are tried in the order of
:data:`RULES`, and only the first rule whose marker occurs in the field runs. A field
matching no rule is left to the bare-integer fallback in :mod:`cronparser.expander`.
"""

from __future__ import annotations

__all__ = [
    "RULES",
    "SyntaxRule",
    "expand_list",
    "expand_range",
    "expand_wildcard",
    "expand_with_rule",
    "select_rule",
]

from itertools import chain
from typing import TYPE_CHECKING, Final, NamedTuple

from typing_extensions import assert_never

from cronparser.common import RuleKind
from cronparser.errors import CronBoundsError, CronSyntaxError
from cronparser.utils import parse_int

if TYPE_CHECKING:
    from cronparser.cron_types import FieldValues


class SyntaxRule(NamedTuple):
    """Detector for one kind of field syntax."""

    kind: RuleKind
    marker: str

    def matches(self, field: str) -> bool:
        """Return ``True`` when *field* uses this rule's syntax."""
        return self.marker in field


RULES: Final[tuple[SyntaxRule, ...]] = (
    SyntaxRule(RuleKind.Wildcard, "*"),
    SyntaxRule(RuleKind.Range, "-"),
    SyntaxRule(RuleKind.List, ","),
)


def select_rule(field: str) -> SyntaxRule | None:
    """Return the first rule of :data:`RULES` matching *field*, or ``None``."""
    for rule in RULES:
        if rule.matches(field):
            return rule
    return None


def expand_with_rule(rule: SyntaxRule, lower: int, upper: int, field: str) -> FieldValues:
    """Run the expander belonging to *rule*.

    :raises CronSyntaxError: If *field* is malformed.
    :raises CronBoundsError: If a value in *field* is outside ``[lower, upper]``.
    """
    match rule.kind:
        case RuleKind.Wildcard:
            return expand_wildcard(lower, upper, field)
        case RuleKind.Range:
            return expand_range(lower, upper, field)
        case RuleKind.List:
            return expand_list(lower, upper, field)
        case _:
            raise assert_never(rule.kind)


def expand_wildcard(lower: int, upper: int, field: str) -> FieldValues:
    """Expand ``*`` or ``*/step`` into every step-th value counted from *lower*."""
    # always split, without '/' we still end up with ['*']
    parts = field.split("/")
    if parts[0] != "*" or len(parts) > 2:
        msg = f"incorrect cron time field: {field!r}"
        raise CronSyntaxError(msg)

    step = 1
    if len(parts) == 2:
        try:
            step = parse_int(parts[1])
        except ValueError as exc:
            msg = f"err: {exc}, incorrect cron time field: {field!r}"
            raise CronSyntaxError(msg) from exc

    if step < 1 or step > upper:
        msg = f"incorrect cron time field: {field!r}"
        raise CronSyntaxError(msg)

    return tuple(str(value) for value in range(lower, upper + 1, step))


def expand_range(lower: int, upper: int, field: str) -> FieldValues:
    """Expand ``start-end`` into consecutive values.

    A range whose start is greater than its end wraps around: it runs up to *upper*
    and continues from *lower* until *end*, e.g. ``5-1`` over ``[0, 7]`` gives
    ``5 6 7 0 1``.
    """
    parts = field.split("-")
    if len(parts) != 2:
        msg = f"incorrect cron time field: {field!r}"
        raise CronSyntaxError(msg)

    try:
        start, end = parse_int(parts[0]), parse_int(parts[1])
    except ValueError as exc:
        msg = f"err: {exc}, incorrect cron time range field: {field!r}"
        raise CronSyntaxError(msg) from exc

    if not (lower <= start <= upper and lower <= end <= upper):
        msg = (
            f"cron time range specified exceeds limit for this time type, field: {field!r}, "
            f"minStartRange: {lower}, maxEndRange: {upper}"
        )
        raise CronBoundsError(msg)

    if start <= end:
        values = range(start, end + 1)
    else:
        values = chain(range(start, upper + 1), range(lower, end + 1))
    return tuple(str(value) for value in values)


def expand_list(lower: int, upper: int, field: str) -> FieldValues:
    """Validate every comma-separated token and return them as written."""
    tokens = field.split(",")
    for token in tokens:
        try:
            value = parse_int(token)
        except ValueError as exc:
            msg = f"field parsing failed err: {exc}, value: {token}, field: {field}"
            raise CronSyntaxError(msg) from exc
        if value < lower or value > upper:
            msg = (
                f"field parsing failed err: outside expected range [{lower}, {upper}], "
                f"value: {token}, field: {field}"
            )
            raise CronBoundsError(msg)
    return tuple(tokens)
