"""Expansion of a single raw field against its :class:`~cronparser.common.FieldSpec`."""

from __future__ import annotations

__all__ = ["FieldResult", "expand_bare_integer", "expand_field"]

from typing import TYPE_CHECKING, NamedTuple

from cronparser.common import ParseStatus
from cronparser.errors import CronBoundsError, CronFieldError, CronSyntaxError
from cronparser.rules import expand_with_rule, select_rule
from cronparser.utils import parse_int

if TYPE_CHECKING:
    from cronparser.common import FieldSpec
    from cronparser.cron_types import FieldValues


class FieldResult(NamedTuple):
    """Values of an expanded field, or a soft ``NotOk`` failure.

    Hard failures are never represented here; they are raised as
    :class:`~cronparser.errors.CronFieldError` subclasses.
    """

    status: ParseStatus
    values: FieldValues = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when the field was expanded."""
        return self.status is ParseStatus.Ok


def expand_bare_integer(spec: FieldSpec, field: str) -> FieldResult:
    """Treat *field* as one literal integer.

    :returns: ``Ok`` with the original token, or ``NotOk`` if *field* is not an integer.
    :raises CronBoundsError: If the integer is outside the bounds of *spec*.
    """
    try:
        value = parse_int(field)
    except ValueError:
        return FieldResult(ParseStatus.NotOk)
    if value < spec.lower or value > spec.upper:
        msg = (
            f"{spec.name} field parsing failed err: outside expected range "
            f"[{spec.lower}, {spec.upper}], field: {field}"
        )
        raise CronBoundsError(msg)
    return FieldResult(ParseStatus.Ok, (field,))


def expand_field(spec: FieldSpec, field: str, *, required: bool = True) -> FieldResult:
    """Expand *field* with the first matching syntax rule, falling back to a bare integer.

    For a required field every failure is raised. For an optional field every failure,
    including syntax and bounds errors, is reported as ``NotOk`` instead.

    :param spec: Name and legal bounds of the position *field* came from.
    :param field: Raw token taken from the expression.
    :param required: Whether the position must be present in the expression.
    :raises CronSyntaxError: If a required field is malformed.
    :raises CronBoundsError: If a required field has a value outside the bounds of *spec*.
    """
    try:
        result = _expand(spec, field)
    except CronFieldError:
        if required:
            raise
        return FieldResult(ParseStatus.NotOk)

    if not result.ok and required:
        msg = f"{spec.name} field parsing validation failed, value: {field}"
        raise CronSyntaxError(msg)
    return result


def _expand(spec: FieldSpec, field: str) -> FieldResult:
    rule = select_rule(field)
    if rule is None:
        return expand_bare_integer(spec, field)

    try:
        values = expand_with_rule(rule, spec.lower, spec.upper, field)
    except CronFieldError as exc:
        msg = f"{spec.name} field parsing failed: {exc}"
        raise type(exc)(msg) from exc
    return FieldResult(ParseStatus.Ok, values)
