"""Field driver turning a whole cron expression into per-field expansions."""

from __future__ import annotations

__all__ = ["CronFieldDriver", "ParsedCronExpression", "format_table", "parse_cron_expression"]

from datetime import date
from typing import TYPE_CHECKING, NamedTuple

from cronparser.common import (
    DEFAULT_TEXT_PADDING,
    EXPECTED_CRON_TOKENS,
    REQUIRED_FIELD_SPECS,
    year_field_spec,
)
from cronparser.errors import CronInputError
from cronparser.expander import expand_field
from cronparser.logging import WithLogger

if TYPE_CHECKING:
    from cronparser.common import FieldSpec
    from cronparser.cron_types import FieldValues
    from cronparser.settings import CronParserSettings

_YEAR_INDEX = len(REQUIRED_FIELD_SPECS)


class ParsedCronExpression(NamedTuple):
    """Expanded fields in expression order followed by the command they schedule."""

    fields: tuple[tuple[FieldSpec, FieldValues], ...]
    command: str

    @property
    def has_year(self) -> bool:
        """Return ``True`` when the expression carried the optional year field."""
        return len(self.fields) > _YEAR_INDEX

    def values_for(self, name: str) -> FieldValues:
        """Return the expansion of the field called *name*.

        :raises KeyError: If no field with that name was parsed.
        """
        for spec, values in self.fields:
            if spec.name == name:
                return values
        msg = f"Field {name!r} is not present in the parsed expression"
        raise KeyError(msg)


class CronFieldDriver(WithLogger):
    """Expand every field of an expression, stopping at the first failure."""

    def __init__(self, *, current_year: int | None = None, year_span: int | None = None) -> None:
        """Initialise the driver.

        :param current_year: First legal year; defaults to the current local year.
        :param year_span: Number of years after *current_year* that are still legal.
        """
        year = current_year if current_year is not None else date.today().year
        if year_span is None:
            self._year_spec = year_field_spec(year)
        else:
            self._year_spec = year_field_spec(year, year_span)

    @property
    def year_spec(self) -> FieldSpec:
        """Return the bounds used when probing the optional year field."""
        return self._year_spec

    def parse(self, expression: str) -> ParsedCronExpression:
        """Parse *expression* into expanded fields and a command.

        :param expression: ``minute hour day-of-month month day-of-week [year] command...``
        :raises CronInputError: If *expression* is empty or has fewer than six tokens.
        :raises CronSyntaxError: If a required field is malformed.
        :raises CronBoundsError: If a required field has a value outside its bounds.
        """
        tokens = expression.split()
        if not tokens:
            msg = "Missing arguments"
            raise CronInputError(msg)
        if len(tokens) < EXPECTED_CRON_TOKENS:
            msg = (
                f"insufficient args provided for the cron command. "
                f"Expected: {EXPECTED_CRON_TOKENS}, got: {len(tokens)}"
            )
            raise CronInputError(msg)

        fields: list[tuple[FieldSpec, FieldValues]] = []
        for spec, token in zip(REQUIRED_FIELD_SPECS, tokens, strict=False):
            result = expand_field(spec, token)
            self._logger.debug("Expanded %s field %r into %s", spec.name, token, result.values)
            fields.append((spec, result.values))

        command_start = _YEAR_INDEX
        # the year is only taken when a command token still follows it
        if len(tokens) > _YEAR_INDEX + 1:
            year = expand_field(self._year_spec, tokens[_YEAR_INDEX], required=False)
            if year.ok:
                fields.append((self._year_spec, year.values))
                command_start += 1
            else:
                self._logger.debug(
                    "Token %r is not a year field, treating it as the command start",
                    tokens[_YEAR_INDEX],
                )

        return ParsedCronExpression(tuple(fields), " ".join(tokens[command_start:]))


def parse_cron_expression(
    expression: str,
    *,
    today: date | None = None,
    settings: CronParserSettings | None = None,
) -> ParsedCronExpression:
    """Parse *expression* with a fresh :class:`CronFieldDriver`.

    :param expression: Raw cron expression followed by its command.
    :param today: Date whose year opens the legal year range; defaults to today.
    :param settings: Optional settings providing the year span.
    """
    driver = CronFieldDriver(
        current_year=today.year if today is not None else None,
        year_span=settings.year_span if settings is not None else None,
    )
    return driver.parse(expression)


def format_table(parsed: ParsedCronExpression, padding: int = DEFAULT_TEXT_PADDING) -> list[str]:
    """Render *parsed* as ``name values`` lines with names left-justified to *padding*."""
    lines = [f"{spec.name:<{padding}} {' '.join(values)}" for spec, values in parsed.fields]
    lines.append(f"{'command':<{padding}} {parsed.command}")
    return lines
