"""Public interface for the cronparser package."""

from __future__ import annotations

from .common import FieldSpec, ParseStatus, RuleKind
from .driver import CronFieldDriver, ParsedCronExpression, format_table, parse_cron_expression
from .errors import (
    CronBoundsError,
    CronConfigError,
    CronFieldError,
    CronInputError,
    CronParserError,
    CronSyntaxError,
)
from .expander import FieldResult, expand_field

__all__ = [
    "CronBoundsError",
    "CronConfigError",
    "CronFieldDriver",
    "CronFieldError",
    "CronInputError",
    "CronParserError",
    "CronSyntaxError",
    "FieldResult",
    "FieldSpec",
    "ParseStatus",
    "ParsedCronExpression",
    "RuleKind",
    "expand_field",
    "format_table",
    "parse_cron_expression",
]
