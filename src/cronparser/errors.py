"""Module containing cronparser-related errors."""


class CronParserError(Exception):
    """Base class for all cronparser errors."""


class CronInputError(CronParserError, ValueError):
    """Raised when the expression is missing or has too few tokens to be parsed at all."""


class CronFieldError(CronParserError, ValueError):
    """Base class for errors raised while expanding a single cron field."""


class CronSyntaxError(CronFieldError):
    """Raised when a field token is malformed (wrong separators, non-numeric parts)."""


class CronBoundsError(CronFieldError):
    """Raised when a field value lies outside the legal bounds of its position."""


class CronConfigError(CronParserError, ValueError):
    """Raised when configuration supplied by environment variables is invalid."""
