"""Command line entry point printing the expansion table of a cron expression."""

from __future__ import annotations

__all__ = ["USAGE_HINT", "main"]

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import Final, NoReturn

from cronparser.driver import format_table, parse_cron_expression
from cronparser.errors import CronInputError, CronParserError
from cronparser.logging import configure_logging
from cronparser.settings import CronParserSettings

USAGE_HINT: Final[str] = "Usage: cronparser '*/15 0 1,15 * 1-5 /usr/bin/find'"

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors as :class:`CronInputError`."""

    def error(self, message: str) -> NoReturn:
        raise CronInputError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="cronparser",
        description="Expand each field of a cron expression into the values it denotes.",
        epilog=USAGE_HINT,
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default="",
        help="minute hour day-of-month month day-of-week [year] command, as a single argument",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the expression given on the command line and print its table.

    Nothing is printed to stdout unless every field was expanded successfully.

    :returns: ``0`` on success, ``1`` if configuration or the expression is invalid.
    """
    args_list = list(argv) if argv is not None else sys.argv[1:]

    try:
        args = _build_parser().parse_args(args_list)
        settings = CronParserSettings.load()
        configure_logging(level=settings.log_level)
        parsed = parse_cron_expression(args.expression, settings=settings)
    except (CronParserError, ValueError) as exc:
        logger.error("cron_parser - Error: %s, Args: %r, %s", exc, args_list, USAGE_HINT)
        return 1

    print("\n".join(format_table(parsed, settings.text_padding)), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
