"""Logging helpers shared by the cronparser modules."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

from functools import cached_property
import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        return logging.getLogger(cls.__name__)

    @cached_property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Attach a stream handler with *fmt* to the root logger and set its level.

    :param level: Numeric level or level name such as ``"DEBUG"``.
    :param fmt: Format string for the handler's formatter.
    :raises ValueError: If *level* is a string that does not name a logging level.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    root_logger = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
