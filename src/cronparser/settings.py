"""Settings for the cronparser runtime and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import os
from typing import Any, TypedDict

from typing_extensions import NotRequired, Unpack

from cronparser.common import DEFAULT_TEXT_PADDING, DEFAULT_YEAR_SPAN
from cronparser.errors import CronConfigError

ENV_PREFIX = "CRONPARSER"


class CronParserSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronParserSettings.load`."""

    text_padding: NotRequired[int]
    year_span: NotRequired[int]
    log_level: NotRequired[str]


@dataclasses.dataclass
class CronParserSettings:
    """Strongly typed configuration holder for the parser and its CLI."""

    text_padding: int
    year_span: int
    log_level: str

    def __post_init__(self) -> None:
        """Reject negative widths and year spans however the settings were supplied."""
        for name in ("text_padding", "year_span"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{value!r} is not a valid value for {name!r}: must be a non-negative integer"
                raise CronConfigError(msg)

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "text_padding": DEFAULT_TEXT_PADDING,
            "year_span": DEFAULT_YEAR_SPAN,
            "log_level": "WARNING",
        }

    @classmethod
    def load(cls, **settings: Unpack[CronParserSettingsKwargs]) -> CronParserSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronParserSettings` object.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONPARSER_*`` environment variables."""
        coercers: dict[str, Any] = {
            "text_padding": _to_non_negative_int,
            "year_span": _to_non_negative_int,
            "log_level": str.upper,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronConfigError(msg) from exc
        return to_return


def _to_non_negative_int(value: str) -> int:
    result = int(value)
    if result < 0:
        msg = f"Must be a non-negative integer, got {value!r}"
        raise ValueError(msg)
    return result
