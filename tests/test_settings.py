"""Tests for settings loading and environment coercion."""

from __future__ import annotations

import dataclasses

import pytest

from cronparser.errors import CronConfigError
from cronparser.settings import CronParserSettings, CronParserSettingsKwargs


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for field in dataclasses.fields(CronParserSettings):
        monkeypatch.delenv(f"CRONPARSER_{field.name.upper()}", raising=False)


def test_defaults() -> None:
    """Without overrides the documented defaults are used."""
    assert CronParserSettings.load().as_dict() == {
        "text_padding": 14,
        "year_span": 20,
        "log_level": "WARNING",
    }


def test_env_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables are coerced to the field types."""
    monkeypatch.setenv("CRONPARSER_TEXT_PADDING", "20")
    monkeypatch.setenv("CRONPARSER_YEAR_SPAN", "5")
    monkeypatch.setenv("CRONPARSER_LOG_LEVEL", "debug")
    settings = CronParserSettings.load()
    assert settings.text_padding == 20
    assert settings.year_span == 5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("env_var", "raw_value"),
    [
        pytest.param("CRONPARSER_TEXT_PADDING", "wide", id="text-padding-not-a-number"),
        pytest.param("CRONPARSER_YEAR_SPAN", "-1", id="negative-year-span"),
        pytest.param("CRONPARSER_YEAR_SPAN", "2.5", id="fractional-year-span"),
    ],
)
def test_env_invalid(monkeypatch: pytest.MonkeyPatch, env_var: str, raw_value: str) -> None:
    """Invalid environment values raise a configuration error."""
    monkeypatch.setenv(env_var, raw_value)
    with pytest.raises(CronConfigError, match=f"{raw_value!r} is not a valid value") as exc_info:
        CronParserSettings.load()
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_kwargs_take_priority_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keyword overrides win over environment variables."""
    monkeypatch.setenv("CRONPARSER_YEAR_SPAN", "5")
    assert CronParserSettings.load(year_span=1).year_span == 1


def test_settings_kwargs_matches_settings_fields() -> None:
    """Kwargs TypedDict should stay in sync with CronParserSettings fields."""
    settings_fields = {field.name for field in dataclasses.fields(CronParserSettings)}
    kwargs_fields = set(CronParserSettingsKwargs.__annotations__)
    assert settings_fields == kwargs_fields


@pytest.mark.parametrize(
    "overrides",
    [
        pytest.param({"year_span": -3}, id="negative-year-span"),
        pytest.param({"text_padding": -1}, id="negative-text-padding"),
    ],
)
def test_negative_kwargs_rejected(overrides: CronParserSettingsKwargs) -> None:
    """Keyword overrides are validated like environment values."""
    with pytest.raises(CronConfigError, match="must be a non-negative integer"):
        CronParserSettings.load(**overrides)


def test_zero_year_span_allows_only_current_year() -> None:
    """A zero span is valid and keeps the year field non-empty."""
    assert CronParserSettings.load(year_span=0).year_span == 0
