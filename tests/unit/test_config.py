"""
Unit tests for the config module.
"""

import pytest
from pydantic import ValidationError

from fastsort.config import (
    BaseAppSettings,
    DevelopmentSettings,
    ProductionSettings,
    TestingSettings,
    get_settings,
)


def test_base_app_settings_defaults():
    settings = BaseAppSettings()
    assert settings.APP_NAME == "FastSort"
    assert settings.DEBUG is False
    assert settings.SORT_QUERY_PARAMETER == "sort"
    assert settings.SORT_DEFAULT_DIRECTIONS == ["asc", "desc"]


def test_env_override(monkeypatch):
    monkeypatch.setenv("SORT_QUERY_PARAMETER", "order")
    monkeypatch.setenv("SORT_DEFAULT_DIRECTIONS", '["desc"]')
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = BaseAppSettings()
    assert settings.SORT_QUERY_PARAMETER == "order"
    assert settings.SORT_DEFAULT_DIRECTIONS == ["desc"]
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("value", ["", "sort[]", "sort[x"])
def test_invalid_query_parameter(value):
    with pytest.raises(ValidationError):
        BaseAppSettings(SORT_QUERY_PARAMETER=value)


def test_default_directions_required():
    with pytest.raises(ValidationError):
        BaseAppSettings(SORT_DEFAULT_DIRECTIONS=[])


@pytest.mark.parametrize(
    "env,expected",
    [
        (None, DevelopmentSettings),
        ("development", DevelopmentSettings),
        ("testing", TestingSettings),
        ("production", ProductionSettings),
    ],
)
def test_get_settings_selects_environment(monkeypatch, env, expected):
    if env:
        monkeypatch.setenv("APP_ENV", env)
    assert type(get_settings()) is expected


def test_production_defaults(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    settings = get_settings()
    assert settings.DEBUG is False
    assert settings.LOG_JSON_FORMAT is True
