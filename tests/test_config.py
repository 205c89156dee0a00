"""Tests for settings resolution and environment bootstrap."""

import os

import pytest

from fukuoka_c19 import config
from fukuoka_c19.bootstrap_env import secrets_to_env
from fukuoka_c19.config import DisplayMode, Settings, load_settings, mode_config

ENV_KEYS = [
    "CASES_CSV_URL",
    "CASES_CSV_ENCODING",
    "CASES_DATE_COLUMN",
    "CASES_AGE_COLUMN",
    "CASES_LOCATION_COLUMN",
    "FETCH_TIMEOUT",
    "CACHE_TTL",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, clean_env) -> None:
        assert load_settings() == Settings()

    def test_env_overrides(self, clean_env) -> None:
        clean_env.setenv("CASES_CSV_URL", "https://example.invalid/x.csv")
        clean_env.setenv("CASES_CSV_ENCODING", "cp932")
        clean_env.setenv("FETCH_TIMEOUT", "5")
        clean_env.setenv("CACHE_TTL", "60")
        clean_env.setenv("LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.dataset_url == "https://example.invalid/x.csv"
        assert settings.encoding == "cp932"
        assert settings.timeout == 5.0
        assert settings.cache_ttl == 60
        assert settings.log_level == "DEBUG"

    def test_invalid_number_falls_back(self, clean_env, caplog) -> None:
        clean_env.setenv("CACHE_TTL", "soon")
        assert load_settings().cache_ttl == config.DEFAULT_CACHE_TTL
        assert "CACHE_TTL" in caplog.text


class TestModes:
    """Tests for display mode configuration."""

    def test_only_date_draws_averages(self) -> None:
        assert mode_config(DisplayMode.DATE).with_averages
        assert not mode_config(DisplayMode.AGE).with_averages
        assert not mode_config(DisplayMode.LOCATION).with_averages

    def test_every_mode_configured_once(self) -> None:
        assert sorted(m.mode.value for m in config.MODES) == sorted(m.value for m in DisplayMode)


class TestSecretsToEnv:
    """Tests for bridging Streamlit secrets into the environment."""

    def test_flattens_and_keeps_existing(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        for key in ("CASES_CSV_URL", "CASES_COLUMNS_DATE"):
            # set first so monkeypatch restores the original absence
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
        secrets_to_env(
            {
                "LOG_LEVEL": "DEBUG",
                "cases": {"csv-url": "https://example.invalid/a.csv", "columns": {"date": "日付"}},
            }
        )
        assert os.environ["LOG_LEVEL"] == "WARNING"
        assert os.environ["CASES_CSV_URL"] == "https://example.invalid/a.csv"
        assert os.environ["CASES_COLUMNS_DATE"] == "日付"
