"""Tests for settings and the calendar clock."""

import os
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from wordwise import config
from wordwise.services import clock


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in list(os.environ):
        if name.upper().startswith("WORDWISE_"):
            monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = config.Settings()
        assert settings.initial_ease_factor == 2.5
        assert settings.min_ease_factor == 1.3
        assert settings.max_session_words == 20

    def test_env_prefix(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WORDWISE_MAX_SESSION_WORDS", "5")
        clean_env.setenv("WORDWISE_TIMEZONE", "Asia/Shanghai")
        settings = config.Settings()
        assert settings.max_session_words == 5
        assert settings.timezone == "Asia/Shanghai"

    def test_unknown_timezone_fails_at_load(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WORDWISE_TIMEZONE", "Mars/Olympus_Mons")
        with pytest.raises(ValidationError, match="unknown timezone"):
            config.Settings()


class TestClock:
    def test_local_time_is_naive(self) -> None:
        assert clock.now().tzinfo is None

    def test_configured_zone(self) -> None:
        config.settings.timezone = "UTC"
        current = clock.now()
        assert current.utcoffset().total_seconds() == 0
        assert clock.today() == datetime.now(ZoneInfo("UTC")).date()
