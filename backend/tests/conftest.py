"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta

import pytest

from wordwise import config
from wordwise.models import ReviewSchedule, WordProgress


@pytest.fixture
def today() -> date:
    return date(2026, 3, 10)


@pytest.fixture
def now(today: date) -> datetime:
    return datetime(today.year, today.month, today.day, 9, 30)


@pytest.fixture
def reinforced_schedule(today: date) -> ReviewSchedule:
    """A word three successful reviews in, due today."""
    return ReviewSchedule(
        interval=15, ease_factor=2.6, repetitions=3, next_review_date=today
    )


@pytest.fixture
def make_progress():
    def _make(word_id: str, schedule: ReviewSchedule | None = None, **fields) -> WordProgress:
        return WordProgress(user_id="user-1", word_id=word_id, schedule=schedule, **fields)

    return _make


@pytest.fixture
def overdue(today: date):
    """Build a schedule that fell due `days` ago."""

    def _overdue(days: int, repetitions: int = 1) -> ReviewSchedule:
        return ReviewSchedule(
            interval=1,
            ease_factor=2.5,
            repetitions=repetitions,
            next_review_date=today - timedelta(days=days),
        )

    return _overdue


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from WORDWISE_* variables in the host environment."""
    monkeypatch.setattr(config, "settings", config.Settings.model_construct())
