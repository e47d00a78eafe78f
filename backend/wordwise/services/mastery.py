from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date

from wordwise.models.progress import LearningPattern, LearningSample, LearningTrend
from wordwise.services import clock

FAST_RESPONSE_MS = 3000
SLOW_RESPONSE_MS = 10000
BASE_STUDY_SECONDS = 30
TREND_WINDOW = 5
TREND_THRESHOLD = 5

_RECOMMENDATIONS = {
    LearningTrend.IMPROVING: "Great progress! Consider raising your daily word count.",
    LearningTrend.STABLE: "Keep your current study pace.",
    LearningTrend.DECLINING: "Try fewer new words and more frequent reviews.",
}
_NOT_ENOUGH_DATA = "Keep studying to build up a learning pattern."


def calculate_quality(
    mastery_level: int,
    is_correct: bool,
    response_time_ms: int | None = None,
) -> int:
    """Derive an SM-2 quality (0–5) from mastery and answer speed."""
    if not is_correct:
        if mastery_level < 20:
            return 0
        return 1 if mastery_level < 50 else 2

    quality = mastery_level // 20 + 1
    if response_time_ms:
        if response_time_ms < FAST_RESPONSE_MS:
            quality = min(5, quality + 1)
        elif response_time_ms > SLOW_RESPONSE_MS:
            quality = max(1, quality - 1)
    return max(0, min(5, quality))


def calculate_mastery_level(
    times_studied: int,
    times_correct: int,
    recent_scores: Sequence[float] = (),
) -> int:
    """
    Mastery (0–100) from lifetime accuracy, optional recent scores (0–100)
    and a consistency bonus of 2 points per study, capped at 20.
    """
    if times_studied <= 0:
        return 0

    accuracy = times_correct / times_studied
    if recent_scores:
        recent = sum(recent_scores) / len(recent_scores) / 100
        weighted = accuracy * 0.6 + recent * 0.4
    else:
        weighted = accuracy

    bonus = min(20, times_studied * 2)
    level = math.floor(weighted * 80 + bonus + 0.5)
    return max(0, min(100, level))


def estimate_study_time(mastery_level: int, word_difficulty: int) -> int:
    """Seconds a word is expected to take; difficulty is on a 1–5 scale."""
    mastery_multiplier = (100 - mastery_level) / 100 + 0.5
    difficulty_multiplier = word_difficulty / 3
    return math.floor(BASE_STUDY_SECONDS * mastery_multiplier * difficulty_multiplier + 0.5)


def analyze_learning_pattern(samples: Sequence[LearningSample]) -> LearningPattern:
    if len(samples) < TREND_WINDOW:
        return LearningPattern(trend=LearningTrend.STABLE, recommendation=_NOT_ENOUGH_DATA)

    recent = samples[-TREND_WINDOW:]
    earlier = samples[-2 * TREND_WINDOW:-TREND_WINDOW]

    recent_avg = sum(s.mastery_level for s in recent) / len(recent)
    earlier_avg = (
        sum(s.mastery_level for s in earlier) / len(earlier) if earlier else recent_avg
    )
    improvement = recent_avg - earlier_avg

    if improvement > TREND_THRESHOLD:
        trend = LearningTrend.IMPROVING
    elif improvement < -TREND_THRESHOLD:
        trend = LearningTrend.DECLINING
    else:
        trend = LearningTrend.STABLE
    return LearningPattern(trend=trend, recommendation=_RECOMMENDATIONS[trend])


def format_next_review(next_review_date: date, today: date | None = None) -> str:
    days = (next_review_date - (today or clock.today())).days

    if days < 0:
        return "Review now"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days < 7:
        return f"In {days} days"
    if days < 30:
        weeks = math.ceil(days / 7)
        return f"In {weeks} week{'s' if weeks > 1 else ''}"
    months = math.ceil(days / 30)
    return f"In {months} month{'s' if months > 1 else ''}"
