"""
SM-2 review scheduler.

Operations:
  compute_next_review  — next interval / ease / repetitions / date for one word
  initial_schedule     — schedule for a word reviewed for the first time
  is_due               — whether a word should be shown today
  days_overdue         — whole days past the scheduled review date
  review_priority      — heuristic urgency score used to order a review queue

Everything here is pure: no storage, no shared state. Callers persist the
returned ReviewSchedule themselves.
"""
from __future__ import annotations

import logging
import math
from datetime import date, timedelta

from wordwise import config
from wordwise.models.schedule import ReviewResult, ReviewSchedule
from wordwise.services import clock

logger = logging.getLogger(__name__)

INITIAL_INTERVAL = 1
SECOND_INTERVAL = 6
MAX_INTERVAL = 36500  # keeps next_review_date within the date range
MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

NEW_WORD_PRIORITY = 100.0
OVERDUE_POINTS_PER_DAY = 10
OVERDUE_POINTS_CAP = 50
MASTERY_WEIGHT = 0.3
REPETITION_POINTS_CAP = 20
POINTS_PER_REPETITION = 2


def _clamp_quality(quality: int) -> int:
    if MIN_QUALITY <= quality <= MAX_QUALITY:
        return quality
    clamped = max(MIN_QUALITY, min(MAX_QUALITY, quality))
    logger.warning("Review quality %s out of range, using %s", quality, clamped)
    return clamped


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def adjust_ease_factor(ease_factor: float, quality: int) -> float:
    """Standard SM-2 ease update, floored at the configured minimum."""
    miss = MAX_QUALITY - quality
    updated = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(updated, config.settings.min_ease_factor)


def initial_schedule(is_correct: bool, today: date | None = None) -> ReviewSchedule:
    today = today or clock.today()
    return ReviewSchedule(
        interval=INITIAL_INTERVAL,
        ease_factor=config.settings.initial_ease_factor,
        repetitions=1 if is_correct else 0,
        next_review_date=today + timedelta(days=INITIAL_INTERVAL),
    )


def compute_next_review(
    current: ReviewSchedule | None,
    result: ReviewResult,
    today: date | None = None,
) -> ReviewSchedule:
    """
    Compute the schedule that follows one review of a word.

    A missing schedule means the word was never studied and is initialized.
    Failure (quality below 3 or an incorrect answer) sends the word back to
    daily review without touching its ease factor. Success grows the interval
    1 → 6 → interval * ease and adapts the ease factor.

    Never raises: quality outside 0–5 is clamped to the nearest bound, an
    ease factor below the floor is raised to it, and intervals are capped at
    MAX_INTERVAL days.
    """
    today = today or clock.today()

    if current is None:
        return initial_schedule(result.is_correct, today)

    quality = _clamp_quality(result.quality)
    ease_factor = current.ease_factor
    if not math.isfinite(ease_factor) or ease_factor < config.settings.min_ease_factor:
        ease_factor = config.settings.min_ease_factor

    if quality < PASSING_QUALITY or not result.is_correct:
        repetitions = 0
        interval = INITIAL_INTERVAL
    else:
        repetitions = current.repetitions + 1
        if repetitions == 1:
            interval = INITIAL_INTERVAL
        elif repetitions == 2:
            interval = SECOND_INTERVAL
        else:
            # Uses the ease factor from before this review's adjustment
            scaled = min(current.interval, MAX_INTERVAL) * ease_factor
            if scaled >= MAX_INTERVAL:
                interval = MAX_INTERVAL
            else:
                interval = max(INITIAL_INTERVAL, _round_half_up(scaled))
        ease_factor = adjust_ease_factor(ease_factor, quality)

    return ReviewSchedule(
        interval=interval,
        ease_factor=ease_factor,
        repetitions=repetitions,
        next_review_date=today + timedelta(days=interval),
    )


def is_due(schedule: ReviewSchedule | None, today: date | None = None) -> bool:
    if schedule is None:
        return True
    return (today or clock.today()) >= schedule.next_review_date


def days_overdue(schedule: ReviewSchedule | None, today: date | None = None) -> int:
    if schedule is None:
        return 0
    return max(0, ((today or clock.today()) - schedule.next_review_date).days)


def review_priority(
    schedule: ReviewSchedule | None,
    mastery_level: int,
    today: date | None = None,
) -> float:
    """
    Urgency score for ordering a review queue (higher = sooner).

    Never-studied words score NEW_WORD_PRIORITY. Otherwise the score is the
    sum of an overdue term (10/day, capped at 50), a low-mastery term (up to
    30) and a few-repetitions term (up to 20).
    """
    if schedule is None:
        return NEW_WORD_PRIORITY

    mastery = max(0, min(100, mastery_level))
    overdue = min(OVERDUE_POINTS_CAP, days_overdue(schedule, today) * OVERDUE_POINTS_PER_DAY)
    low_mastery = (100 - mastery) * MASTERY_WEIGHT
    few_reps = max(0, REPETITION_POINTS_CAP - schedule.repetitions * POINTS_PER_REPETITION)
    return float(overdue + low_mastery + few_reps)
