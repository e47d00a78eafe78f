"""
Review session helpers used by the session orchestrator.

  due_candidates           — progress records that should be reviewed today
  prioritize               — candidates ranked by review_priority
  generate_review_session  — top-N word ids for today's queue
  signal_to_result         — UI answer button → ReviewResult
  apply_review             — one answered review folded into a progress record

Nothing here touches storage; the caller upserts the returned WordProgress
keyed on (user_id, word_id).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from wordwise import config
from wordwise.models.progress import PrioritizedWord, ReviewCandidate, WordProgress
from wordwise.models.schedule import ReviewResult, ReviewSignal
from wordwise.services import clock
from wordwise.services.mastery import calculate_mastery_level
from wordwise.services.scheduler import compute_next_review, is_due, review_priority

logger = logging.getLogger(__name__)

_SIGNAL_RESULTS = {
    ReviewSignal.FORGOT: (1, False),
    ReviewSignal.UNFAMILIAR: (3, True),
    ReviewSignal.KNEW_IT: (5, True),
}


def signal_to_result(signal: ReviewSignal) -> ReviewResult:
    quality, is_correct = _SIGNAL_RESULTS[ReviewSignal(signal)]
    return ReviewResult(quality=quality, is_correct=is_correct)


def due_candidates(
    progress: Iterable[WordProgress],
    today: date | None = None,
) -> list[ReviewCandidate]:
    today = today or clock.today()
    return [
        ReviewCandidate(
            word_id=p.word_id, schedule=p.schedule, mastery_level=p.mastery_level
        )
        for p in progress
        if is_due(p.schedule, today)
    ]


def prioritize(
    candidates: Iterable[ReviewCandidate],
    today: date | None = None,
) -> list[PrioritizedWord]:
    """Rank candidates most urgent first; equal scores keep input order."""
    today = today or clock.today()
    ranked = [
        PrioritizedWord(
            word_id=c.word_id,
            schedule=c.schedule,
            mastery_level=c.mastery_level,
            priority=review_priority(c.schedule, c.mastery_level, today),
        )
        for c in candidates
    ]
    ranked.sort(key=lambda w: w.priority, reverse=True)
    return ranked


def generate_review_session(
    candidates: Iterable[ReviewCandidate],
    max_words: int | None = None,
    today: date | None = None,
) -> list[str]:
    if max_words is None:
        max_words = config.settings.max_session_words
    if max_words <= 0:
        return []
    return [w.word_id for w in prioritize(candidates, today)[:max_words]]


def apply_review(
    progress: WordProgress,
    result: ReviewResult,
    now: datetime | None = None,
) -> WordProgress:
    """Return a copy of `progress` updated with one answered review."""
    now = now or clock.now()
    schedule = compute_next_review(progress.schedule, result, now.date())

    times_studied = progress.times_studied + 1
    times_correct = progress.times_correct + (1 if result.is_correct else 0)

    logger.debug(
        "Reviewed word %s for user %s: quality=%s correct=%s -> interval=%s reps=%s",
        progress.word_id,
        progress.user_id,
        result.quality,
        result.is_correct,
        schedule.interval,
        schedule.repetitions,
    )

    return progress.model_copy(
        update={
            "schedule": schedule,
            "times_studied": times_studied,
            "times_correct": times_correct,
            "last_studied": now,
            "mastery_level": calculate_mastery_level(times_studied, times_correct),
        }
    )
