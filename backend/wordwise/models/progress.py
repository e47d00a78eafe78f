from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from wordwise.models.schedule import ReviewSchedule


class WordProgress(BaseModel):
    user_id: str
    word_id: str
    mastery_level: int = Field(default=0, ge=0, le=100)
    times_studied: int = 0
    times_correct: int = 0
    last_studied: datetime | None = None
    schedule: ReviewSchedule | None = None  # None = never studied
    is_starred: bool = False
    is_in_vocabulary_book: bool = False


class ReviewCandidate(BaseModel):
    word_id: str
    schedule: ReviewSchedule | None = None
    mastery_level: int = 0


class PrioritizedWord(ReviewCandidate):
    priority: float


class LearningTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class LearningSample(BaseModel):
    studied_at: datetime
    is_correct: bool
    mastery_level: int


class LearningPattern(BaseModel):
    trend: LearningTrend
    recommendation: str
