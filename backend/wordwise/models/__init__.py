from wordwise.models.progress import (
    LearningPattern,
    LearningSample,
    LearningTrend,
    PrioritizedWord,
    ReviewCandidate,
    WordProgress,
)
from wordwise.models.schedule import ReviewResult, ReviewSchedule, ReviewSignal

__all__ = [
    "LearningPattern",
    "LearningSample",
    "LearningTrend",
    "PrioritizedWord",
    "ReviewCandidate",
    "ReviewResult",
    "ReviewSchedule",
    "ReviewSignal",
    "WordProgress",
]
