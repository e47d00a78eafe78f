from wordwise.services.mastery import (
    analyze_learning_pattern,
    calculate_mastery_level,
    calculate_quality,
    estimate_study_time,
    format_next_review,
)
from wordwise.services.scheduler import (
    compute_next_review,
    days_overdue,
    initial_schedule,
    is_due,
    review_priority,
)
from wordwise.services.session import (
    apply_review,
    due_candidates,
    generate_review_session,
    prioritize,
    signal_to_result,
)

__all__ = [
    "analyze_learning_pattern",
    "apply_review",
    "calculate_mastery_level",
    "calculate_quality",
    "compute_next_review",
    "days_overdue",
    "due_candidates",
    "estimate_study_time",
    "format_next_review",
    "generate_review_session",
    "initial_schedule",
    "is_due",
    "prioritize",
    "review_priority",
    "signal_to_result",
]
