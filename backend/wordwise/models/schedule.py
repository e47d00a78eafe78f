from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from wordwise import config


class ReviewSignal(str, Enum):
    FORGOT = "forgot"
    UNFAMILIAR = "unfamiliar"
    KNEW_IT = "knew_it"


class ReviewSchedule(BaseModel):
    interval: int = Field(ge=1)                      # days until next review
    ease_factor: float = Field(allow_inf_nan=False)  # interval growth multiplier
    repetitions: int = Field(ge=0)                   # consecutive successful reviews
    next_review_date: date

    @field_validator("ease_factor")
    @classmethod
    def _ease_above_floor(cls, value: float) -> float:
        floor = config.settings.min_ease_factor
        if value < floor:
            raise ValueError(f"ease_factor must be at least {floor}")
        return value


class ReviewResult(BaseModel):
    quality: int                     # 0=blackout .. 5=perfect; clamped, never rejected
    is_correct: bool
    response_time_ms: int | None = None
