from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    initial_ease_factor: float = 2.5
    min_ease_factor: float = 1.3  # SM-2 hard floor
    max_session_words: int = 20
    timezone: str | None = None  # IANA name; None = host local calendar day

    model_config = {"env_prefix": "WORDWISE_"}

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"unknown timezone {value!r}") from exc
        return value


settings = Settings()
