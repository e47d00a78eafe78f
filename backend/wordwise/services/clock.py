from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from wordwise import config


def _zone() -> ZoneInfo | None:
    name = config.settings.timezone
    return ZoneInfo(name) if name else None


def now() -> datetime:
    """Current wall-clock time, in the configured zone when one is set."""
    zone = _zone()
    return datetime.now(zone) if zone else datetime.now()


def today() -> date:
    """Calendar day used for every due/overdue comparison."""
    return now().date()
