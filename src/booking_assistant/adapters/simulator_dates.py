"""
SimulatorDateTimeParser: deterministic date/time grammar for tests.

No third-party parser.  Understands the handful of phrasings customers
actually use when booking: "today", "tomorrow", weekday names
("friday", "next monday"), and clock times ("3pm", "3:30 pm", "15:00",
"noon").  A day without a time implies 12:00; a time without a day
implies today.
"""

import re
from datetime import datetime, timedelta

from booking_assistant.domain.business import DAY_NAMES
from booking_assistant.domain.dates import DateTimeParser

_DAY_PATTERN = re.compile(
    r"\b(today|tonight|tomorrow|(?:next\s+)?(" + "|".join(d.lower() for d in DAY_NAMES) + r"))\b"
)
_TIME_PATTERN = re.compile(
    r"\b(\d{1,2})(?::(\d{2}))?\s*(am|pm)\b|\b(\d{1,2}):(\d{2})\b|\b(noon|midday|midnight)\b"
)


class SimulatorDateTimeParser(DateTimeParser):
    """
    Keyword date parser for tests.

    Pass `now` to pin "today"; otherwise the wall clock is used at each call.
    """

    def __init__(self, now: datetime | None = None):
        self._now = now

    async def parse_first(self, text: str) -> datetime | None:
        now = self._now or datetime.now()
        lower = text.lower()

        day = _match_day(lower, now)
        time = _match_time(lower)
        if day is None and time is None:
            return None

        base = day or now
        hour, minute = time if time is not None else (12, 0)
        return base.replace(hour=hour, minute=minute, second=0, microsecond=0)


def _match_day(text: str, now: datetime) -> datetime | None:
    m = _DAY_PATTERN.search(text)
    if not m:
        return None
    word = m.group(1)
    if word in ("today", "tonight"):
        return now
    if word == "tomorrow":
        return now + timedelta(days=1)
    target = [d.lower() for d in DAY_NAMES].index(m.group(2))
    ahead = (target - now.weekday()) % 7 or 7
    return now + timedelta(days=ahead)


def _match_time(text: str) -> tuple[int, int] | None:
    m = _TIME_PATTERN.search(text)
    if not m:
        return None
    if m.group(6):
        return (0, 0) if m.group(6) == "midnight" else (12, 0)
    if m.group(3):
        hour = int(m.group(1)) % 12
        if m.group(3) == "pm":
            hour += 12
        return hour, int(m.group(2) or 0)
    hour, minute = int(m.group(4)), int(m.group(5))
    if hour > 23 or minute > 59:
        return None
    return hour, minute
