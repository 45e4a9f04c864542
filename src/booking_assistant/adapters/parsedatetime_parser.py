"""
ParsedatetimeParser: natural-language date parsing with `parsedatetime`.

Uses Calendar.nlp(), which scans free text and returns every date/time
expression it recognises in order of appearance; we keep the first one.
A bare month name with no day or time ("may I come in?") is not a date.
"""

import re
from datetime import datetime

import parsedatetime

from booking_assistant.domain.dates import DateTimeParser

_BARE_MONTH = re.compile(
    r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?$", re.IGNORECASE
)


class ParsedatetimeParser(DateTimeParser):
    """Date parser backed by parsedatetime's English locale."""

    def __init__(self, now: datetime | None = None):
        self._calendar = parsedatetime.Calendar(version=parsedatetime.VERSION_CONTEXT_STYLE)
        self._now = now

    async def parse_first(self, text: str) -> datetime | None:
        source = self._now or datetime.now()
        found = self._calendar.nlp(text, sourceTime=source.timetuple()) or ()
        for parsed, _flags, _start, _end, matched in found:
            if _BARE_MONTH.match(matched.strip()):
                continue
            return parsed.replace(microsecond=0)
        return None
