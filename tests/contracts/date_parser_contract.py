"""
Contract tests for any DateTimeParser implementation.

The contract defines the behavioral guarantees:
- A relative day plus a clock time resolves against the reference moment
- A 12-hour clock time is read in 24-hour terms
- A message with no date or time yields None
- A bare month word such as the verb "may" is not a date
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

import pytest

from booking_assistant.domain.dates import DateTimeParser

# A Monday morning.
NOW = datetime(2026, 10, 19, 10, 0)


class DateTimeParserContract(ABC):

    @abstractmethod
    def create_parser(self, now: datetime) -> DateTimeParser:
        ...

    @pytest.mark.asyncio
    async def test_tomorrow_afternoon(self):
        parser = self.create_parser(NOW)
        result = await parser.parse_first("Can I book a haircut tomorrow at 3pm?")
        assert result is not None
        assert result.date() == (NOW + timedelta(days=1)).date()
        assert (result.hour, result.minute) == (15, 0)

    @pytest.mark.asyncio
    async def test_evening_time_is_24_hour(self):
        parser = self.create_parser(NOW)
        result = await parser.parse_first("I need a haircut tomorrow at 10pm")
        assert result is not None
        assert result.hour == 22

    @pytest.mark.asyncio
    async def test_no_date_returns_none(self):
        parser = self.create_parser(NOW)
        assert await parser.parse_first("Do you sell gift cards?") is None

    @pytest.mark.asyncio
    async def test_modal_may_is_not_a_month(self):
        parser = self.create_parser(NOW)
        assert await parser.parse_first("I'd like to book a trim, may I come in?") is None
