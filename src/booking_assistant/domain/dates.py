"""
DateTimeParser port: turns free text into an absolute point in time.

The pipeline does not parse dates itself; it hands the raw message to
this collaborator and keeps whatever comes back, unconverted.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class DateTimeParser(ABC):
    """
    Port: find the first date/time expression in a message.

    Implementations may use a natural-language library (ParsedatetimeParser)
    or a small deterministic grammar (SimulatorDateTimeParser).
    Both must satisfy the same contract.
    """

    @abstractmethod
    async def parse_first(self, text: str) -> datetime | None:
        """Return the first absolute datetime found in text, resolved
        relative to now, or None if the text mentions no date or time."""
        ...
