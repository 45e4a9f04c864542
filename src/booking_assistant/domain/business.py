"""
BusinessDirectory port: the business configuration a run reads from.

The pipeline fetches one BusinessSnapshot before the first step and never
looks at the directory again during that run.  Edits made while a run is in
flight are not observed by it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class Service:
    name: str
    duration_minutes: int = 30


@dataclass(frozen=True)
class OpeningHour:
    day_of_week: int   # 0 = Monday, 6 = Sunday
    open_time: str     # "HH:MM"
    close_time: str    # "HH:MM"
    is_closed: bool = False


@dataclass(frozen=True)
class BusinessSnapshot:
    """Read-only view of one business's services and opening hours."""

    business_id: str
    name: str = ""
    services: tuple[Service, ...] = ()
    opening_hours: tuple[OpeningHour, ...] = ()
    timezone: str | None = None

    def __post_init__(self):
        days = [oh.day_of_week for oh in self.opening_hours]
        for day in days:
            if not 0 <= day <= 6:
                raise ValueError(f"day_of_week out of range: {day}")
        if len(set(days)) != len(days):
            raise ValueError("at most one opening hour per day_of_week")
        object.__setattr__(
            self, "services", tuple(sorted(self.services, key=lambda s: s.name))
        )
        object.__setattr__(
            self, "opening_hours",
            tuple(sorted(self.opening_hours, key=lambda oh: oh.day_of_week)),
        )

    def hours_for(self, day_of_week: int) -> OpeningHour | None:
        return next(
            (oh for oh in self.opening_hours if oh.day_of_week == day_of_week), None
        )


class BusinessDirectory(ABC):
    """
    Port: where business configuration lives.

    The pipeline only ever calls fetch(); store() is used by the
    configuration script and by tests to set things up.
    """

    @abstractmethod
    def fetch(self, business_id: str) -> BusinessSnapshot | None:
        """Return the current snapshot, or None if no such business exists."""
        ...

    @abstractmethod
    def store(self, snapshot: BusinessSnapshot) -> None:
        """Create or replace the configuration of snapshot.business_id."""
        ...
