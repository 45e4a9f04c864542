"""
CustomerLedger port: the external system of record for leads and bookings.

Ledger calls are best-effort side effects.  Outcomes come back as a
LedgerResult value rather than an exception so the pipeline can record
them and carry on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from booking_assistant.domain.context import Channel, Intent


@dataclass
class LeadFields:
    """What we send for every incoming message."""

    name: str | None
    channel: Channel
    intent: Intent
    last_message: str
    created_at: str   # ISO date "2026-10-19"
    updated_at: str


@dataclass
class BookingFields:
    """What we send once a booking request is complete and valid."""

    name: str | None
    service: str
    date_time: datetime
    source_message: str
    channel: Channel
    status: str = "confirmed"


@dataclass
class LedgerResult:
    success: bool
    record_id: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, record_id: str) -> "LedgerResult":
        return cls(success=True, record_id=record_id)

    @classmethod
    def failed(cls, error: str) -> "LedgerResult":
        return cls(success=False, error=error)


class CustomerLedger(ABC):
    """
    Port: record leads and bookings somewhere the business can see them.

    The pipeline depends ONLY on this interface.  It doesn't know whether
    records land in Airtable, a CRM, or an in-memory list.
    """

    @abstractmethod
    async def create_lead(self, lead: LeadFields) -> LedgerResult:
        ...

    @abstractmethod
    async def create_booking(self, booking: BookingFields) -> LedgerResult:
        ...
