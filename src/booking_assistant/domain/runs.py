"""
RunStore port: history of finished pipeline runs and their audit trails.

Written by the Inbox after each run, read by the review script.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone

from booking_assistant.domain.context import LogEvent, RunContext, RunStatus


@dataclass
class RunRecord:
    """A finished run, as produced by the Inbox."""

    status: RunStatus
    context: RunContext
    events: list[LogEvent]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    run_id: int | None = None


@dataclass
class RunSummary:
    run_id: int
    status: RunStatus
    created_at: datetime
    channel: str
    message_preview: str   # first 100 chars, "..." appended when truncated
    intent: str | None
    customer_name: str | None
    requested_service: str | None
    response_message: str | None


@dataclass
class RunMetrics:
    total: int = 0
    success: int = 0
    failed: int = 0
    partial: int = 0
    booking_success: int = 0


class RunStore(ABC):

    @abstractmethod
    def save(self, record: RunRecord) -> int:
        """Persist a run and its events. Returns the run_id."""
        ...

    @abstractmethod
    def get(self, run_id: int) -> RunRecord | None:
        """Full run with its events in execution order, or None."""
        ...

    @abstractmethod
    def list_runs(self, limit: int = 50, offset: int = 0) -> list[RunSummary]:
        """Most recent runs first."""
        ...

    @abstractmethod
    def metrics(self) -> RunMetrics:
        """Counts per status, plus successful booking runs."""
        ...


def preview(text: str, length: int = 100) -> str:
    return text[:length] + ("..." if len(text) > length else "")


def is_booking_success(status: str, context: RunContext) -> bool:
    return (
        status == "success"
        and context.intent == "booking"
        and any(
            a.startswith("booking_created:") or a == "booking_confirmed"
            for a in context.actions_taken
        )
    )
