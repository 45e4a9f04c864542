"""
Run context: the mutable record threaded through one pipeline run.

One RunContext is created per incoming message and owned by the pipeline
for the duration of that run.  Steps write into it; nothing keeps a
reference once the caller has consumed the result.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

Channel = Literal["web", "email", "sms"]
Intent = Literal["booking", "cancel", "reschedule", "info", "unknown"]
Severity = Literal["info", "warning", "error"]
RunStatus = Literal["success", "partial", "failed"]

CHANNELS: tuple[str, ...] = ("web", "email", "sms")


@dataclass
class RunContext:
    business_id: str
    channel: Channel
    raw_message: str

    intent: Intent | None = None
    customer_name: str | None = None
    requested_datetime: datetime | None = None
    requested_service: str | None = None

    validation_errors: list[str] = field(default_factory=list)
    actions_taken: list[str] = field(default_factory=list)
    response_message: str | None = None

    # Escalation shares the "info" intent tag; set once when the run starts.
    is_escalation: bool = False


@dataclass
class LogEvent:
    """One entry of a run's audit trail."""

    event_type: str
    severity: Severity
    message: str
    metadata: dict[str, Any] | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def derive_run_status(context: RunContext, events: list[LogEvent]) -> RunStatus:
    """partial on validation errors, failed if any event is an error."""
    status: RunStatus = "success"
    if context.validation_errors:
        status = "partial"
    if any(e.severity == "error" for e in events):
        status = "failed"
    return status
