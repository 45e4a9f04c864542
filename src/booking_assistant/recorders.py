"""
Lead and booking recorders: push a run's outcome to the customer ledger.

Each recorder makes at most one ledger call, folds the outcome into
context.actions_taken as "<action>_<created|failed>:<detail>", and returns
the audit event describing it.  Nothing raised by the ledger escapes.
"""

import logging
from datetime import datetime, timezone

from booking_assistant.domain.context import LogEvent, RunContext
from booking_assistant.domain.ledger import BookingFields, CustomerLedger, LeadFields

log = logging.getLogger(__name__)

BOOKING_INCOMPLETE = "Booking data incomplete"


async def record_lead(context: RunContext, ledger: CustomerLedger) -> LogEvent:
    today = datetime.now(timezone.utc).date().isoformat()
    lead = LeadFields(
        name=context.customer_name,
        channel=context.channel,
        intent=context.intent or "unknown",
        last_message=context.raw_message,
        created_at=today,
        updated_at=today,
    )
    try:
        result = await ledger.create_lead(lead)
    except Exception as exc:
        log.exception("ledger raised while creating lead")
        context.actions_taken.append(f"lead_failed:{exc}")
        return LogEvent(
            "lead_error", "error",
            f"Error creating lead: {exc}",
            {"error": str(exc)},
        )

    if result.success:
        context.actions_taken.append(f"lead_created:{result.record_id}")
        return LogEvent(
            "lead_created", "info",
            f"Lead created: {result.record_id}",
            {"recordId": result.record_id},
        )

    context.actions_taken.append(f"lead_failed:{result.error}")
    return LogEvent(
        "lead_failed", "warning",
        f"Failed to create lead: {result.error}",
        {"error": result.error},
    )


def booking_is_eligible(context: RunContext) -> bool:
    """Only booking runs without validation errors reach the ledger."""
    return context.intent == "booking" and not context.validation_errors


async def record_booking(context: RunContext, ledger: CustomerLedger) -> LogEvent:
    if context.requested_service is None or context.requested_datetime is None:
        return LogEvent(
            "booking_failed", "warning",
            f"Failed to create booking: {BOOKING_INCOMPLETE}",
            {"error": BOOKING_INCOMPLETE},
        )

    booking = BookingFields(
        name=context.customer_name,
        service=context.requested_service,
        date_time=context.requested_datetime,
        source_message=context.raw_message,
        channel=context.channel,
    )
    try:
        result = await ledger.create_booking(booking)
    except Exception as exc:
        log.exception("ledger raised while creating booking")
        context.actions_taken.append(f"booking_failed:{exc}")
        return LogEvent(
            "booking_error", "error",
            f"Error creating booking: {exc}",
            {"error": str(exc)},
        )

    if result.success:
        context.actions_taken.append(f"booking_created:{result.record_id}")
        return LogEvent(
            "booking_created", "info",
            f"Booking created: {result.record_id}",
            {"recordId": result.record_id},
        )

    context.actions_taken.append(f"booking_failed:{result.error}")
    return LogEvent(
        "booking_failed", "warning",
        f"Failed to create booking: {result.error}",
        {"error": result.error},
    )
