"""
Business-rule validators.

Violations are appended to context.validation_errors as human-readable
sentences; they end up verbatim in the reply.  Validators return the
number of errors they added so the caller can log them.
"""

from booking_assistant.domain.business import DAY_NAMES, BusinessSnapshot
from booking_assistant.domain.context import RunContext

SERVICE_REQUIRED = "Service is required for booking"
DATETIME_REQUIRED = "Date and time are required for booking"


def validate_required_fields(context: RunContext) -> int:
    if context.intent != "booking":
        return 0
    added = 0
    # Both checks always run.
    if not context.requested_service:
        context.validation_errors.append(SERVICE_REQUIRED)
        added += 1
    if not context.requested_datetime:
        context.validation_errors.append(DATETIME_REQUIRED)
        added += 1
    return added


def validate_opening_hours(context: RunContext, business: BusinessSnapshot) -> int:
    if context.intent != "booking" or context.requested_datetime is None:
        return 0

    requested = context.requested_datetime
    day = requested.weekday()   # Monday = 0, Sunday = 6
    day_name = DAY_NAMES[day]

    hours = business.hours_for(day)
    if hours is None or hours.is_closed:
        context.validation_errors.append(f"We're closed on {day_name}")
        return 1

    # "HH:MM" strings compare correctly as text; both bounds are inclusive.
    requested_time = f"{requested.hour:02d}:{requested.minute:02d}"
    if requested_time < hours.open_time or requested_time > hours.close_time:
        context.validation_errors.append(
            f"We're open {hours.open_time} to {hours.close_time} on {day_name}"
        )
        return 1
    return 0
