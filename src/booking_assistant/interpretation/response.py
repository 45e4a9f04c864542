"""
Reply text for the customer, built from the final run context.

Branches are checked in priority order: escalation, validation errors,
confirmed booking, then one branch per intent.  The first branch that
applies writes context.response_message and returns.
"""

import re
from datetime import datetime

from booking_assistant.domain.business import DAY_NAMES, BusinessSnapshot
from booking_assistant.domain.context import RunContext

HOURS_QUESTION_PATTERN = re.compile(
    r"\b(hours|opening|when are you|what time|open|closed)\b"
)

ESCALATION_REPLY = (
    "I understand your frustration. Let me connect you with our team right away. "
    "Someone will reach out to you shortly."
)
ASK_SERVICE_AND_TIME = (
    "I'd be happy to help you book an appointment! Could you please let me know "
    "what service you'd like and when you'd prefer to come in?"
)
ASK_SERVICE = "Great! What service would you like to book?"
ASK_DIFFERENT_TIME = " Would you like to choose a different time?"
CANCEL_REPLY = (
    "I can help you cancel your appointment. Could you tell me what time it was "
    "scheduled for?"
)
RESCHEDULE_REPLY = (
    "I'd be happy to help you reschedule. What time would work better for you?"
)
HOURS_NOT_CONFIGURED = (
    "I'd be happy to share our hours! However, our hours haven't been configured "
    "yet. Please contact us directly for our current hours."
)
ASK_INFO = "I'd be happy to help! What information are you looking for?"
DEFAULT_REPLY = "I'm here to help! How can I assist you today?"


def format_booking_time(dt: datetime) -> str:
    """e.g. "Tuesday, October 20 at 3:00 PM"."""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%A}, {dt:%B} {dt.day} at {hour}:{dt.minute:02d} {meridiem}"


def format_opening_hours(business: BusinessSnapshot) -> str:
    lines = []
    for day, day_name in enumerate(DAY_NAMES):
        hours = business.hours_for(day)
        if hours is None or hours.is_closed:
            lines.append(f"{day_name}: Closed")
        else:
            lines.append(f"{day_name}: {hours.open_time} - {hours.close_time}")
    return "\n".join(lines)


def build_response(context: RunContext, business: BusinessSnapshot) -> None:
    if context.is_escalation:
        context.response_message = ESCALATION_REPLY
        context.actions_taken.append("escalation_triggered")
        return

    if context.validation_errors:
        context.response_message = _validation_reply(context)
        return

    if (
        context.intent == "booking"
        and context.requested_service
        and context.requested_datetime
    ):
        when = format_booking_time(context.requested_datetime)
        context.response_message = (
            f"Perfect! You're booked for a {context.requested_service} on {when}. "
            f"We'll see you then!"
        )
        context.actions_taken.append("booking_confirmed")
        return

    if context.intent == "cancel":
        context.response_message = CANCEL_REPLY
    elif context.intent == "reschedule":
        context.response_message = RESCHEDULE_REPLY
    elif context.intent == "info":
        context.response_message = _info_reply(context, business)
    else:
        context.response_message = DEFAULT_REPLY


def _validation_reply(context: RunContext) -> str:
    joined = ". ".join(context.validation_errors)
    if context.intent != "booking":
        return joined
    if not context.requested_service and not context.requested_datetime:
        return ASK_SERVICE_AND_TIME
    if not context.requested_service:
        return ASK_SERVICE
    if not context.requested_datetime:
        return f"Perfect! When would you like to schedule your {context.requested_service}?"
    # Both fields present, so the errors are about the requested time itself.
    return joined + ASK_DIFFERENT_TIME


def _info_reply(context: RunContext, business: BusinessSnapshot) -> str:
    if not HOURS_QUESTION_PATTERN.search(context.raw_message.lower()):
        return ASK_INFO
    if not business.opening_hours:
        return HOURS_NOT_CONFIGURED
    return (
        f"Here are our opening hours:\n\n{format_opening_hours(business)}\n\n"
        f"How can I help you today?"
    )
