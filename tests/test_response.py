"""Response builder tests, one per branch in priority order."""

from datetime import datetime

from booking_assistant.domain.business import BusinessSnapshot, OpeningHour
from booking_assistant.domain.context import RunContext
from booking_assistant.interpretation.intent import classify_intent, is_escalation
from booking_assistant.interpretation.response import (
    ESCALATION_REPLY,
    build_response,
    format_booking_time,
)

WHEN = datetime(2026, 10, 20, 15, 0)  # Tuesday


def _business(hours: bool = True) -> BusinessSnapshot:
    opening = (
        tuple(OpeningHour(day, "09:00", "17:00") for day in range(6))
        + (OpeningHour(6, "00:00", "00:00", is_closed=True),)
    )
    return BusinessSnapshot(business_id="biz-1", opening_hours=opening if hours else ())


def _ctx(message: str, **fields) -> RunContext:
    ctx = RunContext(
        business_id="biz-1", channel="web", raw_message=message,
        is_escalation=is_escalation(message),
    )
    ctx.intent = classify_intent(message)
    for name, value in fields.items():
        setattr(ctx, name, value)
    return ctx


def test_escalation_overrides_everything():
    ctx = _ctx(
        "This is terrible, I want to book a haircut",
        intent="booking",
        validation_errors=["Date and time are required for booking"],
    )
    build_response(ctx, _business())
    assert ctx.response_message == ESCALATION_REPLY
    assert ctx.actions_taken == ["escalation_triggered"]


def test_booking_missing_both():
    ctx = _ctx(
        "I want to book",
        validation_errors=["Service is required for booking", "Date and time are required for booking"],
    )
    build_response(ctx, _business())
    assert ctx.response_message.startswith("I'd be happy to help you book an appointment!")


def test_booking_missing_service():
    ctx = _ctx("book tomorrow", requested_datetime=WHEN,
               validation_errors=["Service is required for booking"])
    build_response(ctx, _business())
    assert ctx.response_message == "Great! What service would you like to book?"


def test_booking_missing_datetime():
    ctx = _ctx("book a haircut", requested_service="Haircut",
               validation_errors=["Date and time are required for booking"])
    build_response(ctx, _business())
    assert ctx.response_message == "Perfect! When would you like to schedule your Haircut?"


def test_booking_outside_hours():
    ctx = _ctx(
        "book a haircut",
        requested_service="Haircut",
        requested_datetime=WHEN.replace(hour=22),
        validation_errors=["We're open 09:00 to 17:00 on Tuesday"],
    )
    build_response(ctx, _business())
    assert ctx.response_message == (
        "We're open 09:00 to 17:00 on Tuesday Would you like to choose a different time?"
    )
    assert "booking_confirmed" not in ctx.actions_taken


def test_non_booking_errors_are_joined():
    ctx = _ctx("hello", validation_errors=["First problem", "Second problem"])
    build_response(ctx, _business())
    assert ctx.response_message == "First problem. Second problem"


def test_confirmed_booking():
    ctx = _ctx("book a haircut", requested_service="Haircut", requested_datetime=WHEN)
    build_response(ctx, _business())
    assert ctx.response_message == (
        "Perfect! You're booked for a Haircut on Tuesday, October 20 at 3:00 PM. "
        "We'll see you then!"
    )
    assert ctx.actions_taken == ["booking_confirmed"]


def test_cancel():
    ctx = _ctx("I need to cancel")
    build_response(ctx, _business())
    assert "cancel your appointment" in ctx.response_message


def test_reschedule():
    ctx = _ctx("Can I reschedule?")
    build_response(ctx, _business())
    assert "reschedule" in ctx.response_message


def test_hours_listed_monday_first():
    ctx = _ctx("What are your opening hours?")
    build_response(ctx, _business())
    lines = ctx.response_message.split("\n")
    assert lines[0] == "Here are our opening hours:"
    assert lines[2:9] == [
        "Monday: 09:00 - 17:00",
        "Tuesday: 09:00 - 17:00",
        "Wednesday: 09:00 - 17:00",
        "Thursday: 09:00 - 17:00",
        "Friday: 09:00 - 17:00",
        "Saturday: 09:00 - 17:00",
        "Sunday: Closed",
    ]
    assert ctx.response_message.endswith("How can I help you today?")


def test_hours_not_configured():
    ctx = _ctx("When are you open?")
    build_response(ctx, _business(hours=False))
    assert "haven't been configured" in ctx.response_message


def test_generic_info():
    ctx = _ctx("How much does it cost?")
    build_response(ctx, _business())
    assert ctx.response_message == "I'd be happy to help! What information are you looking for?"


def test_default_reply():
    ctx = _ctx("Hello there")
    build_response(ctx, _business())
    assert ctx.response_message == "I'm here to help! How can I assist you today?"
    assert ctx.actions_taken == []


def test_booking_time_format():
    assert format_booking_time(datetime(2026, 10, 25, 9, 5)) == "Sunday, October 25 at 9:05 AM"
    assert format_booking_time(datetime(2026, 10, 20, 0, 30)) == "Tuesday, October 20 at 12:30 AM"
    assert format_booking_time(datetime(2026, 10, 20, 12, 0)) == "Tuesday, October 20 at 12:00 PM"
