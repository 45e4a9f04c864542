"""Required-field and opening-hours validator tests."""

from datetime import datetime

import pytest

from booking_assistant.domain.business import BusinessSnapshot, OpeningHour
from booking_assistant.domain.context import RunContext
from booking_assistant.interpretation.validation import (
    DATETIME_REQUIRED,
    SERVICE_REQUIRED,
    validate_opening_hours,
    validate_required_fields,
)

TUESDAY = datetime(2026, 10, 20)
SATURDAY = datetime(2026, 10, 24)
SUNDAY = datetime(2026, 10, 25)


def _business() -> BusinessSnapshot:
    # Mon-Fri 09:00 to 17:00, Saturday closed, Sunday not configured.
    hours = tuple(OpeningHour(day, "09:00", "17:00") for day in range(5))
    return BusinessSnapshot(
        business_id="biz-1",
        opening_hours=hours + (OpeningHour(5, "00:00", "00:00", is_closed=True),),
    )


def _booking(when: datetime | None, service: str | None = "Haircut") -> RunContext:
    ctx = RunContext(business_id="biz-1", channel="web", raw_message="book")
    ctx.intent = "booking"
    ctx.requested_service = service
    ctx.requested_datetime = when
    return ctx


# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------


def test_complete_booking_passes():
    ctx = _booking(TUESDAY.replace(hour=10))
    assert validate_required_fields(ctx) == 0
    assert ctx.validation_errors == []


def test_both_missing_fields_are_reported():
    ctx = _booking(None, service=None)
    assert validate_required_fields(ctx) == 2
    assert ctx.validation_errors == [SERVICE_REQUIRED, DATETIME_REQUIRED]


def test_missing_service_only():
    ctx = _booking(TUESDAY.replace(hour=10), service=None)
    validate_required_fields(ctx)
    assert ctx.validation_errors == ["Service is required for booking"]


def test_missing_datetime_only():
    ctx = _booking(None)
    validate_required_fields(ctx)
    assert ctx.validation_errors == ["Date and time are required for booking"]


@pytest.mark.parametrize("intent", ["cancel", "reschedule", "info", "unknown"])
def test_required_fields_only_apply_to_bookings(intent):
    ctx = _booking(None, service=None)
    ctx.intent = intent
    assert validate_required_fields(ctx) == 0
    assert ctx.validation_errors == []


# ---------------------------------------------------------------------------
# Opening hours
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("hour, minute", [(9, 0), (12, 30), (17, 0)])
def test_inside_hours_boundaries_included(hour, minute):
    ctx = _booking(TUESDAY.replace(hour=hour, minute=minute))
    assert validate_opening_hours(ctx, _business()) == 0
    assert ctx.validation_errors == []


@pytest.mark.parametrize("hour, minute", [(8, 59), (17, 1), (22, 0)])
def test_outside_hours_rejected(hour, minute):
    ctx = _booking(TUESDAY.replace(hour=hour, minute=minute))
    assert validate_opening_hours(ctx, _business()) == 1
    assert ctx.validation_errors == ["We're open 09:00 to 17:00 on Tuesday"]


def test_closed_day():
    ctx = _booking(SATURDAY.replace(hour=11))
    validate_opening_hours(ctx, _business())
    assert ctx.validation_errors == ["We're closed on Saturday"]


def test_unconfigured_day_counts_as_closed():
    ctx = _booking(SUNDAY.replace(hour=11))
    validate_opening_hours(ctx, _business())
    assert ctx.validation_errors == ["We're closed on Sunday"]


def test_sunday_maps_to_last_day_of_week():
    business = BusinessSnapshot(
        business_id="biz-1",
        opening_hours=(OpeningHour(6, "10:00", "16:00"),),
    )
    ctx = _booking(SUNDAY.replace(hour=11))
    assert validate_opening_hours(ctx, business) == 0


def test_skipped_without_datetime():
    ctx = _booking(None)
    assert validate_opening_hours(ctx, _business()) == 0


def test_skipped_for_non_booking():
    ctx = _booking(SATURDAY.replace(hour=11))
    ctx.intent = "reschedule"
    assert validate_opening_hours(ctx, _business()) == 0


def test_errors_accumulate():
    ctx = _booking(SATURDAY.replace(hour=11), service=None)
    validate_required_fields(ctx)
    validate_opening_hours(ctx, _business())
    assert ctx.validation_errors == [SERVICE_REQUIRED, "We're closed on Saturday"]
