"""
Main interpretation pipeline.

Runs the step catalog in order against one RunContext:

  1. Code: classify intent (keyword rules)
  2. Code: extract name / service; collaborator: parse date and time
  3. Code: validate required fields and opening hours
  4. Collaborator: record lead and, when complete, booking in the ledger
  5. Code: build the reply

Every step is isolated: an exception inside a step becomes a single
"step_error_<step>" audit event and the run moves on.  The only thing
that stops a run before its first step is a missing business snapshot.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from booking_assistant.domain.business import BusinessDirectory, BusinessSnapshot
from booking_assistant.domain.context import Channel, LogEvent, RunContext, Severity
from booking_assistant.domain.dates import DateTimeParser
from booking_assistant.domain.ledger import CustomerLedger
from booking_assistant.interpretation.extraction import (
    extract_datetime,
    extract_name,
    extract_service,
)
from booking_assistant.interpretation.intent import classify_intent, is_escalation
from booking_assistant.interpretation.response import build_response
from booking_assistant.interpretation.validation import (
    validate_opening_hours,
    validate_required_fields,
)
from booking_assistant.recorders import booking_is_eligible, record_booking, record_lead
from booking_assistant.template import STEPS

log = logging.getLogger(__name__)

_LEVELS = {"info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR}


@dataclass
class PipelineConfig:
    directory: BusinessDirectory
    date_parser: DateTimeParser
    ledger: CustomerLedger


@dataclass
class PipelineResult:
    context: RunContext
    events: list[LogEvent]


class AuditTrail:
    """Append-only, ordered list of the events of one run."""

    def __init__(self, business_id: str):
        self.events: list[LogEvent] = []
        self._business_id = business_id

    def add(self, event: LogEvent) -> None:
        self.events.append(event)
        log.log(
            _LEVELS[event.severity], "biz=%s %s: %s",
            self._business_id, event.event_type, event.message,
        )

    def record(
        self,
        event_type: str,
        severity: Severity,
        message: str,
        metadata: dict | None = None,
    ) -> None:
        self.add(LogEvent(event_type, severity, message, metadata))


StepFn = Callable[[RunContext, BusinessSnapshot, AuditTrail], Awaitable[None]]


class Pipeline:
    """
    Stateless runner: one call to run() per incoming message.

    Runs share nothing, so several may be in flight at once.
    """

    def __init__(self, config: PipelineConfig, catalog: tuple[str, ...] = STEPS):
        self._cfg = config
        self._table: dict[str, StepFn] = {
            "detect_intent": self._detect_intent,
            "extract_name": self._extract_name,
            "extract_datetime": self._extract_datetime,
            "extract_service": self._extract_service,
            "validate_required_fields": self._validate_required_fields,
            "validate_opening_hours": self._validate_opening_hours,
            "create_lead": self._create_lead,
            "create_booking": self._create_booking,
            "build_response": self._build_response,
        }
        unknown = [name for name in catalog if name not in self._table]
        if unknown:
            raise ValueError(f"Unknown pipeline step(s): {', '.join(unknown)}")
        self._catalog = catalog

    async def run(
        self, business_id: str, channel: Channel, raw_message: str
    ) -> PipelineResult:
        context = RunContext(
            business_id=business_id,
            channel=channel,
            raw_message=raw_message,
            is_escalation=is_escalation(raw_message),
        )
        trail = AuditTrail(business_id)
        trail.record(
            "message_received", "info",
            f"Message received via {channel}",
            {"channel": channel, "messageLength": len(raw_message)},
        )

        try:
            business = self._cfg.directory.fetch(business_id)
            if business is None:
                raise LookupError("Business not found")
        except Exception as exc:
            trail.record(
                "workflow_error", "error",
                f"Workflow execution error: {exc}",
                {"error": str(exc)},
            )
            return PipelineResult(context=context, events=trail.events)

        for name in self._catalog:
            try:
                await self._table[name](context, business, trail)
            except Exception as exc:
                log.exception("biz=%s step %s raised", business_id, name)
                trail.record(
                    f"step_error_{name}", "error",
                    f"Error in step {name}: {exc}",
                    {"error": str(exc)},
                )

            if context.validation_errors and name == "build_response":
                break

        return PipelineResult(context=context, events=trail.events)

    # -- steps ----------------------------------------------------------------

    async def _detect_intent(self, context, business, trail) -> None:
        context.intent = classify_intent(context.raw_message)
        trail.record(
            "intent_detected", "info",
            f"Intent detected: {context.intent}",
            {"intent": context.intent},
        )

    async def _extract_name(self, context, business, trail) -> None:
        extract_name(context)
        if context.customer_name:
            trail.record(
                "name_extracted", "info",
                f"Customer name extracted: {context.customer_name}",
                {"name": context.customer_name},
            )

    async def _extract_datetime(self, context, business, trail) -> None:
        await extract_datetime(context, self._cfg.date_parser)
        if context.requested_datetime:
            iso = context.requested_datetime.isoformat()
            trail.record(
                "datetime_parsed", "info",
                f"DateTime parsed: {iso}",
                {"datetime": iso},
            )

    async def _extract_service(self, context, business, trail) -> None:
        extract_service(context, business)
        if context.requested_service:
            trail.record(
                "service_matched", "info",
                f"Service matched: {context.requested_service}",
                {"service": context.requested_service},
            )

    async def _validate_required_fields(self, context, business, trail) -> None:
        if validate_required_fields(context):
            trail.record(
                "validation_failed_missing_fields", "warning",
                "Required fields validation failed",
                {"errors": list(context.validation_errors)},
            )

    async def _validate_opening_hours(self, context, business, trail) -> None:
        if validate_opening_hours(context, business):
            trail.record(
                "validation_failed_outside_hours", "warning",
                "Opening hours validation failed",
                {"errors": list(context.validation_errors)},
            )

    async def _create_lead(self, context, business, trail) -> None:
        trail.add(await record_lead(context, self._cfg.ledger))

    async def _create_booking(self, context, business, trail) -> None:
        if booking_is_eligible(context):
            trail.add(await record_booking(context, self._cfg.ledger))

    async def _build_response(self, context, business, trail) -> None:
        build_response(context, business)
        if context.is_escalation:
            trail.record(
                "escalation_triggered", "warning",
                "Escalation triggered: customer handed over to the team",
            )
        trail.record(
            "response_generated", "info",
            "Response message generated",
            {"response": context.response_message},
        )
