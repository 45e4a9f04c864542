import logging

import requests

from booking_assistant.domain.ledger import BookingFields, CustomerLedger, LeadFields, LedgerResult

log = logging.getLogger(__name__)

BASE_URL = "https://api.airtable.com/v0"
NOT_CONFIGURED = "Airtable credentials not configured"


class AirtableLedgerClient(CustomerLedger):
    """Adapter: leads and bookings as rows in an Airtable base."""

    def __init__(
        self,
        token: str | None,
        base_id: str | None,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ):
        self._configured = bool(token and base_id)
        if not self._configured:
            log.warning("%s. Airtable integration will be disabled.", NOT_CONFIGURED)
        self._base_id = base_id
        self._timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            }
        )

    async def create_lead(self, lead: LeadFields) -> LedgerResult:
        return self._create("Leads", {
            "Name": lead.name or "Anonymous",
            "Channel": lead.channel,
            "Intent": lead.intent,
            "LastMessage": lead.last_message,
            "CreatedAt": lead.created_at,
            "UpdatedAt": lead.updated_at,
        })

    async def create_booking(self, booking: BookingFields) -> LedgerResult:
        return self._create("Bookings", {
            "Name": booking.name or "Anonymous",
            "Service": booking.service,
            "DateTime": booking.date_time.strftime("%Y-%m-%dT%H:%M:%S"),
            "Status": booking.status,
            "SourceMessage": booking.source_message,
            "Channel": booking.channel,
        })

    def _create(self, table: str, fields: dict) -> LedgerResult:
        if not self._configured:
            return LedgerResult.failed(NOT_CONFIGURED)

        url = f"{BASE_URL}/{self._base_id}/{table}"
        try:
            resp = self.session.post(url, json={"fields": fields}, timeout=self._timeout)
        except requests.RequestException as exc:
            log.error("Airtable %s request failed: %s", table, exc)
            return LedgerResult.failed(str(exc) or f"Failed to create record in {table}")

        if not resp.ok:
            error = _error_message(resp)
            log.error("Airtable %s rejected record: %s", table, error)
            return LedgerResult.failed(error)

        try:
            record_id = resp.json()["id"]
        except (ValueError, KeyError, TypeError) as exc:
            log.error("Airtable %s returned no record id: %r", table, exc)
            return LedgerResult.failed(f"Failed to create record in {table}")
        return LedgerResult.ok(record_id)


def _error_message(resp: requests.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = {}
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return f"Airtable API error: {resp.reason}"
