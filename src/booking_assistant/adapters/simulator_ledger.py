from booking_assistant.domain.ledger import BookingFields, CustomerLedger, LeadFields, LedgerResult


class SimulatorCustomerLedger(CustomerLedger):
    """
    In-memory fake for testing. No mocking framework needed.

    Test helpers:
        fail_with(reason)    every following call reports a failure
        raise_on_next(exc)   the next call raises exc, then calls succeed again
        leads / bookings     fields received by successful calls, in order
    """

    def __init__(self):
        self.leads: list[LeadFields] = []
        self.bookings: list[BookingFields] = []
        self.calls = 0
        self._failure: str | None = None
        self._exception: Exception | None = None
        self._next_id = 1

    def fail_with(self, reason: str | None) -> None:
        """Test helper: report `reason` as a failure; None restores success."""
        self._failure = reason

    def raise_on_next(self, exc: Exception) -> None:
        """Test helper: make the next call raise instead of returning."""
        self._exception = exc

    async def create_lead(self, lead: LeadFields) -> LedgerResult:
        return self._create("lead", lead, self.leads)

    async def create_booking(self, booking: BookingFields) -> LedgerResult:
        return self._create("booking", booking, self.bookings)

    def _create(self, kind: str, fields, sink: list) -> LedgerResult:
        self.calls += 1
        if self._exception is not None:
            exc, self._exception = self._exception, None
            raise exc
        if self._failure is not None:
            return LedgerResult.failed(self._failure)
        sink.append(fields)
        record_id = f"sim-{kind}-{self._next_id}"
        self._next_id += 1
        return LedgerResult.ok(record_id)
