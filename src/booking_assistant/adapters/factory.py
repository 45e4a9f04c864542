import os

from booking_assistant.domain.dates import DateTimeParser
from booking_assistant.domain.ledger import CustomerLedger


def create_customer_ledger(backend: str | None = None) -> CustomerLedger:
    """
    Factory: create the right ledger adapter based on config.

    The backend can be passed explicitly or read from the
    LEDGER_BACKEND env var. Defaults to "airtable".
    """
    backend = backend or os.environ.get("LEDGER_BACKEND", "airtable")

    if backend == "airtable":
        from .airtable_client import AirtableLedgerClient

        return AirtableLedgerClient(
            token=os.environ.get("AIRTABLE_TOKEN"),
            base_id=os.environ.get("AIRTABLE_BASE_ID"),
        )

    if backend == "simulator":
        from .simulator_ledger import SimulatorCustomerLedger

        return SimulatorCustomerLedger()

    raise ValueError(f"Unknown ledger backend: {backend!r}")


def create_date_parser(kind: str | None = None) -> DateTimeParser:
    """Same pattern for the date parser: DATE_PARSER, default "parsedatetime"."""
    kind = kind or os.environ.get("DATE_PARSER", "parsedatetime")

    if kind == "parsedatetime":
        from .parsedatetime_parser import ParsedatetimeParser

        return ParsedatetimeParser()

    if kind == "simulator":
        from .simulator_dates import SimulatorDateTimeParser

        return SimulatorDateTimeParser()

    raise ValueError(f"Unknown date parser: {kind!r}")
