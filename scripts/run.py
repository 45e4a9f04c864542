"""
Process one customer message through the booking-assistant pipeline.

Reads the business configuration from SQLite, runs the full pipeline,
records the run, and prints the interpretation, the reply, and the
audit trail.

Usage:
    source .env && python scripts/run.py <web|email|sms> <message...>

Environment variables (all optional):
    DB_PATH           - SQLite database path (default: data/booking.db)
    BUSINESS_ID       - business to answer for (default: default)
    LEDGER_BACKEND    - "airtable" or "simulator" (default: airtable)
    AIRTABLE_TOKEN, AIRTABLE_BASE_ID
                      - Airtable credentials; without them lead/booking
                        recording is reported as failed and the run goes on
    DATE_PARSER       - "parsedatetime" or "simulator" (default: parsedatetime)
"""

import asyncio
import logging
import os
import sys

# Make sure the package is importable when run as a script
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from booking_assistant.adapters.factory import create_customer_ledger, create_date_parser
from booking_assistant.adapters.sqlite_business import SqliteBusinessDirectory
from booking_assistant.adapters.sqlite_runs import SqliteRunStore
from booking_assistant.inbox import Inbox, InvalidMessage
from booking_assistant.pipeline import Pipeline, PipelineConfig
from booking_assistant.template import TEMPLATE_NAME

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def build_inbox() -> Inbox:
    db_path = os.environ.get("DB_PATH", "data/booking.db")
    os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)

    config = PipelineConfig(
        directory=SqliteBusinessDirectory(db_path=db_path),
        date_parser=create_date_parser(),
        ledger=create_customer_ledger(),
    )
    return Inbox(
        Pipeline(config),
        store=SqliteRunStore(db_path=db_path),
        business_id=os.environ.get("BUSINESS_ID", "default"),
    )


async def main() -> None:
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)

    channel = sys.argv[1]
    message = " ".join(sys.argv[2:])

    try:
        record = await build_inbox().receive(channel, message)
    except InvalidMessage as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    ctx = record.context
    print(f"\n{'=' * 60}")
    print(f"  {TEMPLATE_NAME}  |  Run #{record.run_id}  |  {record.status}")
    print(f"{'=' * 60}")
    print(f"  Intent:    {ctx.intent}")
    print(f"  Name:      {ctx.customer_name or '-'}")
    print(f"  Service:   {ctx.requested_service or '-'}")
    print(f"  Date/time: {ctx.requested_datetime.isoformat() if ctx.requested_datetime else '-'}")
    if ctx.validation_errors:
        print(f"  Errors:    {'; '.join(ctx.validation_errors)}")
    if ctx.actions_taken:
        print(f"  Actions:   {', '.join(ctx.actions_taken)}")
    print(f"\n{ctx.response_message or '(no reply)'}\n")
    print("Audit trail:")
    for e in record.events:
        print(f"  [{e.severity:<7}] {e.event_type:<34} {e.message}")
    print()


if __name__ == "__main__":
    asyncio.run(main())
