#!/usr/bin/env python3
"""
Run history CLI: list recent pipeline runs and inspect their audit trail.

Usage (from project root):
    python scripts/review_runs.py              # metrics + 50 most recent runs
    python scripts/review_runs.py page 2       # runs 51-100
    python scripts/review_runs.py show 3       # full context + events of run #3
"""

import os
import sys

# Allow running as `python scripts/review_runs.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from booking_assistant.adapters.sqlite_runs import SqliteRunStore

DB_PATH = os.environ.get("DB_PATH", "data/booking.db")
PAGE_SIZE = 50


def list_runs(store: SqliteRunStore, page: int = 1) -> None:
    m = store.metrics()
    print(
        f"\nTotal {m.total}  |  success {m.success}  |  partial {m.partial}"
        f"  |  failed {m.failed}  |  bookings {m.booking_success}"
    )

    runs = store.list_runs(limit=PAGE_SIZE, offset=(page - 1) * PAGE_SIZE)
    if not runs:
        print("No runs.")
        return

    print(f"\n{'ID':>4}  {'Status':<8}  {'Channel':<6}  {'Intent':<11}  Message")
    print("-" * 80)
    for r in runs:
        message = r.message_preview[:44].replace("\n", " ")
        print(f"{r.run_id:>4}  {r.status:<8}  {r.channel:<6}  {r.intent or '-':<11}  {message}")
    print()


def show_run(store: SqliteRunStore, run_id: int) -> None:
    record = store.get(run_id)
    if not record:
        print(f"Run #{run_id} not found.")
        return

    ctx = record.context
    print(f"\n{'=' * 60}")
    print(f"  Run #{record.run_id}  |  {record.status}  |  {ctx.channel}")
    print(f"  Created: {record.created_at}")
    print(f"{'=' * 60}")
    print(f"  Message:   {ctx.raw_message}")
    print(f"  Intent:    {ctx.intent}")
    print(f"  Name:      {ctx.customer_name or '-'}")
    print(f"  Service:   {ctx.requested_service or '-'}")
    print(f"  Date/time: {ctx.requested_datetime or '-'}")
    for error in ctx.validation_errors:
        print(f"  Error:     {error}")
    for action in ctx.actions_taken:
        print(f"  Action:    {action}")
    print(f"\n{ctx.response_message or '(no reply)'}\n")
    for e in record.events:
        print(f"  {e.created_at:%H:%M:%S}  [{e.severity:<7}] {e.event_type}: {e.message}")
        if e.metadata:
            print(f"            {e.metadata}")
    print()


def main() -> None:
    os.makedirs(os.path.dirname(DB_PATH) or ".", exist_ok=True)
    store = SqliteRunStore(DB_PATH)

    if len(sys.argv) < 2:
        list_runs(store)
        return

    cmd = sys.argv[1]

    if cmd == "show" and len(sys.argv) >= 3:
        show_run(store, int(sys.argv[2]))
    elif cmd == "page" and len(sys.argv) >= 3:
        list_runs(store, int(sys.argv[2]))
    else:
        print(__doc__)


if __name__ == "__main__":
    main()
