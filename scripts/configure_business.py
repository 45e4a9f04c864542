#!/usr/bin/env python3
"""
Business configuration CLI: load or show services and opening hours.

Usage (from project root):
    python scripts/configure_business.py show
    python scripts/configure_business.py load business.json

business.json:
    {
      "name": "Deva's Barbers",
      "timezone": "Europe/London",
      "services": [{"name": "Haircut", "duration": 30}, {"name": "Shave"}],
      "openingHours": [
        {"dayOfWeek": 0, "openTime": "09:00", "closeTime": "17:00"},
        {"dayOfWeek": 6, "openTime": "00:00", "closeTime": "00:00", "isClosed": true}
      ]
    }
"""

import json
import os
import sys

# Allow running as `python scripts/configure_business.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from booking_assistant.adapters.sqlite_business import SqliteBusinessDirectory
from booking_assistant.domain.business import BusinessSnapshot, OpeningHour, Service
from booking_assistant.interpretation.response import format_opening_hours

DB_PATH = os.environ.get("DB_PATH", "data/booking.db")
BUSINESS_ID = os.environ.get("BUSINESS_ID", "default")


def snapshot_from_json(business_id: str, data: dict) -> BusinessSnapshot:
    if not data.get("name"):
        raise ValueError("Business name is required")
    return BusinessSnapshot(
        business_id=business_id,
        name=data["name"],
        timezone=data.get("timezone") or None,
        services=tuple(
            Service(name=s["name"], duration_minutes=int(s.get("duration") or 30))
            for s in data.get("services", [])
        ),
        opening_hours=tuple(
            OpeningHour(
                day_of_week=int(oh["dayOfWeek"]),
                open_time=oh["openTime"],
                close_time=oh["closeTime"],
                is_closed=bool(oh.get("isClosed", False)),
            )
            for oh in data.get("openingHours", [])
        ),
    )


def show(directory: SqliteBusinessDirectory) -> None:
    snapshot = directory.fetch(BUSINESS_ID)
    if snapshot is None:
        print(f"No business configured under {BUSINESS_ID!r}.")
        return
    print(f"\n{snapshot.name}  ({snapshot.timezone or 'no timezone'})\n")
    for s in snapshot.services:
        print(f"  {s.name:<24} {s.duration_minutes} min")
    print()
    print(format_opening_hours(snapshot))
    print()


def main() -> None:
    os.makedirs(os.path.dirname(DB_PATH) or ".", exist_ok=True)
    directory = SqliteBusinessDirectory(DB_PATH)

    if len(sys.argv) >= 3 and sys.argv[1] == "load":
        with open(sys.argv[2], encoding="utf-8") as f:
            data = json.load(f)
        try:
            directory.store(snapshot_from_json(BUSINESS_ID, data))
        except (KeyError, TypeError, ValueError) as exc:
            print(f"ERROR: invalid configuration: {exc}", file=sys.stderr)
            sys.exit(1)
        show(directory)
    elif len(sys.argv) >= 2 and sys.argv[1] == "show":
        show(directory)
    else:
        print(__doc__)


if __name__ == "__main__":
    main()
