"""
SQLite adapter for BusinessDirectory.

Use ":memory:" for tests, a file path for production.
"""

import sqlite3

from booking_assistant.domain.business import (
    BusinessDirectory,
    BusinessSnapshot,
    OpeningHour,
    Service,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS businesses (
    business_id TEXT PRIMARY KEY,
    name        TEXT NOT NULL DEFAULT '',
    timezone    TEXT
);

CREATE TABLE IF NOT EXISTS services (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    business_id TEXT NOT NULL REFERENCES businesses(business_id),
    name        TEXT NOT NULL,
    duration    INTEGER NOT NULL DEFAULT 30
);

CREATE TABLE IF NOT EXISTS opening_hours (
    business_id TEXT NOT NULL REFERENCES businesses(business_id),
    day_of_week INTEGER NOT NULL CHECK (day_of_week BETWEEN 0 AND 6),
    open_time   TEXT NOT NULL,
    close_time  TEXT NOT NULL,
    is_closed   INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (business_id, day_of_week)
);
"""


class SqliteBusinessDirectory(BusinessDirectory):

    def __init__(self, db_path: str = "booking.db"):
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def fetch(self, business_id: str) -> BusinessSnapshot | None:
        row = self._conn.execute(
            "SELECT * FROM businesses WHERE business_id = ?", (business_id,)
        ).fetchone()
        if not row:
            return None
        services = self._conn.execute(
            "SELECT name, duration FROM services WHERE business_id = ? ORDER BY name",
            (business_id,),
        ).fetchall()
        hours = self._conn.execute(
            "SELECT * FROM opening_hours WHERE business_id = ? ORDER BY day_of_week",
            (business_id,),
        ).fetchall()
        return BusinessSnapshot(
            business_id=row["business_id"],
            name=row["name"],
            timezone=row["timezone"],
            services=tuple(Service(s["name"], s["duration"]) for s in services),
            opening_hours=tuple(
                OpeningHour(
                    day_of_week=h["day_of_week"],
                    open_time=h["open_time"],
                    close_time=h["close_time"],
                    is_closed=bool(h["is_closed"]),
                )
                for h in hours
            ),
        )

    def store(self, snapshot: BusinessSnapshot) -> None:
        # Services and hours are replaced wholesale, in one transaction.
        with self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO businesses (business_id, name, timezone)"
                " VALUES (?, ?, ?)",
                (snapshot.business_id, snapshot.name, snapshot.timezone),
            )
            self._conn.execute(
                "DELETE FROM services WHERE business_id = ?", (snapshot.business_id,)
            )
            self._conn.execute(
                "DELETE FROM opening_hours WHERE business_id = ?", (snapshot.business_id,)
            )
            self._conn.executemany(
                "INSERT INTO services (business_id, name, duration) VALUES (?, ?, ?)",
                [(snapshot.business_id, s.name, s.duration_minutes) for s in snapshot.services],
            )
            self._conn.executemany(
                "INSERT INTO opening_hours"
                " (business_id, day_of_week, open_time, close_time, is_closed)"
                " VALUES (?, ?, ?, ?, ?)",
                [
                    (snapshot.business_id, oh.day_of_week, oh.open_time,
                     oh.close_time, int(oh.is_closed))
                    for oh in snapshot.opening_hours
                ],
            )
