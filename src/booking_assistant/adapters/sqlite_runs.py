"""
SQLite adapter for RunStore.

Use ":memory:" for tests, a file path for production.  The run context is
stored as a JSON document; events get one row each, numbered in the order
they were emitted.
"""

import json
import sqlite3
from dataclasses import asdict
from datetime import datetime

from booking_assistant.domain.context import LogEvent, RunContext
from booking_assistant.domain.runs import (
    RunMetrics,
    RunRecord,
    RunStore,
    RunSummary,
    is_booking_success,
    preview,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS runs (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    business_id TEXT NOT NULL,
    channel     TEXT NOT NULL,
    raw_message TEXT NOT NULL,
    status      TEXT NOT NULL,
    context     TEXT NOT NULL,
    created_at  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS log_events (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    run_id      INTEGER NOT NULL REFERENCES runs(id),
    seq         INTEGER NOT NULL,
    event_type  TEXT NOT NULL,
    severity    TEXT NOT NULL,
    message     TEXT NOT NULL,
    metadata    TEXT,
    created_at  TEXT NOT NULL
);
"""


def _parse_dt(s: str) -> datetime:
    return datetime.fromisoformat(s)


def _context_to_json(context: RunContext) -> str:
    data = asdict(context)
    if context.requested_datetime is not None:
        data["requested_datetime"] = context.requested_datetime.isoformat()
    return json.dumps(data)


def _context_from_json(raw: str) -> RunContext:
    data = json.loads(raw)
    if data.get("requested_datetime"):
        data["requested_datetime"] = _parse_dt(data["requested_datetime"])
    return RunContext(**data)


class SqliteRunStore(RunStore):

    def __init__(self, db_path: str = "booking.db"):
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def save(self, record: RunRecord) -> int:
        ctx = record.context
        with self._conn:
            cur = self._conn.execute(
                "INSERT INTO runs (business_id, channel, raw_message, status, context, created_at)"
                " VALUES (?, ?, ?, ?, ?, ?)",
                (ctx.business_id, ctx.channel, ctx.raw_message, record.status,
                 _context_to_json(ctx), record.created_at.isoformat()),
            )
            assert cur.lastrowid is not None
            run_id = cur.lastrowid
            self._conn.executemany(
                "INSERT INTO log_events"
                " (run_id, seq, event_type, severity, message, metadata, created_at)"
                " VALUES (?, ?, ?, ?, ?, ?, ?)",
                [
                    (run_id, seq, e.event_type, e.severity, e.message,
                     json.dumps(e.metadata, default=str) if e.metadata is not None else None,
                     e.created_at.isoformat())
                    for seq, e in enumerate(record.events)
                ],
            )
        return run_id

    def get(self, run_id: int) -> RunRecord | None:
        row = self._conn.execute("SELECT * FROM runs WHERE id = ?", (run_id,)).fetchone()
        if not row:
            return None
        events = self._conn.execute(
            "SELECT * FROM log_events WHERE run_id = ? ORDER BY seq", (run_id,)
        ).fetchall()
        return RunRecord(
            run_id=row["id"],
            status=row["status"],
            context=_context_from_json(row["context"]),
            created_at=_parse_dt(row["created_at"]),
            events=[
                LogEvent(
                    event_type=e["event_type"],
                    severity=e["severity"],
                    message=e["message"],
                    metadata=json.loads(e["metadata"]) if e["metadata"] else None,
                    created_at=_parse_dt(e["created_at"]),
                )
                for e in events
            ],
        )

    def list_runs(self, limit: int = 50, offset: int = 0) -> list[RunSummary]:
        rows = self._conn.execute(
            "SELECT * FROM runs ORDER BY created_at DESC, id DESC LIMIT ? OFFSET ?",
            (limit, offset),
        ).fetchall()
        summaries = []
        for row in rows:
            ctx = _context_from_json(row["context"])
            summaries.append(RunSummary(
                run_id=row["id"],
                status=row["status"],
                created_at=_parse_dt(row["created_at"]),
                channel=row["channel"],
                message_preview=preview(row["raw_message"]),
                intent=ctx.intent,
                customer_name=ctx.customer_name,
                requested_service=ctx.requested_service,
                response_message=ctx.response_message,
            ))
        return summaries

    def metrics(self) -> RunMetrics:
        counts = {
            r[0]: r[1]
            for r in self._conn.execute("SELECT status, COUNT(*) FROM runs GROUP BY status")
        }
        successful = self._conn.execute(
            "SELECT context FROM runs WHERE status = 'success'"
        ).fetchall()
        return RunMetrics(
            total=sum(counts.values()),
            success=counts.get("success", 0),
            failed=counts.get("failed", 0),
            partial=counts.get("partial", 0),
            booking_success=sum(
                1 for r in successful
                if is_booking_success("success", _context_from_json(r["context"]))
            ),
        )
