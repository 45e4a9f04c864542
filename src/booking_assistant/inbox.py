"""
Inbox: the entry point for one incoming customer message.

Validates the input, runs the pipeline, derives the run status and, when
a RunStore is configured, records the run.  Kept free of HTTP and CLI
concerns so it can be driven from scripts and tests alike.
"""

import logging

from booking_assistant.domain.context import CHANNELS, derive_run_status
from booking_assistant.domain.runs import RunRecord, RunStore
from booking_assistant.pipeline import Pipeline

log = logging.getLogger(__name__)


class InvalidMessage(ValueError):
    """The message or its channel cannot be processed."""


class Inbox:

    def __init__(
        self,
        pipeline: Pipeline,
        store: RunStore | None = None,
        business_id: str = "default",
    ):
        self._pipeline = pipeline
        self._store = store
        self._business_id = business_id

    async def receive(self, channel: str, message: str) -> RunRecord:
        if channel not in CHANNELS:
            raise InvalidMessage(
                f"Invalid channel {channel!r}. Must be one of: {', '.join(CHANNELS)}"
            )
        if not isinstance(message, str) or not message.strip():
            raise InvalidMessage("Message is required")

        result = await self._pipeline.run(self._business_id, channel, message.strip())
        status = derive_run_status(result.context, result.events)
        record = RunRecord(status=status, context=result.context, events=result.events)

        if self._store is not None:
            record.run_id = self._store.save(record)

        log.info(
            "run=%s channel=%s intent=%s status=%s",
            record.run_id, channel, result.context.intent, status,
        )
        return record
