"""
Entity extractors: customer name, requested date/time, requested service.

Each extractor only writes its field on a match and never clears or
overwrites a value that is already set.
"""

import logging
import re

from booking_assistant.domain.business import BusinessSnapshot
from booking_assistant.domain.context import RunContext
from booking_assistant.domain.dates import DateTimeParser

log = logging.getLogger(__name__)

# Anchor phrases are case-insensitive; the captured name must be capitalised.
_NAME = r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)"
NAME_PATTERNS = [
    re.compile(r"\b(?i:i'?m)\s+" + _NAME),
    re.compile(r"\b(?i:my\s+name\s+is)\s+" + _NAME),
    re.compile(r"\b(?i:this\s+is)\s+" + _NAME),
]


def extract_name(context: RunContext) -> None:
    if context.customer_name:
        return
    for pattern in NAME_PATTERNS:
        m = pattern.search(context.raw_message)
        if m:
            context.customer_name = m.group(1)
            return


async def extract_datetime(context: RunContext, parser: DateTimeParser) -> None:
    if context.requested_datetime:
        return
    try:
        parsed = await parser.parse_first(context.raw_message)
    except Exception as exc:
        log.warning("date parser failed, treating as no date: %s", exc)
        return
    if parsed is not None:
        context.requested_datetime = parsed


def extract_service(context: RunContext, business: BusinessSnapshot) -> None:
    if context.requested_service:
        return
    lower = context.raw_message.lower()
    for service in business.services:
        if service.name.lower() in lower:
            context.requested_service = service.name
            return
