"""
Keyword intent classifier.

Pattern groups are tried in a fixed order and the first match wins.
Cancel and reschedule come before booking because "cancel my
appointment" also contains a booking word.
"""

import re

from booking_assistant.domain.context import Intent

CANCEL_PATTERN = re.compile(
    r"\b(cancel|cancelled|canceling|cancellation|can't make it|won't be able|need to cancel)\b"
)
RESCHEDULE_PATTERN = re.compile(
    r"\b(reschedule|change|move|different time|another time)\b"
)
INFO_PATTERN = re.compile(
    r"\b(open|hours|opening|when are you|what time|where|price|cost|info|information|what are your)\b"
)
ESCALATION_PATTERN = re.compile(
    r"\b(angry|ridiculous|complaint|terrible|never answer|frustrated|upset)\b"
)
BOOKING_PATTERN = re.compile(
    r"\b(book|appointment|reserve|schedule|make an appointment)\b"
)
DESIRE_FOR_SERVICE_PATTERN = re.compile(
    r"\b(need|want|i'?d like)\b.*\b(haircut|service|appointment|trim|shave)\b",
    re.IGNORECASE,
)

# Complaints are routed as "info"; the response builder tells them apart.
_RULES: list[tuple[re.Pattern, Intent]] = [
    (CANCEL_PATTERN, "cancel"),
    (RESCHEDULE_PATTERN, "reschedule"),
    (INFO_PATTERN, "info"),
    (ESCALATION_PATTERN, "info"),
    (BOOKING_PATTERN, "booking"),
    (DESIRE_FOR_SERVICE_PATTERN, "booking"),
]


def classify_intent(message: str) -> Intent:
    lower = message.lower()
    for pattern, intent in _RULES:
        if pattern.search(lower):
            return intent
    return "unknown"


def is_escalation(message: str) -> bool:
    """True when the message reads as a complaint that needs a human."""
    return ESCALATION_PATTERN.search(message.lower()) is not None
