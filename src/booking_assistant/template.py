"""The step catalog: which steps a run executes, and in what order."""

TEMPLATE_NAME = "Booking Assistant v1"

STEPS: tuple[str, ...] = (
    "detect_intent",
    "extract_name",
    "extract_datetime",
    "extract_service",
    "validate_required_fields",
    "validate_opening_hours",
    "create_lead",
    "create_booking",
    "build_response",
)
