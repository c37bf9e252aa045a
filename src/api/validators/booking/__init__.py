"""Validadores do booking inbound.

Uso:
    from api.validators.booking import validate_booking_draft

    request = validate_booking_draft(draft)
"""

from api.validators.booking.validator import (
    BookingDraftValidator,
    INVALID_START_FORMAT,
    MISSING_EMAIL,
    MISSING_NAME,
    MISSING_START,
    START_FORMAT,
    START_PATTERN,
    is_valid_start,
    validate_booking_draft,
)

__all__ = [
    "BookingDraftValidator",
    "INVALID_START_FORMAT",
    "MISSING_EMAIL",
    "MISSING_NAME",
    "MISSING_START",
    "START_FORMAT",
    "START_PATTERN",
    "is_valid_start",
    "validate_booking_draft",
]
