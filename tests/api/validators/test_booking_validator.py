"""Testes de api/validators/booking.

Cada check é sequencial: o primeiro erro interrompe a validação.
"""

from __future__ import annotations

import dataclasses

import pytest

from api.validators.booking import (
    INVALID_START_FORMAT,
    MISSING_EMAIL,
    MISSING_NAME,
    MISSING_START,
    BookingDraftValidator,
    is_valid_start,
    validate_booking_draft,
)
from app.domain.booking import BookingDraft, NormalizedBookingRequest
from utils.errors import BookingValidationError, MalformedRequestError


def _draft(**overrides: object) -> BookingDraft:
    base = BookingDraft(
        event_type_id=3921180,
        start="2025-01-15T10:00:00.000Z",
        time_zone="Europe/Kiev",
        language="uk",
        name="Jane",
        email="jane@x.com",
        phone=None,
    )
    return dataclasses.replace(base, **overrides)


class TestValidateBookingDraft:
    def test_valid_draft_returns_normalized_request(self) -> None:
        request = validate_booking_draft(_draft(phone="+380"))

        assert isinstance(request, NormalizedBookingRequest)
        assert request.event_type_id == 3921180
        assert request.start == "2025-01-15T10:00:00.000Z"
        assert request.time_zone == "Europe/Kiev"
        assert request.language == "uk"
        assert request.metadata == {}
        assert request.responses.name == "Jane"
        assert request.responses.email == "jane@x.com"
        assert request.responses.phone == "+380"

    @pytest.mark.parametrize("start", [None, ""])
    def test_missing_start(self, start: object) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_booking_draft(_draft(start=start))

        assert exc_info.value.error == MISSING_START == "Missing start time"
        assert exc_info.value.field == "start"
        assert exc_info.value.status_code == 400

    def test_missing_name(self) -> None:
        with pytest.raises(BookingValidationError, match=MISSING_NAME):
            validate_booking_draft(_draft(name=None))

    def test_missing_email_is_still_checked(self) -> None:
        with pytest.raises(BookingValidationError, match=MISSING_EMAIL):
            validate_booking_draft(_draft(email=""))

    def test_start_checked_before_name(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_booking_draft(_draft(start=None, name=None))

        assert exc_info.value.error == MISSING_START

    def test_missing_name_reported_before_bad_date(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_booking_draft(_draft(start="2025-01-15", name=None))

        assert exc_info.value.error == MISSING_NAME

    def test_date_without_time_is_invalid_format(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_booking_draft(_draft(start="2025-01-15"))

        assert exc_info.value.error == INVALID_START_FORMAT
        assert "YYYY-MM-DDTHH:MM:SS.000Z" in exc_info.value.error

    def test_validation_error_is_malformed_request(self) -> None:
        with pytest.raises(MalformedRequestError):
            validate_booking_draft(_draft(name=None))

    def test_suspicious_email_does_not_reject(self) -> None:
        request = validate_booking_draft(_draft(email="not-an-email"))

        assert request.responses.email == "not-an-email"

    def test_class_adapter_delegates(self) -> None:
        request = BookingDraftValidator().validate(_draft())

        assert request.responses.name == "Jane"


class TestIsValidStart:
    @pytest.mark.parametrize(
        "start",
        [
            "2025-01-15T10:00:00.000Z",
            "1999-12-31T23:59:59.999Z",
        ],
    )
    def test_accepts_strict_utc_millis(self, start: str) -> None:
        assert is_valid_start(start)

    @pytest.mark.parametrize(
        "start",
        [
            "2025-01-15",
            "2025-01-15T10:00:00Z",
            "2025-01-15T10:00:00.000",
            "2025-01-15T10:00:00.000+02:00",
            "2025-01-15 10:00:00.000Z",
            " 2025-01-15T10:00:00.000Z",
            "2025-01-15T10:00:00.000Z\n",
            "２０２５-01-15T10:00:00.000Z",
            20250115,
            None,
        ],
    )
    def test_rejects_other_formats(self, start: object) -> None:
        assert not is_valid_start(start)
