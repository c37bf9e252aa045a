"""Validação do BookingDraft antes do envio ao Cal.com.

Checks sequenciais: o primeiro que falhar interrompe com um
BookingValidationError (400) de mensagem própria.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from app.domain.booking import BookingResponses, NormalizedBookingRequest
from utils.errors import BookingValidationError

if TYPE_CHECKING:
    from app.domain.booking import BookingDraft

logger = logging.getLogger(__name__)

START_FORMAT = "YYYY-MM-DDTHH:MM:SS.000Z"
START_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", re.ASCII)
_EMAIL_SHAPE = re.compile(r"\S+@\S+\.\S+")

MISSING_START = "Missing start time"
MISSING_NAME = "Missing client name"
MISSING_EMAIL = "Missing client email"
INVALID_START_FORMAT = f"Invalid date format. Expected {START_FORMAT}"


def is_valid_start(start: object) -> bool:
    """True se start é string UTC com milissegundos (ex: 2025-01-15T10:00:00.000Z)."""
    return isinstance(start, str) and START_PATTERN.fullmatch(start) is not None


def validate_booking_draft(draft: BookingDraft) -> NormalizedBookingRequest:
    """Valida o draft e retorna a requisição normalizada.

    Raises:
        BookingValidationError: No primeiro campo ausente ou inválido.
    """
    if not draft.start:
        _reject(MISSING_START, "start")

    if not draft.name:
        _reject(MISSING_NAME, "responses.name")

    # Inalcançável com o fallback de email do normalizer; mantido por contrato.
    if not draft.email:
        _reject(MISSING_EMAIL, "responses.email")

    if not is_valid_start(draft.start):
        _reject(INVALID_START_FORMAT, "start")

    if _EMAIL_SHAPE.search(draft.email) is None:
        logger.warning("booking_email_format_suspicious", extra={"field": "responses.email"})

    return NormalizedBookingRequest(
        event_type_id=draft.event_type_id,
        start=draft.start,
        time_zone=draft.time_zone,
        language=draft.language,
        metadata={},
        responses=BookingResponses(
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
        ),
    )


def _reject(message: str, field: str) -> None:
    logger.info("booking_validation_failed", extra={"field": field, "reason": message})
    raise BookingValidationError(message, field=field)


class BookingDraftValidator:
    """Adapter de classe para validate_booking_draft (injeção no use case)."""

    def validate(self, draft: BookingDraft) -> NormalizedBookingRequest:
        return validate_booking_draft(draft)
