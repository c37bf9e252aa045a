"""Normalizer ElevenLabs → BookingDraft.

Converte o payload flat enviado pela tool do agente de voz nos campos
do booking Cal.com, aplicando os defaults de negócio configurados.
Não valida obrigatoriedade: isso é papel de api.validators.booking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.normalizers.elevenlabs.extractor import (
    EMAIL_RULE,
    LANGUAGE_RULE,
    NAME_RULE,
    PHONE_RULE,
    TIME_ZONE_RULE,
    extract_field,
    parse_event_type_id,
)
from app.domain.booking import BookingDraft
from config.logging import log_fallback
from utils.errors import MalformedRequestError

if TYPE_CHECKING:
    from config.settings import CalComSettings

logger = logging.getLogger(__name__)


class ElevenLabsBookingNormalizer:
    """Resolve os campos do booking a partir do payload do agente de voz."""

    __slots__ = ("_defaults",)

    def __init__(self, defaults: CalComSettings) -> None:
        self._defaults = defaults

    def normalize(self, payload: Any) -> BookingDraft:
        """Transforma o payload bruto em BookingDraft.

        Raises:
            MalformedRequestError: Se o payload não for um objeto JSON.
        """
        if not isinstance(payload, Mapping):
            logger.warning(
                "booking_payload_invalid",
                extra={"payload_type": type(payload).__name__},
            )
            raise MalformedRequestError("Invalid request body")

        logger.debug(
            "booking_payload_shape",
            extra={
                "keys": sorted(str(key) for key in payload),
                "start_type": type(payload.get("start")).__name__,
            },
        )

        return BookingDraft(
            event_type_id=self._resolve_event_type_id(payload),
            start=payload.get("start"),
            time_zone=self._resolve_time_zone(payload),
            language=self._resolve_language(payload),
            name=extract_field(payload, NAME_RULE),
            email=self._resolve_email(payload),
            phone=extract_field(payload, PHONE_RULE),
        )

    def _resolve_event_type_id(self, payload: Mapping[str, Any]) -> int:
        event_type_id = parse_event_type_id(payload.get("eventTypeId"))
        if event_type_id is None:
            log_fallback(logger, "eventTypeId", reason=_reason(payload, "eventTypeId"))
            return self._defaults.default_event_type_id
        return event_type_id

    def _resolve_time_zone(self, payload: Mapping[str, Any]) -> str:
        time_zone = extract_field(payload, TIME_ZONE_RULE)
        if time_zone is None:
            log_fallback(logger, TIME_ZONE_RULE.field, reason=_reason(payload, "timeZone"))
            time_zone = self._defaults.default_time_zone
        return time_zone.strip()

    def _resolve_language(self, payload: Mapping[str, Any]) -> str:
        language = extract_field(payload, LANGUAGE_RULE)
        if language is None:
            log_fallback(logger, LANGUAGE_RULE.field, reason=_reason(payload, "language"))
            return self._defaults.default_language
        return language

    def _resolve_email(self, payload: Mapping[str, Any]) -> str:
        email = extract_field(payload, EMAIL_RULE)
        if email is None:
            log_fallback(logger, EMAIL_RULE.field, reason="missing_or_null")
            return self._defaults.fallback_email
        return email


def _reason(payload: Mapping[str, Any], key: str) -> str:
    return "invalid" if key in payload and payload[key] is not None else "missing"
