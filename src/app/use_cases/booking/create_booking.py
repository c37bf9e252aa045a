"""Use case de criação de booking a partir do webhook do agente de voz.

Fluxo: normaliza → valida → confere API key → monta payload → envia ao
Cal.com → traduz a resposta. Erros conhecidos sobem como
BookingAdapterError; qualquer outra exceção é tratada pela rota.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.booking import BookingConfirmation
from utils.errors import API_KEY_NOT_CONFIGURED, ConfigurationError, UpstreamError

if TYPE_CHECKING:
    from app.protocols.booking_client import BookingClientProtocol
    from app.protocols.normalizer import BookingNormalizerProtocol
    from app.protocols.payload_builder import BookingPayloadBuilderProtocol
    from app.protocols.validator import BookingValidatorProtocol
    from config.settings import CalComSettings

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Appointment booked successfully for {name}"


class CreateBookingUseCase:
    """Orquestra transformação, validação e envio do booking."""

    def __init__(
        self,
        *,
        settings: CalComSettings,
        normalizer: BookingNormalizerProtocol,
        validator: BookingValidatorProtocol,
        builder: BookingPayloadBuilderProtocol,
        client: BookingClientProtocol,
    ) -> None:
        self._settings = settings
        self._normalizer = normalizer
        self._validator = validator
        self._builder = builder
        self._client = client

    async def execute(self, payload: Any) -> BookingConfirmation:
        """Cria o booking e retorna a confirmação para o agente.

        Raises:
            MalformedRequestError: Payload inválido ou campo obrigatório ausente
            ConfigurationError: CALCOM_API_KEY não configurada
            UpstreamError: Cal.com respondeu com status não-2xx
        """
        draft = self._normalizer.normalize(payload)
        request = self._validator.validate(draft)

        if not self._settings.has_api_key:
            logger.error("calcom_api_key_missing", extra={"component": "create_booking"})
            raise ConfigurationError(API_KEY_NOT_CONFIGURED)

        outbound = self._builder.build(request)
        logger.info(
            "booking_dispatching",
            extra={
                "event_type_id": request.event_type_id,
                "time_zone": request.time_zone,
                "language": request.language,
                "has_phone": request.responses.phone is not None,
            },
        )

        upstream = await self._client.create_booking(self._settings.api_key, outbound)

        if not upstream.ok:
            logger.warning(
                "booking_upstream_error",
                extra={"status_code": upstream.status_code},
            )
            raise UpstreamError(upstream.status_code, upstream.body)

        booking_id = upstream.body.get("id") if isinstance(upstream.body, Mapping) else None
        logger.info("booking_created", extra={"booking_id": booking_id})

        return BookingConfirmation(
            message=SUCCESS_MESSAGE.format(name=request.responses.name),
            booking_id=booking_id,
            appointment_time=request.start,
        )
