"""Factory de wiring do fluxo de booking (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.calcom import create_calcom_http_client
from api.normalizers.elevenlabs import ElevenLabsBookingNormalizer
from api.payload_builders.calcom import BookingPayloadBuilder
from api.validators.booking import BookingDraftValidator
from app.use_cases.booking import CreateBookingUseCase
from config.settings import get_calcom_settings

if TYPE_CHECKING:
    from app.protocols.booking_client import BookingClientProtocol
    from config.settings import CalComSettings


def create_booking_use_case(
    settings: CalComSettings | None = None,
    client: BookingClientProtocol | None = None,
) -> CreateBookingUseCase:
    """Cria use case de booking com dependências injetadas.

    Args:
        settings: CalComSettings opcional. Se None, carrega do ambiente.
        client: Cliente de bookings opcional (testes injetam fakes).
    """
    calcom = settings or get_calcom_settings()
    return CreateBookingUseCase(
        settings=calcom,
        normalizer=ElevenLabsBookingNormalizer(calcom),
        validator=BookingDraftValidator(),
        builder=BookingPayloadBuilder(),
        client=client or create_calcom_http_client(calcom),
    )
