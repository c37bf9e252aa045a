"""Builder do payload de criação de booking do Cal.com (POST /v1/bookings)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.booking import NormalizedBookingRequest


class BookingPayloadBuilder:
    """Builder do corpo JSON de criação de booking."""

    def build(self, request: NormalizedBookingRequest) -> dict[str, Any]:
        """Constrói payload no schema aninhado do Cal.com.

        `responses.phone` só entra no payload quando resolvido; nunca é
        enviado como string vazia ou null.

        Args:
            request: Requisição validada

        Returns:
            Payload pronto para serialização JSON
        """
        responses: dict[str, Any] = {
            "name": request.responses.name,
            "email": request.responses.email,
        }
        if request.responses.phone is not None:
            responses["phone"] = request.responses.phone

        return {
            "eventTypeId": request.event_type_id,
            "start": request.start,
            "timeZone": request.time_zone,
            "language": request.language,
            "metadata": dict(request.metadata),
            "responses": responses,
        }


def build_booking_payload(request: NormalizedBookingRequest) -> dict[str, Any]:
    """Atalho funcional para BookingPayloadBuilder().build()."""
    return BookingPayloadBuilder().build(request)
