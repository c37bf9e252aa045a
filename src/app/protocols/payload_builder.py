"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.booking import NormalizedBookingRequest


class BookingPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o payload do provider de agenda."""

    def build(self, request: NormalizedBookingRequest) -> dict[str, Any]: ...
