"""Contrato do cliente de bookings usado pelo caso de uso.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.booking import UpstreamResponse


@runtime_checkable
class BookingClientProtocol(Protocol):
    """Contrato mínimo para criação de booking no provider de agenda."""

    async def create_booking(self, api_key: str, payload: dict[str, Any]) -> UpstreamResponse:
        """Envia o booking e retorna status + corpo do provider."""
        ...
