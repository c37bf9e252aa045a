"""Protocolos de validação do booking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.booking import BookingDraft, NormalizedBookingRequest


class BookingValidatorProtocol(Protocol):
    """Contrato mínimo para validar um draft e produzir a requisição final.

    Implementações levantam BookingValidationError na primeira falha.
    """

    def validate(self, draft: BookingDraft) -> NormalizedBookingRequest: ...
