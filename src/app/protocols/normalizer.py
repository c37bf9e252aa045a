"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.booking import BookingDraft


class BookingNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização do payload de agendamento."""

    def normalize(self, payload: Any) -> BookingDraft: ...
