"""Modelos de domínio do agendamento via Cal.com.

BookingDraft é a saída do normalizer (campos obrigatórios ainda podem
faltar). NormalizedBookingRequest só existe depois da validação e é o
único formato que segue para o payload builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class BookingDraft:
    """Campos resolvidos do payload inbound, antes da validação."""

    event_type_id: int
    start: Any
    time_zone: str
    language: str
    name: str | None
    email: str | None
    phone: str | None = None


class BookingResponses(BaseModel):
    """Bloco `responses` do booking Cal.com (dados do cliente)."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Nome do cliente.")
    email: str = Field(..., min_length=1, description="Email do cliente ou fallback.")
    phone: str | None = Field(
        default=None,
        description="Telefone do cliente. None = campo omitido no payload.",
    )


class NormalizedBookingRequest(BaseModel):
    """Requisição validada no schema aninhado do Cal.com."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    event_type_id: int = Field(..., alias="eventTypeId")
    start: str = Field(..., description="Início em UTC, YYYY-MM-DDTHH:MM:SS.sssZ.")
    time_zone: str = Field(..., alias="timeZone")
    language: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    responses: BookingResponses


class BookingConfirmation(BaseModel):
    """Resposta de sucesso devolvida ao agente de voz."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    booking_id: Any = Field(default=None, alias="bookingId")
    appointment_time: str = Field(..., alias="appointmentTime")

    def to_body(self) -> dict[str, Any]:
        """Corpo JSON com os nomes de campo esperados pelo agente."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True, slots=True)
class UpstreamResponse:
    """Resposta bruta do Cal.com (status + corpo JSON já parseado)."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        """True para status 2xx."""
        return 200 <= self.status_code < 300
