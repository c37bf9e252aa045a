"""Connector ElevenLabs — recebimento do webhook de agendamento."""

from .receive import INVALID_REQUEST_BODY, parse_booking_body

__all__ = ["INVALID_REQUEST_BODY", "parse_booking_body"]
