"""Protocolos e contratos do core da aplicação."""

from .booking_client import BookingClientProtocol
from .normalizer import BookingNormalizerProtocol
from .payload_builder import BookingPayloadBuilderProtocol
from .validator import BookingValidatorProtocol

__all__ = [
    "BookingClientProtocol",
    "BookingNormalizerProtocol",
    "BookingPayloadBuilderProtocol",
    "BookingValidatorProtocol",
]
