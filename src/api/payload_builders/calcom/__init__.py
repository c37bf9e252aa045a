"""Payload builders do Cal.com."""

from .booking import BookingPayloadBuilder, build_booking_payload

__all__ = ["BookingPayloadBuilder", "build_booking_payload"]
