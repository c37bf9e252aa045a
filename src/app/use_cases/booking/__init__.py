"""Use cases de agendamento."""

from .create_booking import CreateBookingUseCase

__all__ = ["CreateBookingUseCase"]
