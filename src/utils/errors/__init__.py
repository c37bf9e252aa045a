"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    API_KEY_NOT_CONFIGURED,
    BookingAdapterError,
    BookingValidationError,
    ConfigurationError,
    MalformedRequestError,
    MethodNotAllowedError,
    UpstreamError,
)

__all__ = [
    "API_KEY_NOT_CONFIGURED",
    "BookingAdapterError",
    "BookingValidationError",
    "ConfigurationError",
    "MalformedRequestError",
    "MethodNotAllowedError",
    "UpstreamError",
]
