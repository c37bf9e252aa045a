"""Connector Cal.com — bookings API v1."""

from .http_client import CalComHttpClient, create_calcom_http_client

__all__ = [
    "CalComHttpClient",
    "create_calcom_http_client",
]
