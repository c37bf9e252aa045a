"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- calcom/: Cal.com bookings API v1
"""

__all__: list[str] = []
