"""Connectors — adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP assíncrono (httpx)
- calcom/: bookings API do Cal.com (outbound)
- elevenlabs/: webhook da tool de agendamento (inbound)
"""

__all__: list[str] = []
