"""API — camada de borda e adapters.

Responsabilidades:
- Receber o webhook do agente de voz
- Normalizar o payload flat para o modelo interno
- Validar campos obrigatórios
- Construir e enviar o payload para o Cal.com

Subpastas:
- connectors/: clientes HTTP (Cal.com) e parse do webhook (ElevenLabs)
- normalizers/: payload externo → BookingDraft
- validators/: BookingDraft → NormalizedBookingRequest
- payload_builders/: NormalizedBookingRequest → JSON do Cal.com
- routes/: endpoints HTTP

NÃO PODE conter: orquestração de use cases.
"""
