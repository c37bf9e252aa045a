"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- elevenlabs/: payload flat da tool de agendamento do agente de voz
"""

from .elevenlabs import ElevenLabsBookingNormalizer

__all__ = ["ElevenLabsBookingNormalizer"]
