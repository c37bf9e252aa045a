"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (webhook de agendamento, health)
- Gate de método e headers CORS
- Delegação para o use case de booking
- Respostas HTTP apropriadas
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
