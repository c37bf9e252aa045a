"""Rotas de agendamento."""
