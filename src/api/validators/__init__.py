"""Validadores de payload.

Estrutura:
- booking/: validação do booking antes do envio ao Cal.com
"""
