"""Exceções do contact_validators.

Os predicados `validate_*` nunca levantam; estas exceções existem para as
bordas que precisam sinalizar erro (tipos pydantic, parse de formato).
"""

from __future__ import annotations


class ContactValidationError(ValueError):
    """Base para erros de validação de dados de contato."""


class InvalidFieldError(ContactValidationError):
    """Valor rejeitado por um tipo anotado (mensagem sem o valor)."""


class UnknownDateFormatError(ContactValidationError):
    """Tag de formato de data desconhecida."""
