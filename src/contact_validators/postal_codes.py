"""Validação de CEP (código postal brasileiro, 8 dígitos)."""

from __future__ import annotations

import logging
from typing import Final

from contact_validators._digits import all_same, only_digits
from contact_validators.config.logging import log_rejection

logger = logging.getLogger(__name__)

CEP_LENGTH: Final = 8


def validate_cep(cep: str) -> bool:
    """Valida CEP com ou sem hífen.

    Qualquer caractere não numérico é descartado antes da contagem, então
    "12345-678" e "12345678" são equivalentes. Inteiros também são aceitos,
    assim como floats integrais (12345678.0 vale como 12345678).
    """
    if cep is None:
        log_rejection(logger, "cep", "missing")
        return False

    if isinstance(cep, float) and cep.is_integer():
        cep = int(cep)
    digits = only_digits(str(cep))
    if len(digits) != CEP_LENGTH:
        log_rejection(logger, "cep", "wrong_length")
        return False
    if all_same(digits):
        log_rejection(logger, "cep", "repeated_digits")
        return False
    return True
