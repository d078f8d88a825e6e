"""Validação de CPF e CNPJ por dígitos verificadores (módulo 11).

Regras:
- Pontuação é ignorada (123.456.789-09 == 12345678909)
- Sequências de dígitos repetidos são sempre inválidas
- Os dois últimos dígitos precisam bater com o cálculo ponderado
"""

from __future__ import annotations

import logging
from typing import Final

from contact_validators._digits import all_same, only_digits
from contact_validators.config.logging import log_rejection

logger = logging.getLogger(__name__)

CPF_LENGTH: Final = 11
CNPJ_LENGTH: Final = 14

_CNPJ_WEIGHTS_FIRST: Final = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_SECOND: Final = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def validate_cpf(cpf: str) -> bool:
    """Valida CPF (11 dígitos, dois verificadores).

    Exemplos:
        >>> validate_cpf("123.456.789-09")
        True
        >>> validate_cpf("111.111.111-11")
        False
    """
    digits = _extract(cpf, CPF_LENGTH, "cpf")
    if digits is None:
        return False

    first = _cpf_check_digit(digits[:9], 10)
    second = _cpf_check_digit(digits[:10], 11)
    if first != digits[9] or second != digits[10]:
        log_rejection(logger, "cpf", "checksum_mismatch")
        return False
    return True


def validate_cnpj(cnpj: str) -> bool:
    """Valida CNPJ (14 dígitos, dois verificadores).

    Exemplos:
        >>> validate_cnpj("12.345.678/0001-95")
        True
    """
    digits = _extract(cnpj, CNPJ_LENGTH, "cnpj")
    if digits is None:
        return False

    first = _cnpj_check_digit(digits, _CNPJ_WEIGHTS_FIRST)
    second = _cnpj_check_digit(digits, _CNPJ_WEIGHTS_SECOND)
    if first != digits[12] or second != digits[13]:
        log_rejection(logger, "cnpj", "checksum_mismatch")
        return False
    return True


def _extract(value: str, length: int, validator: str) -> list[int] | None:
    if not value or not isinstance(value, str):
        log_rejection(logger, validator, "empty_or_not_string")
        return None

    digits = only_digits(value)
    if len(digits) != length:
        log_rejection(logger, validator, "wrong_length")
        return None
    if all_same(digits):
        log_rejection(logger, validator, "repeated_digits")
        return None
    return [int(digit) for digit in digits]


def _cpf_check_digit(base: list[int], factor: int) -> int:
    total = 0
    for digit in base:
        total += digit * factor
        factor -= 1
    result = (total * 10) % 11
    return 0 if result == 10 else result


def _cnpj_check_digit(digits: list[int], weights: tuple[int, ...]) -> int:
    total = sum(digit * weight for digit, weight in zip(digits, weights, strict=False))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder
