"""Helpers de extração de dígitos compartilhados por CPF, CNPJ e CEP."""

from __future__ import annotations

import re
from typing import Final

# Só 0-9: str.isdigit() aceitaria dígitos de outros alfabetos
_NON_DIGIT: Final = re.compile(r"[^0-9]")
_ASCII_DIGITS: Final = re.compile(r"[0-9]+")

# Nenhum componente numérico aceito (ano, porta, octeto) passa de 9 dígitos
# significativos; zeros à esquerda não contam
MAX_INT_DIGITS: Final = 9


def only_digits(value: str) -> str:
    """Remove tudo que não for dígito ASCII."""
    return _NON_DIGIT.sub("", value)


def all_same(digits: str) -> bool:
    """True quando todos os caracteres são iguais (ex: 111.111.111-11)."""
    return len(set(digits)) <= 1


def parse_ascii_int(value: str) -> int | None:
    """Converte string de dígitos ASCII com até MAX_INT_DIGITS significativos.

    Retorna None para qualquer outra coisa, inclusive números longos demais
    para int() (limite de conversão de strings do Python).
    """
    if not _ASCII_DIGITS.fullmatch(value):
        return None
    significant = value.lstrip("0") or "0"
    if len(significant) > MAX_INT_DIGITS:
        return None
    return int(significant)


def is_printable_ascii(value: str) -> bool:
    """Todos os caracteres no intervalo ASCII 33-126."""
    return all(33 <= ord(char) <= 126 for char in value)
