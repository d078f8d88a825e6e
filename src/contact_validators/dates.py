"""Validação estrita de datas e de data de nascimento (idade mínima).

Regras de parse:
- Cada formato tem um separador e uma ordem fixa de componentes
- Não existe fallback entre formatos: 29/02/2020 com YYYY-MM-DD é inválido
- Componentes zero ou não numéricos rejeitam a data
- A data construída precisa reproduzir exatamente (ano, mês, dia)
"""

from __future__ import annotations

import logging
from datetime import date

from contact_validators._digits import parse_ascii_int
from contact_validators.config.logging import log_rejection
from contact_validators.errors import UnknownDateFormatError
from contact_validators.formats import DEFAULT_DATE_FORMAT, DateFormat

logger = logging.getLogger(__name__)


def validate_date(
    date_string: str,
    date_format: DateFormat | str = DEFAULT_DATE_FORMAT,
) -> bool:
    """Retorna True se a string for uma data real no formato informado."""
    return parse_date(date_string, date_format) is not None


def validate_birth_date(
    date_string: str,
    min_age: int = 0,
    date_format: DateFormat | str = DEFAULT_DATE_FORMAT,
    *,
    today: date | None = None,
) -> bool:
    """Valida data de nascimento e idade mínima em anos completos.

    Args:
        date_string: Data no formato indicado.
        min_age: Idade mínima exigida (padrão 0).
        date_format: Um dos formatos de DateFormat.
        today: Data de referência; padrão é date.today().

    Exemplos:
        >>> validate_birth_date("2000-01-01", 18, today=date(2026, 1, 1))
        True
        >>> validate_birth_date("01/01/2000", 18, "DD/MM/YYYY", today=date(2017, 12, 31))
        False
    """
    if not validate_date(date_string, date_format):
        return False

    birth = parse_date(date_string, date_format)
    if birth is None:
        return False

    age = calculate_age(birth, today or date.today())
    if age < min_age:
        log_rejection(logger, "birth_date", "below_min_age")
        return False
    return True


def calculate_age(birth: date, today: date) -> int:
    """Idade em anos completos na data de referência."""
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def parse_date(
    date_string: str,
    date_format: DateFormat | str = DEFAULT_DATE_FORMAT,
) -> date | None:
    """Faz o parse estrito da data; None quando inválida."""
    try:
        fmt = DateFormat.from_value(date_format)
    except UnknownDateFormatError:
        log_rejection(logger, "date", "unknown_format")
        return None

    if not isinstance(date_string, str) or not date_string:
        log_rejection(logger, "date", "empty_or_not_string")
        return None

    components = _split_components(date_string, fmt)
    if components is None:
        log_rejection(logger, "date", "malformed")
        return None

    year, month, day = components
    try:
        parsed = date(year, month, day)
    except (ValueError, OverflowError):
        log_rejection(logger, "date", "calendar_overflow")
        return None

    if (parsed.year, parsed.month, parsed.day) != (year, month, day):
        log_rejection(logger, "date", "calendar_overflow")
        return None
    return parsed


def _split_components(date_string: str, fmt: DateFormat) -> tuple[int, int, int] | None:
    """Retorna (ano, mês, dia) conforme a ordem do formato."""
    parts = date_string.split(fmt.separator)
    if len(parts) < 3:
        return None

    # Componentes além do terceiro são ignorados
    numbers = [parse_ascii_int(part) for part in parts[:3]]
    if any(not number for number in numbers):
        return None

    first, second, third = numbers
    if fmt is DateFormat.DD_MM_YYYY:
        return third, second, first
    if fmt is DateFormat.MM_DD_YYYY:
        return third, first, second
    return first, second, third
