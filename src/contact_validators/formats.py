"""Formatos de data aceitos pelos validadores."""

from __future__ import annotations

from enum import StrEnum

from contact_validators.errors import UnknownDateFormatError


class DateFormat(StrEnum):
    """Padrões posicionais de data suportados."""

    YYYY_MM_DD = "YYYY-MM-DD"
    DD_MM_YYYY = "DD/MM/YYYY"
    MM_DD_YYYY = "MM-DD-YYYY"

    @property
    def separator(self) -> str:
        return "/" if self is DateFormat.DD_MM_YYYY else "-"

    @classmethod
    def from_value(cls, value: DateFormat | str) -> DateFormat:
        """Converte tag (enum ou string literal) em DateFormat.

        Raises:
            UnknownDateFormatError: Se a tag não for um dos três formatos.
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownDateFormatError(f"Formato de data desconhecido: {value!r}") from exc


DEFAULT_DATE_FORMAT = DateFormat.YYYY_MM_DD
