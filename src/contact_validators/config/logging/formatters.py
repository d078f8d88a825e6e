"""Formatter JSON dos logs de validação.

Nunca inclui o valor validado: CPF, CNPJ, e-mail e CEP são PII. O que
identifica uma rejeição é o par (validator, reason).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

from contact_validators.config.logging.filters import REJECTION_FIELDS

# Ordem de saída dos campos no JSON
LOG_FIELD_ORDER = ("asctime", "levelname", "name", "service", "message", *REJECTION_FIELDS)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON para os logs do pacote.

    Exemplo de output de uma rejeição:
        {
            "asctime": "2026-10-17 10:30:00,123",
            "level": "DEBUG",
            "logger": "contact_validators.tax_ids",
            "service": "cadastro-api",
            "message": "Validation rejected by cpf",
            "validator": "cpf",
            "reason": "checksum_mismatch"
        }
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELD_ORDER)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
