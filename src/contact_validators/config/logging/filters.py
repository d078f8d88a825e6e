"""Filter que normaliza os campos de contexto dos logs de validação.

Todo record sai com:
- service: nome do serviço que embarca os validadores
- validator: validador que rejeitou ("" fora de rejeições)
- reason: regra que falhou ("" fora de rejeições)

Assim o JSON tem sempre o mesmo formato, venha o record de log_rejection
ou de qualquer outro logger do processo.
"""

from __future__ import annotations

import logging

# Campos de rejeição preenchidos por log_rejection via `extra`
REJECTION_FIELDS = ("validator", "reason")


class ValidationContextFilter(logging.Filter):
    """Injeta service e garante os campos de rejeição em cada record."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        for field in REJECTION_FIELDS:
            if not getattr(record, field, None):
                setattr(record, field, "")
        return True
