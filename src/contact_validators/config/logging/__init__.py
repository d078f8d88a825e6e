"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from contact_validators.config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="cadastro-api")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- service
- level
- logger
- message
- asctime
- validator, reason (vazios fora de rejeições)
"""

from contact_validators.config.logging.config import (
    configure_logging,
    get_logger,
    log_rejection,
)
from contact_validators.config.logging.filters import REJECTION_FIELDS, ValidationContextFilter
from contact_validators.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REJECTION_FIELDS",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "ValidationContextFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_rejection",
]
