"""Configuração centralizada de logging.

Uso:
    from contact_validators.config.logging import configure_logging, get_logger

    # Na inicialização do serviço que usa os validadores
    configure_logging(level="INFO", service_name="cadastro-api")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Operação concluída", extra={"latency_ms": 42})

Os validadores só emitem DEBUG e nunca incluem o valor rejeitado.
"""

from __future__ import annotations

import logging

from contact_validators.config.logging.filters import ValidationContextFilter
from contact_validators.config.logging.formatters import create_json_formatter

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "contact-validators"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ValidationContextFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_rejection(
    logger: logging.Logger,
    validator: str,
    reason: str,
) -> None:
    """Log observável de rejeição de um validador (sem PII).

    Args:
        logger: Logger instance.
        validator: Nome do validador (ex: "cpf").
        reason: Regra que falhou (ex: "checksum_mismatch"), nunca o valor.

    Exemplo:
        log_rejection(logger, "cep", reason="wrong_length")
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Validation rejected by %s",
        validator,
        extra={"validator": validator, "reason": reason},
    )
