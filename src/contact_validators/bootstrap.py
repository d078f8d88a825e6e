"""Bootstrap de logging para quem embarca os validadores.

Uso:
    from contact_validators.bootstrap import initialize_logging

    # Na inicialização do serviço
    initialize_logging()
"""

from __future__ import annotations

import logging

from contact_validators.config.logging import configure_logging
from contact_validators.config.logging.config import DEFAULT_SERVICE_NAME
from contact_validators.config.settings import get_validator_settings

logger = logging.getLogger(__name__)


def initialize_logging() -> None:
    """Configura logging JSON a partir das settings de ambiente.

    Em produção, settings inválidas abortam o boot; fora dela, viram alerta.

    Raises:
        ValueError: Se as settings forem inválidas em produção.
    """
    settings = get_validator_settings()
    errors = settings.validate()
    if errors and settings.is_production:
        raise ValueError("Settings inválidas: " + "; ".join(errors))

    level = settings.log_level if not errors else "INFO"
    configure_logging(
        level=level,
        service_name=settings.service_name or DEFAULT_SERVICE_NAME,
    )
    for error in errors:
        logger.warning("settings_invalid", extra={"error": error})


def initialize_test_logging() -> None:
    """Configura logging em nível DEBUG para testes."""
    settings = get_validator_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{settings.service_name}_test",
    )
