"""Configuração de ambiente: logging estruturado e settings."""

from contact_validators.config.settings import (
    Environment,
    ValidatorSettings,
    get_validator_settings,
)

__all__ = [
    "Environment",
    "ValidatorSettings",
    "get_validator_settings",
]
