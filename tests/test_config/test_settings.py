"""Testes para contact_validators.config.settings e bootstrap."""

from __future__ import annotations

import logging

import pytest

from contact_validators.bootstrap import initialize_logging, initialize_test_logging
from contact_validators.config import ValidatorSettings, get_validator_settings
from contact_validators.config.logging import ValidationContextFilter


@pytest.mark.usefixtures("clean_settings_cache")
class TestValidatorSettings:
    """Testes para ValidatorSettings e get_validator_settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem env vars usa os padrões."""
        for name in ("ENVIRONMENT", "SERVICE_NAME", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_validator_settings()
        assert settings.environment == "development"
        assert settings.service_name == "contact-validators"
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Lê ENVIRONMENT, SERVICE_NAME e LOG_LEVEL."""
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("SERVICE_NAME", "cadastro-api")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_validator_settings()
        assert settings.is_production is True
        assert settings.service_name == "cadastro-api"
        assert settings.log_level == "DEBUG"

    def test_cached(self) -> None:
        """Mesma instância entre chamadas."""
        assert get_validator_settings() is get_validator_settings()

    def test_validate_reports_errors(self) -> None:
        """validate() lista os problemas encontrados."""
        settings = ValidatorSettings(service_name="", log_level="LOUD")
        errors = settings.validate()
        assert "SERVICE_NAME não pode ser vazio" in errors
        assert "LOG_LEVEL inválido: LOUD" in errors


@pytest.mark.usefixtures("clean_settings_cache")
class TestBootstrap:
    """Testes para initialize_logging e initialize_test_logging."""

    def test_initialize_logging_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Aplica LOG_LEVEL das settings."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        initialize_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(f, ValidationContextFilter) for f in root.handlers[0].filters)

    def test_invalid_settings_fall_back_outside_production(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Fora de produção, nível inválido vira INFO."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("ENVIRONMENT", "development")
        initialize_logging()
        assert logging.getLogger().level == logging.INFO

    def test_invalid_settings_raise_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Em produção, settings inválidas abortam."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(ValueError, match="Settings inválidas"):
            initialize_logging()

    def test_initialize_test_logging(self) -> None:
        """Modo de teste usa DEBUG."""
        initialize_test_logging()
        assert logging.getLogger().level == logging.DEBUG
