"""Validação sintática de e-mail (sem DNS, sem verificação de caixa postal)."""

from __future__ import annotations

import logging

from contact_validators._digits import is_printable_ascii
from contact_validators.config.logging import log_rejection

logger = logging.getLogger(__name__)

MIN_TLD_LENGTH = 2


def validate_email(email: str) -> bool:
    """Retorna True se o e-mail for sintaticamente válido.

    Regras (na ordem):
    - sem espaços
    - exatamente um "@"
    - parte local não vazia, sem "." nas pontas, sem ".."
    - domínio com ao menos um ".", sem "." nas pontas, sem rótulos vazios
    - TLD com 2+ caracteres
    - só ASCII imprimível (33-126)
    """
    if not isinstance(email, str):
        log_rejection(logger, "email", "not_string")
        return False
    if " " in email:
        log_rejection(logger, "email", "contains_space")
        return False

    parts = email.split("@")
    if len(parts) != 2:
        log_rejection(logger, "email", "at_sign_count")
        return False

    local, domain = parts
    if not _is_valid_local_part(local):
        log_rejection(logger, "email", "invalid_local_part")
        return False
    if not _is_valid_domain(domain):
        log_rejection(logger, "email", "invalid_domain")
        return False
    if not is_printable_ascii(email):
        log_rejection(logger, "email", "non_printable_character")
        return False
    return True


def _is_valid_local_part(local: str) -> bool:
    if not local:
        return False
    if local.startswith(".") or local.endswith("."):
        return False
    return ".." not in local


def _is_valid_domain(domain: str) -> bool:
    if not domain or "." not in domain:
        return False
    if domain.startswith(".") or domain.endswith("."):
        return False

    labels = domain.split(".")
    if not all(labels):
        return False
    return len(labels[-1]) >= MIN_TLD_LENGTH
