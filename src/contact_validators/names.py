"""Validação de nome completo."""

from __future__ import annotations

import logging

from contact_validators.config.logging import log_rejection

logger = logging.getLogger(__name__)

MIN_NAME_PARTS = 2
MIN_PART_LENGTH = 2


def validate_full_name(full_name: str) -> bool:
    """Exige ao menos dois nomes, cada um com 2+ caracteres ("John Doe")."""
    if not full_name or not isinstance(full_name, str):
        log_rejection(logger, "full_name", "empty_or_not_string")
        return False

    parts = full_name.split()
    if len(parts) < MIN_NAME_PARTS:
        log_rejection(logger, "full_name", "single_name")
        return False
    if any(len(part) < MIN_PART_LENGTH for part in parts):
        log_rejection(logger, "full_name", "short_part")
        return False
    return True
