"""Validação de URL (http, https, ftp) e de host.

Host aceito:
- "localhost"
- IPv4 em quatro octetos (0-255)
- domínio com 2+ rótulos alfanuméricos, hífen só no meio
"""

from __future__ import annotations

import logging
import re
from typing import Final

from contact_validators._digits import is_printable_ascii, parse_ascii_int
from contact_validators.config.logging import log_rejection

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES: Final = frozenset({"http", "https", "ftp"})
MAX_PORT: Final = 65535
MAX_OCTET: Final = 255

_LABEL_CHARS: Final = re.compile(r"[A-Za-z0-9-]+")


def validate_url(url: str) -> bool:
    """Retorna True para URLs como "https://www.example.com:8080/path"."""
    if not isinstance(url, str) or " " in url:
        log_rejection(logger, "url", "not_string_or_space")
        return False

    parts = url.split("://")
    if len(parts) != 2:
        log_rejection(logger, "url", "missing_scheme_separator")
        return False

    scheme, rest = parts
    if scheme not in ALLOWED_SCHEMES:
        log_rejection(logger, "url", "unsupported_scheme")
        return False

    host_port = rest.split("/", 1)[0]
    if not host_port:
        log_rejection(logger, "url", "missing_host")
        return False

    host, sep, port = host_port.partition(":")
    if sep and not _is_valid_port(port):
        log_rejection(logger, "url", "invalid_port")
        return False

    if not is_valid_host(host):
        log_rejection(logger, "url", "invalid_host")
        return False

    if not is_printable_ascii(url):
        log_rejection(logger, "url", "non_printable_character")
        return False
    return True


def is_valid_host(host: str) -> bool:
    """Valida localhost, IPv4 em quatro octetos ou nome de domínio."""
    if not host or not isinstance(host, str):
        return False
    if host == "localhost":
        return True

    labels = host.split(".")
    if len(labels) == 4:
        return all(_is_valid_octet(label) for label in labels)
    if len(labels) < 2:
        return False
    return all(_is_valid_label(label) for label in labels)


def _is_valid_port(port: str) -> bool:
    number = parse_ascii_int(port)
    return number is not None and 1 <= number <= MAX_PORT


def _is_valid_octet(octet: str) -> bool:
    number = parse_ascii_int(octet)
    return number is not None and number <= MAX_OCTET


def _is_valid_label(label: str) -> bool:
    if not label or label.startswith("-") or label.endswith("-"):
        return False
    return _LABEL_CHARS.fullmatch(label) is not None
