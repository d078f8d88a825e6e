"""Testes para contact_validators.urls (validate_url e is_valid_host)."""

from __future__ import annotations

import pytest

from contact_validators.urls import is_valid_host, validate_url


class TestValidateUrl:
    """Testes para validate_url."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://www.example.com",
            "http://example.com/path/to?q=1",
            "ftp://files.example.org",
            "http://localhost:8000",
            "http://127.0.0.1:1/",
            "https://example.com:65535",
            "https://sub-domain.example.com",
        ],
    )
    def test_valid_urls(self, value: str) -> None:
        """URLs válidas."""
        assert validate_url(value) is True

    def test_missing_scheme_separator(self) -> None:
        """Sem "://"."""
        assert validate_url("htp:/invalid-url") is False

    def test_unsupported_scheme(self) -> None:
        """Esquema fora de http/https/ftp, inclusive maiúsculo."""
        assert validate_url("mailto://example.com") is False
        assert validate_url("HTTPS://example.com") is False

    def test_double_scheme_separator(self) -> None:
        """Mais de um "://"."""
        assert validate_url("http://example.com/redirect?to=http://other.com") is False

    def test_space_rejected(self) -> None:
        """Espaço em qualquer posição."""
        assert validate_url("https://www.exa mple.com") is False

    def test_empty(self) -> None:
        """String vazia."""
        assert validate_url("") is False

    def test_missing_host(self) -> None:
        """Host vazio."""
        assert validate_url("https://") is False
        assert validate_url("https:///path") is False

    @pytest.mark.parametrize("port", ["0", "65536", "99999", "", "abc", "80:90", "-1"])
    def test_invalid_ports(self, port: str) -> None:
        """Portas fora de 1-65535 ou não numéricas."""
        assert validate_url(f"https://example.com:{port}") is False

    @pytest.mark.parametrize("port", ["1" * 5000, "9" * 20, "1" + "0" * 5000])
    def test_huge_ports_return_false(self, port: str) -> None:
        """Portas gigantes retornam False sem levantar."""
        assert validate_url(f"http://example.com:{port}") is False

    def test_zero_padded_port(self) -> None:
        """Zeros à esquerda na porta são aceitos."""
        assert validate_url("http://example.com:" + "0" * 5000 + "80") is True

    def test_invalid_host(self) -> None:
        """Host sem domínio de segundo nível."""
        assert validate_url("https://example") is False
        assert validate_url("https://-bad.example.com") is False

    def test_non_printable_ascii_rejected(self) -> None:
        """Caracteres fora de ASCII 33-126 no caminho."""
        assert validate_url("https://example.com/caminho/ação") is False

    @pytest.mark.parametrize("value", [None, 123, {"url": "x"}])
    def test_wrong_type_returns_false(self, value: object) -> None:
        """Tipos errados retornam False."""
        assert validate_url(value) is False  # type: ignore[arg-type]


class TestIsValidHost:
    """Testes para is_valid_host."""

    def test_localhost(self) -> None:
        """localhost é sempre válido."""
        assert is_valid_host("localhost") is True

    def test_ipv4(self) -> None:
        """Quatro octetos 0-255."""
        assert is_valid_host("192.168.0.1") is True
        assert is_valid_host("0.0.0.0") is True
        assert is_valid_host("255.255.255.255") is True

    @pytest.mark.parametrize("value", ["256.1.1.1", "1..1.1", "1.2.3.", "a.b.c.d", "1.2.3.-4"])
    def test_invalid_ipv4(self, value: str) -> None:
        """Quatro partes são sempre tratadas como IPv4."""
        assert is_valid_host(value) is False

    @pytest.mark.parametrize("octet", ["1" * 5000, "9" * 20])
    def test_huge_octets_return_false(self, octet: str) -> None:
        """Octetos gigantes retornam False sem levantar."""
        assert is_valid_host(f"1.2.3.{octet}") is False
        assert validate_url(f"http://1.2.3.{octet}/") is False

    def test_domain(self) -> None:
        """Domínios com dois ou mais rótulos."""
        assert is_valid_host("example.com") is True
        assert is_valid_host("my-site.example.co") is True

    @pytest.mark.parametrize(
        "value",
        ["", "example", "example.", ".com", "ex_ample.com", "-a.com", "a-.com", "exámple.com"],
    )
    def test_invalid_domain(self, value: str) -> None:
        """Rótulos vazios, hífen nas pontas, caracteres inválidos."""
        assert is_valid_host(value) is False
