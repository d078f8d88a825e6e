"""Validadores de dados de contato: e-mail, CPF, CNPJ, datas, CEP, nome e URL.

Todos os predicados são funções puras que retornam bool para qualquer
entrada, inclusive None ou tipos errados; nenhum levanta exceção.

Uso:
    from contact_validators import validate_cpf, validate_birth_date, DateFormat

    validate_cpf("123.456.789-09")  # True
    validate_birth_date("01/01/2000", 18, DateFormat.DD_MM_YYYY)
"""

from contact_validators.dates import (
    calculate_age,
    parse_date,
    validate_birth_date,
    validate_date,
)
from contact_validators.emails import validate_email
from contact_validators.formats import DEFAULT_DATE_FORMAT, DateFormat
from contact_validators.names import validate_full_name
from contact_validators.postal_codes import validate_cep
from contact_validators.tax_ids import validate_cnpj, validate_cpf
from contact_validators.urls import is_valid_host, validate_url

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DateFormat",
    "calculate_age",
    "is_valid_host",
    "parse_date",
    "validate_birth_date",
    "validate_cep",
    "validate_cnpj",
    "validate_cpf",
    "validate_date",
    "validate_email",
    "validate_full_name",
    "validate_url",
]
