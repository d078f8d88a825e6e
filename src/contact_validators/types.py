"""Tipos anotados pydantic construídos sobre os validadores.

Uso em modelos de domínio:

    from pydantic import BaseModel
    from contact_validators.types import CPF, EmailAddress

    class Lead(BaseModel):
        cpf: CPF
        email: EmailAddress | None = None

Valores inválidos viram pydantic.ValidationError; a mensagem nunca inclui
o valor recebido (PII).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import AfterValidator

from contact_validators.dates import validate_date
from contact_validators.emails import validate_email
from contact_validators.errors import InvalidFieldError
from contact_validators.names import validate_full_name
from contact_validators.postal_codes import validate_cep
from contact_validators.tax_ids import validate_cnpj, validate_cpf
from contact_validators.urls import validate_url

if TYPE_CHECKING:
    from collections.abc import Callable


def _checked(predicate: Callable[[str], bool], label: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if not predicate(value):
            raise InvalidFieldError(f"{label} inválido")
        return value

    check.__name__ = f"check_{label.lower().replace(' ', '_')}"
    return check


EmailAddress = Annotated[str, AfterValidator(_checked(validate_email, "E-mail"))]
CPF = Annotated[str, AfterValidator(_checked(validate_cpf, "CPF"))]
CNPJ = Annotated[str, AfterValidator(_checked(validate_cnpj, "CNPJ"))]
CEP = Annotated[str, AfterValidator(_checked(validate_cep, "CEP"))]
FullName = Annotated[str, AfterValidator(_checked(validate_full_name, "Nome completo"))]
WebUrl = Annotated[str, AfterValidator(_checked(validate_url, "URL"))]
IsoDate = Annotated[str, AfterValidator(_checked(validate_date, "Data"))]

__all__ = [
    "CEP",
    "CNPJ",
    "CPF",
    "EmailAddress",
    "FullName",
    "IsoDate",
    "WebUrl",
]
