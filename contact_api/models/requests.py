# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request models for API endpoints.

ContactFormSubmitRequest is the authoritative schema for the public contact
form. Every rule comes from domain.rules / domain.documents so that the API
client validates with exactly the same constraints.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..domain import documents, rules
from ..domain.rules import (
    CONTACT_FORM_LIMITS,
    Messages,
    has_first_and_last_name,
    is_valid_email,
    is_valid_phone,
)
from .enums import ContactPreference, PersonType, PreferredTime, UrgencyLevel

LIMITS = CONTACT_FORM_LIMITS


def _fail(error_type: str, message: str):
    raise PydanticCustomError(error_type, message)


def _check_choice(value: Any, enum_cls, message: str) -> Any:
    if value not in [member.value for member in enum_cls]:
        _fail("invalid_choice", message)
    return value


class ContactFormSubmitRequest(BaseModel):
    """Request model for a contact form submission."""

    model_config = ConfigDict(
        use_enum_values=True,
        extra='ignore',
    )

    tipo_pessoa: PersonType = Field(..., description="Person type (Física | Jurídica)")
    nome_completo: str = Field(..., description="Full name, first and last")
    email: str = Field(..., description="Email address")
    telefone: str = Field(..., description="Phone number, (XX) XXXXX-XXXX")
    cpf: Optional[str] = Field(None, validate_default=True, description="CPF (Física only)")
    cnpj: Optional[str] = Field(None, validate_default=True, description="CNPJ (Jurídica only)")
    razao_social: Optional[str] = Field(
        None, validate_default=True, description="Company legal name (Jurídica only)"
    )
    area_juridica: str = Field(..., description="Legal area of interest")
    descricao_necessidade: str = Field(..., description="Description of the need")
    nivel_urgencia: UrgencyLevel = Field(..., description="Urgency level")
    preferencia_contato: ContactPreference = Field(..., description="Contact preference")
    horario_preferencial: PreferredTime = Field(..., description="Preferred time window")
    aceite_termos: Optional[bool] = Field(
        None, validate_default=True, description="Terms acceptance (must be true)"
    )
    aceite_newsletter: bool = Field(False, strict=True, description="Newsletter opt-in")
    captcha: str = Field(..., description="Captcha verification token")

    @field_validator('tipo_pessoa', mode='before')
    @classmethod
    def validate_tipo_pessoa(cls, v):
        return _check_choice(v, PersonType, Messages.TIPO_PESSOA)

    @field_validator('nivel_urgencia', mode='before')
    @classmethod
    def validate_nivel_urgencia(cls, v):
        return _check_choice(v, UrgencyLevel, Messages.NIVEL_URGENCIA)

    @field_validator('preferencia_contato', mode='before')
    @classmethod
    def validate_preferencia_contato(cls, v):
        return _check_choice(v, ContactPreference, Messages.PREFERENCIA_CONTATO)

    @field_validator('horario_preferencial', mode='before')
    @classmethod
    def validate_horario_preferencial(cls, v):
        return _check_choice(v, PreferredTime, Messages.HORARIO_PREFERENCIAL)

    @field_validator('nome_completo')
    @classmethod
    def validate_nome_completo(cls, v):
        """Validate full name length (after trimming) and first/last name."""
        v = v.strip()
        if len(v) < LIMITS["NOME_MIN_LENGTH"]:
            _fail("too_short", Messages.NOME_REQUIRED)
        if len(v) > LIMITS["NOME_MAX_LENGTH"]:
            _fail("too_long", Messages.NOME_TOO_LONG)
        if not has_first_and_last_name(v):
            _fail("first_and_last_name", Messages.NOME_SOBRENOME)
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Validate email format."""
        if not v:
            _fail("missing", Messages.EMAIL_REQUIRED)
        if len(v) > LIMITS["EMAIL_MAX_LENGTH"]:
            _fail("too_long", Messages.EMAIL_TOO_LONG)
        if not is_valid_email(v):
            _fail("invalid_email", Messages.EMAIL_INVALID)
        return v

    @field_validator('telefone')
    @classmethod
    def validate_telefone(cls, v):
        if not v:
            _fail("missing", Messages.TELEFONE_REQUIRED)
        if not is_valid_phone(v):
            _fail("invalid_phone", Messages.TELEFONE_INVALID)
        return v

    @field_validator('cpf', 'cnpj', 'razao_social', mode='before')
    @classmethod
    def blank_as_missing(cls, v):
        """Empty inputs from the unused identity branch count as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v, info: ValidationInfo):
        """Require a checksum-valid CPF for Física."""
        if v is None:
            if info.data.get('tipo_pessoa') == PersonType.FISICA:
                _fail("required_for_person_type", Messages.CPF_REQUIRED)
            return v
        if not documents.CPF_PATTERN.fullmatch(v) or not documents.is_valid_cpf(v):
            _fail("invalid_cpf", Messages.CPF_INVALID)
        return v

    @field_validator('cnpj')
    @classmethod
    def validate_cnpj(cls, v, info: ValidationInfo):
        """Require a checksum-valid CNPJ for Jurídica."""
        if v is None:
            if info.data.get('tipo_pessoa') == PersonType.JURIDICA:
                _fail("required_for_person_type", Messages.CNPJ_REQUIRED)
            return v
        if not documents.CNPJ_PATTERN.fullmatch(v) or not documents.is_valid_cnpj(v):
            _fail("invalid_cnpj", Messages.CNPJ_INVALID)
        return v

    @field_validator('razao_social')
    @classmethod
    def validate_razao_social(cls, v, info: ValidationInfo):
        if v is None:
            if info.data.get('tipo_pessoa') == PersonType.JURIDICA:
                _fail("required_for_person_type", Messages.RAZAO_SOCIAL_REQUIRED)
            return v
        v = v.strip()
        if not LIMITS["RAZAO_SOCIAL_MIN_LENGTH"] <= len(v) <= LIMITS["RAZAO_SOCIAL_MAX_LENGTH"]:
            _fail("invalid_length", Messages.RAZAO_SOCIAL_LENGTH)
        return v

    @field_validator('area_juridica')
    @classmethod
    def validate_area_juridica(cls, v):
        v = v.strip()
        if not v:
            _fail("missing", Messages.AREA_JURIDICA_REQUIRED)
        return v

    @field_validator('descricao_necessidade')
    @classmethod
    def validate_descricao(cls, v):
        """Validate description length bounds."""
        if len(v) < LIMITS["DESCRICAO_MIN_LENGTH"]:
            _fail("too_short", Messages.DESCRICAO_TOO_SHORT)
        if len(v) > LIMITS["DESCRICAO_MAX_LENGTH"]:
            _fail("too_long", Messages.DESCRICAO_TOO_LONG)
        return v

    @field_validator('aceite_termos', mode='before')
    @classmethod
    def validate_aceite_termos(cls, v):
        """Terms must be the literal boolean true; anything else fails."""
        if v is not True:
            _fail("terms_not_accepted", Messages.ACEITE_TERMOS)
        return v

    @property
    def first_name(self) -> str:
        return rules.first_name(self.nome_completo)
