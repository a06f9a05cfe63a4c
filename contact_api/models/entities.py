# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Core entity models for the contact form.
"""

from typing import Optional
from pydantic import Field, model_validator

from ..domain import rules
from .base import BaseRecord, utc_now_iso
from .enums import ContactPreference, PersonType, PreferredTime, UrgencyLevel


class ContactSubmission(BaseRecord):
    """A stored contact form submission (lead)."""

    tipo_pessoa: PersonType = Field(..., description="Person type")
    nome_completo: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    telefone: str = Field(..., description="Phone number")
    cpf: Optional[str] = Field(None, description="CPF for Física")
    cnpj: Optional[str] = Field(None, description="CNPJ for Jurídica")
    razao_social: Optional[str] = Field(None, description="Company legal name for Jurídica")
    area_juridica: str = Field(..., description="Legal area of interest")
    descricao_necessidade: str = Field(..., description="Description of the need")
    nivel_urgencia: UrgencyLevel = Field(..., description="Urgency level")
    preferencia_contato: ContactPreference = Field(..., description="Contact preference")
    horario_preferencial: PreferredTime = Field(..., description="Preferred time window")
    aceite_termos: bool = Field(..., description="Terms acceptance")
    aceite_newsletter: bool = Field(False, description="Newsletter opt-in")
    data_submissao: str = Field(default_factory=utc_now_iso, description="Submission timestamp")
    ip_usuario: str = Field(..., description="Submitter network address")
    origem: str = Field(..., description="Acquisition source tag")
    protocolo: str = Field(..., description="Protocol number shown to the submitter")

    @model_validator(mode='after')
    def validate_identity_branch(self):
        """Exactly one identity branch, chosen by tipo_pessoa."""
        if self.tipo_pessoa == PersonType.FISICA:
            if not self.cpf or self.cnpj or self.razao_social:
                raise ValueError('Física records carry a CPF and no company data')
        else:
            if not self.cnpj or not self.razao_social or self.cpf:
                raise ValueError('Jurídica records carry CNPJ and razão social and no CPF')
        return self

    @property
    def first_name(self) -> str:
        return rules.first_name(self.nome_completo)
