# SPDX-License-Identifier: Apache-2.0

"""
Contact form rule definitions.

Single source of the field limits, formats and messages. The request schema
(server, authoritative) and the API client (advisory) are both built from
these values.
"""

import re

CONTACT_FORM_LIMITS = {
    "NOME_MIN_LENGTH": 5,
    "NOME_MAX_LENGTH": 100,
    "NOME_MIN_TOKENS": 2,
    "EMAIL_MAX_LENGTH": 100,
    "RAZAO_SOCIAL_MIN_LENGTH": 5,
    "RAZAO_SOCIAL_MAX_LENGTH": 150,
    "DESCRICAO_MIN_LENGTH": 20,
    "DESCRICAO_MAX_LENGTH": 2000,
}

PHONE_PATTERN = re.compile(r'\([0-9]{2}\)\s[0-9]{4,5}-[0-9]{4}')

# local@domain.tld
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')

SUBMISSION_SOURCE = "landing-page"


class Messages:
    """User-facing validation messages (pt-BR)."""

    TIPO_PESSOA = "Selecione o tipo de pessoa"
    NOME_REQUIRED = "Por favor, informe seu nome completo"
    NOME_TOO_LONG = "Nome muito longo"
    NOME_SOBRENOME = "Informe nome e sobrenome"
    EMAIL_REQUIRED = "Por favor, informe seu email"
    EMAIL_INVALID = "Por favor, informe um email válido"
    EMAIL_TOO_LONG = "Email muito longo"
    TELEFONE_REQUIRED = "Por favor, informe seu telefone"
    TELEFONE_INVALID = "Informe um telefone válido no formato (XX) XXXXX-XXXX"
    CPF_INVALID = "Informe um CPF válido"
    CPF_REQUIRED = "CPF é obrigatório para pessoa física"
    CNPJ_INVALID = "Informe um CNPJ válido"
    CNPJ_REQUIRED = "CNPJ é obrigatório para pessoa jurídica"
    RAZAO_SOCIAL_REQUIRED = "Razão social é obrigatória para pessoa jurídica"
    RAZAO_SOCIAL_LENGTH = "Por favor, informe a razão social da empresa"
    AREA_JURIDICA_REQUIRED = "Por favor, selecione a área jurídica de interesse"
    DESCRICAO_TOO_SHORT = "Por favor, forneça mais detalhes sobre sua necessidade"
    DESCRICAO_TOO_LONG = "Descrição muito longa"
    NIVEL_URGENCIA = "Selecione o nível de urgência"
    PREFERENCIA_CONTATO = "Selecione a preferência de contato"
    HORARIO_PREFERENCIAL = "Selecione o horário preferencial"
    ACEITE_TERMOS = "É necessário aceitar os termos de uso e política de privacidade"
    CAPTCHA = "Por favor, complete a verificação de segurança"


def has_first_and_last_name(value: str) -> bool:
    """True when the trimmed name holds at least two whitespace-separated tokens."""
    return len(value.split()) >= CONTACT_FORM_LIMITS["NOME_MIN_TOKENS"]


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(value))


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def first_name(full_name: str) -> str:
    """First whitespace-separated token of a name; empty for a blank name."""
    parts = full_name.split()
    return parts[0] if parts else ""
