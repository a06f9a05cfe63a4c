# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from typing import Dict, Any

# Set test environment
os.environ['ENVIRONMENT'] = 'test'
os.environ['OTEL_ENABLED'] = 'false'

from contact_api.app import create_app
from contact_api.config import Settings
from contact_api.services.contact_form import ContactFormService
from contact_api.services.store import ContactFormStore

FRONTEND_ORIGIN = "https://www.example-advocacia.com.br"

# Checksum-valid documents
VALID_CPF = "529.982.247-25"
VALID_CNPJ = "11.222.333/0001-81"


@pytest.fixture
def test_settings():
    """Settings for an isolated test application."""
    return Settings(
        environment='test',
        otel_enabled=False,
        cors_allowed_origins=[FRONTEND_ORIGIN],
        team_notification_emails=["equipe@example-advocacia.com.br"]
    )


@pytest.fixture
def store():
    """Fresh in-memory store per test."""
    return ContactFormStore()


@pytest.fixture
def service(store):
    """Contact form service with the default logging collaborators."""
    return ContactFormService(store=store)


@pytest.fixture
def app(test_settings, service):
    """Flask application wired to the per-test service."""
    return create_app(test_settings, contact_form_service=service)


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def fisica_payload() -> Dict[str, Any]:
    """Valid submission from an individual (Física)."""
    return {
        "tipo_pessoa": "Física",
        "nome_completo": "Maria Silva",
        "email": "maria@x.com",
        "telefone": "(11) 98765-4321",
        "cpf": VALID_CPF,
        "area_juridica": "Direito Civil",
        "descricao_necessidade": "Preciso de orientação sobre contrato de locação residencial.",
        "nivel_urgencia": "Alta",
        "preferencia_contato": "Email",
        "horario_preferencial": "Tarde (12h-18h)",
        "aceite_termos": True,
        "captcha": "abc"
    }


@pytest.fixture
def juridica_payload() -> Dict[str, Any]:
    """Valid submission from a company (Jurídica)."""
    return {
        "tipo_pessoa": "Jurídica",
        "nome_completo": "Carlos Pereira",
        "email": "carlos@empresa.com.br",
        "telefone": "(21) 3456-7890",
        "cnpj": VALID_CNPJ,
        "razao_social": "Pereira Comércio de Alimentos Ltda",
        "area_juridica": "Direito Empresarial",
        "descricao_necessidade": "Revisão de contrato social e acordo de quotistas.",
        "nivel_urgencia": "Média",
        "preferencia_contato": "Telefone",
        "horario_preferencial": "Manhã (8h-12h)",
        "aceite_termos": True,
        "aceite_newsletter": True,
        "captcha": "token-123"
    }
