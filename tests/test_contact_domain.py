# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for protocol, deadline, redirect and record assembly helpers.
"""

import pytest

from contact_api.domain import contact, rules
from contact_api.models.requests import ContactFormSubmitRequest


class TestProtocol:
    """Test protocol generation."""

    def test_format(self):
        protocol = contact.generate_protocol(now_ms=1700000000123, randint=lambda a, b: 42)
        assert protocol == "PAN-1700000000123-0042"

    def test_suffix_bounds(self):
        assert contact.generate_protocol(now_ms=1, randint=lambda a, b: a).endswith("-0000")
        assert contact.generate_protocol(now_ms=1, randint=lambda a, b: b).endswith("-9999")

    def test_default_sources_match_pattern(self):
        for _ in range(20):
            assert contact.PROTOCOL_PATTERN.fullmatch(contact.generate_protocol())


class TestReturnDeadline:
    """Test urgency to return-time mapping."""

    @pytest.mark.parametrize("urgency,expected", [
        ("Emergencial", "até 4 horas úteis"),
        ("Alta", "até 24 horas úteis"),
        ("Média", "até 48 horas úteis"),
        ("Baixa", "até 72 horas úteis"),
        ("Qualquer", "em breve"),
    ])
    def test_mapping(self, urgency, expected):
        assert contact.get_return_deadline(urgency) == expected


class TestRedirectUrl:
    """Test the thank-you redirect URL."""

    def test_plain_values(self):
        url = contact.build_redirect_url("PAN-1-0001", "Maria", "Alta")
        assert url == "/obrigado?p=PAN-1-0001&n=Maria&u=Alta"

    def test_values_are_percent_encoded(self):
        url = contact.build_redirect_url("PAN-1-0001", "José", "Média")
        assert url == "/obrigado?p=PAN-1-0001&n=Jos%C3%A9&u=M%C3%A9dia"

    def test_reserved_characters_are_encoded(self):
        url = contact.build_redirect_url("PAN-1-0001", "A&B=C", "Alta")
        assert "n=A%26B%3DC" in url

    def test_first_name(self):
        assert rules.first_name("  Maria   da Silva ") == "Maria"
        assert rules.first_name("") == ""


class TestBuildSubmission:
    """Test record assembly."""

    def test_system_fields(self, fisica_payload):
        form = ContactFormSubmitRequest(**fisica_payload)
        record = contact.build_submission(
            form, 7, "PAN-1-0001", "203.0.113.9", submitted_at="2024-01-01T00:00:00.000Z"
        )

        assert record.id == 7
        assert record.protocolo == "PAN-1-0001"
        assert record.ip_usuario == "203.0.113.9"
        assert record.origem == "landing-page"
        assert record.data_submissao == "2024-01-01T00:00:00.000Z"
        assert record.aceite_termos is True

    def test_fisica_drops_company_fields(self, fisica_payload):
        fisica_payload["razao_social"] = "Empresa Qualquer Ltda"
        form = ContactFormSubmitRequest(**fisica_payload)
        record = contact.build_submission(form, 1, "PAN-1-0001", "127.0.0.1")

        assert record.cpf == fisica_payload["cpf"]
        assert record.cnpj is None
        assert record.razao_social is None

    def test_juridica_drops_cpf(self, juridica_payload):
        juridica_payload["cpf"] = "529.982.247-25"
        form = ContactFormSubmitRequest(**juridica_payload)
        record = contact.build_submission(form, 1, "PAN-1-0001", "127.0.0.1")

        assert record.cpf is None
        assert record.cnpj == juridica_payload["cnpj"]
        assert record.razao_social == juridica_payload["razao_social"]
        assert record.aceite_newsletter is True
