# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the contact form.

Values are the literal pt-BR strings exchanged with the frontend.
"""

from enum import Enum


class PersonType(str, Enum):
    """Submitter classification; selects the required identity branch."""
    FISICA = "Física"
    JURIDICA = "Jurídica"


class UrgencyLevel(str, Enum):
    """Urgency declared by the submitter."""
    BAIXA = "Baixa"
    MEDIA = "Média"
    ALTA = "Alta"
    EMERGENCIAL = "Emergencial"


class ContactPreference(str, Enum):
    """Preferred contact channel."""
    TELEFONE = "Telefone"
    EMAIL = "Email"
    WHATSAPP = "WhatsApp"
    PRESENCIAL = "Presencial"


class PreferredTime(str, Enum):
    """Preferred time window for the office to get back."""
    MANHA = "Manhã (8h-12h)"
    TARDE = "Tarde (12h-18h)"
    NOITE = "Noite (18h-20h)"


class LegalArea(str, Enum):
    """Legal areas offered by the form select (advisory for the server)."""
    CIVIL = "Direito Civil"
    TRABALHISTA = "Direito Trabalhista"
    EMPRESARIAL = "Direito Empresarial"
    TRIBUTARIO = "Direito Tributário"
    PENAL = "Direito Penal"
    FAMILIA = "Direito de Família"
    IMOBILIARIO = "Direito Imobiliário"
    OUTRO = "Outro"
